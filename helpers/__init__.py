"""
BrainLink Helpers Package

Shared helpers used by the views and services:
- auth: bearer token verification and the token_required decorator
- errors: API error types and JSON error handlers
- identifiers: record ids and share codes
"""

from .auth import AuthContext, IdentityVerifier, token_required
from .errors import APIError, register_error_handlers
from .identifiers import new_object_id, random_code

__all__ = [
    "AuthContext",
    "IdentityVerifier",
    "token_required",
    "APIError",
    "register_error_handlers",
    "new_object_id",
    "random_code",
]
