"""
Store access services.

Each service is built around an explicit SQLAlchemy session so callers decide
which database handle it talks to.
"""

from .results import Outcome, StoreResult

__all__ = ["Outcome", "StoreResult"]
