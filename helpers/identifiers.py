"""
Identifier helpers for records and share codes.

Record ids are 24-character hexadecimal strings. Share codes are short
random alphanumeric strings handed out to the public.
"""

import re
import secrets
import string

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

SHARE_CODE_LENGTH = 10
SHARE_CODE_ALPHABET = string.ascii_letters + string.digits
SHARE_CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{%d}$" % SHARE_CODE_LENGTH)


def new_object_id() -> str:
    """Return a fresh 24-character lowercase hex identifier."""
    return secrets.token_hex(12)


def is_object_id(value) -> bool:
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value))


def random_code(length: int = SHARE_CODE_LENGTH) -> str:
    """Generate a random alphanumeric share code."""
    return "".join(secrets.choice(SHARE_CODE_ALPHABET) for _ in range(length))


def is_share_code(value) -> bool:
    return isinstance(value, str) and bool(SHARE_CODE_PATTERN.match(value))
