"""Password rule checks: allowed characters, length and complexity."""

import re

from ascendkit.textutil import reverse_string

_COMPLEXITY_PATTERNS = (
    re.compile(rb"[a-z]+"),
    re.compile(rb"[A-Z]+"),
    re.compile(rb"[0-9]+"),
    re.compile(rb"""[!"#$%&'()*+,\-. /:;<=>?@\[\\\]^_`{|}~]+"""),
)
_ALLOWED_PATTERN = re.compile(
    rb"""[a-zA-Z0-9!"#$%&'()*+,\-. /:;<=>?@\[\\\]^_`{|}~]{8,64}"""
)
_MIN_COMPLEX_COUNT = 2


class PasswordError(ValueError):
    """Raised when a password does not meet the requirements."""


def _as_bytes(value: "bytes | str") -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def check_password_complexity(password: "bytes | str") -> None:
    """Require at least two of: lower case, upper case, digits, special characters."""
    data = _as_bytes(password)
    count = sum(1 for pattern in _COMPLEXITY_PATTERNS if pattern.search(data))
    if count < _MIN_COMPLEX_COUNT:
        raise PasswordError("password complex not meet the requirement")


def _common_check(user_name: str, data: bytes) -> None:
    if not _ALLOWED_PATTERN.fullmatch(data):
        raise PasswordError("password not meet requirement")
    if user_name.encode("utf-8") == data:
        raise PasswordError("password cannot equals username")
    if reverse_string(user_name).encode("utf-8") == data:
        raise PasswordError("password cannot equal reversed username")


def validate_password(user_name: str, password: "bytes | str") -> None:
    """Check a password against the character, user-name and complexity rules."""
    data = _as_bytes(password)
    _common_check(user_name, data)
    check_password_complexity(data)