"""Small string helpers: prefix masking, hashing and reversal."""

import hashlib

_MASK_LEN = 2
_DEFAULT_MASK = "****"

SPLIT_FLAG = "\n</=--*^^||^^--*=/>"


def replace_prefix(source: str, prefix: str = "") -> str:
    """Replace the first two characters of ``source`` with ``prefix``.

    An empty prefix means ``"****"``. Strings of two bytes or fewer are
    replaced entirely.
    """
    if not prefix:
        prefix = _DEFAULT_MASK
    if len(source.encode("utf-8")) <= _MASK_LEN:
        return prefix
    return prefix + source[_MASK_LEN:]


def mask_prefix(source: str) -> str:
    """Mask the first two characters of ``source`` with ``"****"``."""
    return replace_prefix(source, "")


def get_sha256_code(data: bytes) -> bytes:
    """Return the raw SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]