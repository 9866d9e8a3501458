"""Storage key generation for uploaded files."""

from uuid import uuid4


def generate_key(original_filename: str) -> str:
    """Return ``<uuid4>_<original_filename>``.

    The filename is appended verbatim, empty string included. Each call is
    independent, so concurrent uploads need no coordination.
    """
    return f"{uuid4()}_{original_filename}"


__all__ = ["generate_key"]
