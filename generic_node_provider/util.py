"""Small utility helpers used across the provider."""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Conversions
# -----------------------------------------------------------------------------


def to_index(token: str, length: int) -> int | None:
    """Convert a path token to a list index.

    Only canonical non-negative integer strings count ("0", "12"); padded,
    signed, or zero-prefixed tokens do not name an array element.

    Args:
        token: Path token.
        length: Length of the list being indexed.

    Returns:
        The index when the token names an existing element; otherwise `None`.
    """
    if not token.isascii() or not token.isdigit():
        return None
    if len(token) > 1 and token.startswith("0"):
        return None
    index = int(token)
    return index if index < length else None
