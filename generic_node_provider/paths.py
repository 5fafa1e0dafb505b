"""Property path compilation and resolution.

A property path is a dotted string such as ``"node.ips.0"`` naming the keys
and list indices to walk inside one JSON record. Paths are compiled once into
token tuples and resolved per record.

This module does not perform network I/O.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, cast

from .const import PATH_SEPARATOR
from .util import to_index

CompiledPath = tuple[str, ...]

# -----------------------------------------------------------------------------
# Compilation
# -----------------------------------------------------------------------------


def compile_property_path(raw_path: str) -> CompiledPath:
    """Compile a dotted property path into traversal tokens.

    Tokens are not validated; a token naming a field that does not exist is a
    resolution miss, not a compile error.

    Args:
        raw_path: Dotted path. The empty string means "the whole record".

    Returns:
        Tuple of tokens; empty for the empty string.
    """
    if not raw_path:
        return ()
    return tuple(raw_path.split(PATH_SEPARATOR))


# -----------------------------------------------------------------------------
# Resolution
# -----------------------------------------------------------------------------


def _child(value: Any, token: str) -> tuple[bool, Any]:
    if isinstance(value, Mapping):
        mapping = cast(Mapping[str, Any], value)
        if token in mapping:
            return True, mapping[token]
        return False, None

    if isinstance(value, (list, tuple)):
        items = cast(Sequence[Any], value)
        index = to_index(token, len(items))
        if index is not None:
            return True, items[index]
        return False, None

    return False, None


def resolve_property_path(value: Any, path: Sequence[str]) -> Any | None:
    """Walk a JSON-like value along a compiled path.

    Args:
        value: Parsed JSON value (usually one record).
        path: Compiled path tokens.

    Returns:
        The value at the end of the path, `value` itself for an empty path, or
        `None` when a key or index along the way is missing or the current
        value cannot be indexed.
    """
    current = value
    for token in path:
        found, current = _child(current, token)
        if not found:
            return None
    return current
