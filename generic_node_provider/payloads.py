"""Response payload parsing.

Fetched bodies arrive either as text or as an already-decoded JSON value.
Parsing is split into two stages (decode, then shape check) and reports a
tagged result so callers do not need to inspect exception types.

This module does not perform network I/O.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, cast

from .const import MSG_NOT_ARRAY, MSG_NOT_JSON

# -----------------------------------------------------------------------------
# Results
# -----------------------------------------------------------------------------


class RecordsError(Enum):
    """Why a body could not be turned into records."""

    NOT_JSON = MSG_NOT_JSON
    NOT_ARRAY = MSG_NOT_ARRAY


@dataclass(frozen=True)
class RecordsResult:
    """Outcome of parsing a response body.

    Attributes:
        records: Parsed records when `error` is `None`.
        error: Failure kind, or `None` on success.
    """

    records: list[Any] = field(default_factory=list)
    error: RecordsError | None = None


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name}")


def loads_json(text: str) -> Any:
    """Decode JSON text strictly.

    `NaN` and `Infinity` literals are rejected, as are documents nested too
    deeply to decode.

    Raises:
        ValueError: If `text` is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as err:
        raise ValueError("JSON nested too deeply") from err


def decode_body(body: Any) -> tuple[bool, Any]:
    """Decode a text body as JSON; pass other values through.

    Args:
        body: Raw body returned by the fetch capability.

    Returns:
        `(True, value)` on success, `(False, None)` when `body` is text that is
        not valid JSON.
    """
    if not isinstance(body, (str, bytes, bytearray)):
        return True, body
    try:
        if not isinstance(body, str):
            body = bytes(body).decode("utf-8")
        return True, loads_json(body)
    except ValueError:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors.
        return False, None


def parse_node_records(body: Any) -> RecordsResult:
    """Turn a fetched body into the list of node records.

    Args:
        body: Text or decoded JSON value.

    Returns:
        A `RecordsResult` holding the records or the failure kind.
    """
    decoded, value = decode_body(body)
    if not decoded:
        return RecordsResult(error=RecordsError.NOT_JSON)
    if not isinstance(value, (list, tuple)):
        return RecordsResult(error=RecordsError.NOT_ARRAY)
    return RecordsResult(records=list(cast(list[Any], value)))
