"""
Tagged cell values produced by the parser.

Every cell of an ingested record is one of three variants:

- ``NumberValue``: a numeric cell (JSON numbers and numeric-looking strings)
- ``StringValue``: any other string
- ``OpaqueValue``: JSON booleans, nulls, nested arrays/objects and CSV cells
  missing from a short row

``coerce_value`` is the single place where raw Python values are turned into
variants, so schema inference and rendering only ever check the variant type.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class NumberValue:
    """Numeric cell."""

    value: int | float


@dataclass(frozen=True)
class StringValue:
    """Textual cell that did not convert to a number."""

    value: str


@dataclass(frozen=True)
class OpaqueValue:
    """Cell passed through untouched (bool, None, list, dict)."""

    value: Any = None


Value = Union[NumberValue, StringValue, OpaqueValue]
Record = dict[str, Value]

MISSING = OpaqueValue(None)


def to_number(text: str) -> int | float | None:
    """
    Convert a string to a number, or return None when it is not numeric.

    Integral text stays ``int``; ``"1e3"``, ``"007"`` and ``"-.5"`` are all
    accepted. Blank strings, ``"nan"`` and digit-grouped text such as
    ``"1_000"`` are not numeric.

    Args:
        text: Raw string value

    Returns:
        Parsed number or None

    """
    candidate = text.strip()
    if not candidate or "_" in candidate:
        return None

    try:
        return int(candidate)
    except ValueError:
        pass

    try:
        number = float(candidate)
    except ValueError:
        return None

    if math.isnan(number):
        return None
    return number


def coerce_value(raw: Any) -> Value:
    """
    Wrap a raw JSON or CSV value in its tagged variant.

    Only strings are coercion candidates: a numeric-looking string becomes a
    ``NumberValue``, anything else stays a ``StringValue``. ``bool`` is
    checked before numbers because it subclasses ``int``.

    Args:
        raw: Value decoded from JSON or a trimmed CSV token

    Returns:
        Tagged value

    """
    if isinstance(raw, str):
        number = to_number(raw)
        if number is None:
            return StringValue(raw)
        return NumberValue(number)
    if isinstance(raw, bool):
        return OpaqueValue(raw)
    if isinstance(raw, (int, float)):
        return NumberValue(raw)
    return OpaqueValue(raw)


def plain_value(value: Value) -> Any:
    """Unwrap a tagged value back to its plain Python value."""
    return value.value


def record_to_plain(record: Mapping[str, Value]) -> dict[str, Any]:
    """Unwrap every value of a record, keeping field order."""
    return {name: plain_value(value) for name, value in record.items()}
