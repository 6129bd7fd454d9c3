"""
Schema inference over parsed records.

Only the first record is inspected: it acts as the template for the whole
sequence and later records are never reconciled against it.
"""

from dataclasses import dataclass, field

from .values import NumberValue, Record, StringValue


@dataclass(frozen=True)
class Schema:
    """Axis and series fields inferred from the first record."""

    categorical_key: str | None = None
    numeric_keys: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serialize for JSON responses."""
        return {
            "categorical_key": self.categorical_key,
            "numeric_keys": list(self.numeric_keys),
        }


def infer_numeric_keys(records: list[Record]) -> list[str]:
    """Return the fields of the first record holding numbers, in order."""
    if not records:
        return []
    return [
        name for name, value in records[0].items() if isinstance(value, NumberValue)
    ]


def infer_categorical_key(records: list[Record]) -> str | None:
    """
    Return the field used as the chart's category axis.

    The first string-valued field of the first record wins. Without one, the
    first field is used whatever its type.

    Args:
        records: Parsed records

    Returns:
        Field name, or None for no records or a field-less first record

    """
    if not records:
        return None

    template = records[0]
    for name, value in template.items():
        if isinstance(value, StringValue):
            return name

    return next(iter(template), None)


def infer_schema(records: list[Record]) -> Schema:
    """
    Infer the categorical key and plottable series together.

    When the categorical key is a fallback (the first record has no string
    field) and other numeric fields exist, it is kept off the series list so
    that it only labels the axis. A lone numeric field stays on both.

    Args:
        records: Parsed records

    Returns:
        Inferred schema

    """
    categorical_key = infer_categorical_key(records)
    numeric_keys = infer_numeric_keys(records)

    if categorical_key in numeric_keys and len(numeric_keys) > 1:
        numeric_keys = [key for key in numeric_keys if key != categorical_key]

    return Schema(categorical_key=categorical_key, numeric_keys=tuple(numeric_keys))
