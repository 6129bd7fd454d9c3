"""
Raw text ingestion.

Detects whether pasted data is JSON or CSV and turns it into an ordered list
of flat records. Detection is JSON-first with a CSV fallback: text that looks
like JSON but fails to decode is re-read as CSV.
"""

import json
from typing import Any

from loguru import logger

from .values import MISSING, Record, coerce_value

JSON_PREFIXES = ("[", "{")


def parse(raw: str, skip_blank_lines: bool = False) -> list[Record]:
    """
    Parse CSV or JSON text into records.

    Never raises for malformed input; an empty list means nothing could be
    interpreted.

    Args:
        raw: Pasted CSV or JSON text
        skip_blank_lines: Drop blank CSV data lines instead of turning them
            into records with an empty first field

    Returns:
        Records in input order

    """
    text = (raw or "").strip()
    if not text:
        return []

    if text.startswith(JSON_PREFIXES):
        records = parse_json(text)
        if records is not None:
            return records
        logger.debug("Input looked like JSON but did not decode, trying CSV")

    return parse_csv(text, skip_blank_lines=skip_blank_lines)


def parse_json(text: str) -> list[Record] | None:
    """
    Decode a JSON document into records.

    Args:
        text: Trimmed JSON text

    Returns:
        Records, or None when the text is not valid JSON

    """
    try:
        document = json.loads(text)
    except ValueError:
        return None

    if not isinstance(document, list):
        document = [document]

    records = []
    for element in document:
        record = _json_record(element)
        if record:
            records.append(record)
    return records


def _json_record(element: Any) -> Record:
    if not isinstance(element, dict):
        return {}
    return {str(name): coerce_value(value) for name, value in element.items()}


def parse_csv(text: str, skip_blank_lines: bool = False) -> list[Record]:
    """
    Split comma-separated text into records keyed by the header line.

    Quoting is not supported: every comma separates a cell. Rows shorter than
    the header leave their trailing fields missing; extra cells are ignored.

    Args:
        text: Trimmed CSV text
        skip_blank_lines: Drop blank data lines

    Returns:
        Records, or an empty list when there is no data line

    """
    lines = text.split("\n")
    if len(lines) < 2:
        return []

    header = [token.strip() for token in lines[0].split(",")]

    records = []
    for line in lines[1:]:
        if skip_blank_lines and not line.strip():
            continue
        cells = [token.strip() for token in line.split(",")]
        record = {}
        for index, name in enumerate(header):
            if index < len(cells):
                record[name] = coerce_value(cells[index])
            else:
                record[name] = MISSING
        records.append(record)

    logger.debug(f"Parsed {len(records)} CSV records with header {header}")
    return records
