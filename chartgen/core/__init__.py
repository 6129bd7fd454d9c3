"""Ingestion, schema inference and render selection."""

from .parser import parse
from .pipeline import ChartPipeline, ChartResult, ChartState
from .render import PALETTE, select_render, select_render_for_keys
from .schema import Schema, infer_categorical_key, infer_numeric_keys, infer_schema
from .values import NumberValue, OpaqueValue, Record, StringValue, coerce_value

__all__ = [
    "parse",
    "ChartPipeline",
    "ChartResult",
    "ChartState",
    "PALETTE",
    "select_render",
    "select_render_for_keys",
    "Schema",
    "infer_categorical_key",
    "infer_numeric_keys",
    "infer_schema",
    "NumberValue",
    "OpaqueValue",
    "Record",
    "StringValue",
    "coerce_value",
]
