"""
ChartGen: turn pasted CSV or JSON into chart rendering parameters.

Typical use::

    from chartgen import parse, infer_schema, select_render

    records = parse("Year,Sales,Profit\\n2020,100,50\\n2021,150,80")
    schema = infer_schema(records)
    descriptor = select_render(records, "bar", schema)
"""

from .core import (
    PALETTE,
    ChartPipeline,
    ChartResult,
    ChartState,
    Schema,
    infer_schema,
    parse,
    select_render,
)
from .utils.vis_types import ChartKind, RenderDescriptor

__version__ = "0.1.0"

__all__ = [
    "PALETTE",
    "ChartKind",
    "ChartPipeline",
    "ChartResult",
    "ChartState",
    "RenderDescriptor",
    "Schema",
    "infer_schema",
    "parse",
    "select_render",
]
