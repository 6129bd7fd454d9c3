"""Data processing utilities for parsed records."""

from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd
from loguru import logger

from ..core.values import Value, record_to_plain


class DataProcessors:
    """Utility class for data processing operations."""

    @staticmethod
    def records_to_dataframe(records: Sequence[Mapping[str, Value]]) -> pd.DataFrame:
        """
        Build a dataframe from parsed records.

        Columns follow the first record's field order; fields that only
        appear in later records are appended after it.

        Args:
            records: Parsed records

        Returns:
            Dataframe with one row per record

        """
        if not records:
            return pd.DataFrame()

        columns = list(records[0])
        for record in records[1:]:
            for name in record:
                if name not in columns:
                    columns.append(name)

        rows = [record_to_plain(record) for record in records]
        return pd.DataFrame(rows, columns=columns)

    @staticmethod
    def column_values(df: pd.DataFrame, column: str | None) -> list[Any]:
        """
        Return a column as a JSON-friendly list.

        Missing values become None. Without a column, row positions are
        returned instead.
        """
        if column is None or column not in df.columns:
            return list(range(len(df)))

        values = df[column].astype(object).tolist()
        return [None if _is_missing(v) else v for v in values]

    @staticmethod
    def analyze_records(records: Sequence[Mapping[str, Value]]) -> dict[str, Any]:
        """
        Analyze record structure for display next to the chart.

        Args:
            records: Parsed records

        Returns:
            Analysis of column characteristics

        """
        df = DataProcessors.records_to_dataframe(records)
        analysis = {
            "row_count": len(df),
            "column_count": len(df.columns),
            "columns": {},
        }

        for col in df.columns:
            # Nested JSON cells are compared by their text
            column = df[col].map(
                lambda v: str(v) if isinstance(v, (list, dict)) else v
            )
            numeric = pd.to_numeric(column, errors="coerce")
            col_info = {
                "dtype": str(df[col].dtype),
                "unique_count": int(column.nunique()),
                "null_count": int(column.isnull().sum()),
            }

            present = int(column.notna().sum())
            if present and int(numeric.notna().sum()) == present:
                col_info["type"] = "numerical"
                col_info["min"] = float(numeric.min())
                col_info["max"] = float(numeric.max())
                col_info["mean"] = float(numeric.mean())
            else:
                col_info["type"] = "categorical"
                top_values = column.dropna().astype(str).value_counts().head(5)
                col_info["top_values"] = top_values.index.tolist()
                col_info["top_frequencies"] = [int(x) for x in top_values.values]

            analysis["columns"][col] = col_info

        logger.debug(
            f"Analyzed {analysis['row_count']} rows x {analysis['column_count']} columns"
        )
        return analysis


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and value != value)
