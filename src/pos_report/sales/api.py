"""Public API for building a sales report from raw rows.

This module provides the single entry point of the engine:
raw rows -> column resolution -> row normalization -> filter -> aggregation.

This function:
- does NOT read or write any files (decoding the upload is the caller's job),
- does NOT keep state between calls,
- MAY log progress via the logging module.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import pandas as pd

from pos_report.config import ReportConfig
from pos_report.exceptions import EmptyInputError
from pos_report.sales.aggregate import aggregate_records
from pos_report.sales.columns import resolve_columns
from pos_report.sales.transform import normalize_rows, records_have_dates
from pos_report.sales.types import RawRow, ReportModel

logger = logging.getLogger(__name__)


def build_report(
    rows: Iterable[RawRow],
    config: Optional[ReportConfig] = None,
) -> ReportModel:
    """Build the report model for one uploaded sales export.

    Columns are resolved once from the headers of the first row; every row
    is assumed to share that header set.

    Args:
        rows: Decoded rows (header -> value), one per transaction line.
        config: Report settings (default: ReportConfig()).

    Returns:
        ReportModel for this upload.

    Raises:
        EmptyInputError: If rows is empty.
        MissingColumnError: If no revenue or product column can be found.

    Examples:
        >>> report = build_report([
        ...     {"Дата": "01.01.2025", "Товар": "Латте", "Сумма": "500"},
        ...     {"Дата": "01.01.2025", "Товар": "Латте", "Сумма": "0"},
        ... ])
        >>> report.total_transactions, report.total_revenue
        (1, 500.0)
    """
    config = config or ReportConfig()
    rows = list(rows)
    if not rows:
        raise EmptyInputError("No data found")

    logger.info("Building sales report from %d rows", len(rows))

    columns = resolve_columns(rows[0].keys(), config.columns)
    logger.info(
        "Using columns: product=%r, revenue=%r, quantity=%r, date=%r, hour=%r",
        columns.product,
        columns.revenue,
        columns.quantity,
        columns.date,
        columns.hour,
    )

    records = normalize_rows(rows, columns, config.locale)
    logger.info("Kept %d of %d rows as sales records", len(records), len(rows))
    if records and columns.date and not records_have_dates(records):
        logger.warning(
            "Date column %r found but no value could be parsed; day series will be empty",
            columns.date,
        )

    return aggregate_records(records, config, columns)


def rows_from_frame(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert an already-decoded DataFrame into raw rows.

    Missing cells (NaN, NaT, pd.NA) become None; all other values are
    passed through unchanged so the normalizer sees the decoder's types.

    Args:
        df: DataFrame read from a CSV or spreadsheet export.

    Returns:
        One dict per DataFrame row, keyed by column name.
    """
    clean = df.astype(object).where(df.notna(), None)
    return clean.to_dict(orient="records")
