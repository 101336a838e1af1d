"""Normalize raw sales rows into SaleRecord objects.

Each row is converted independently. Unparsable cells degrade to
defaults (revenue 0, quantity 1, no date, no hour) instead of failing
the row; the filter afterwards removes lines that carry no sale.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from pos_report.locale import RU_LOCALE, UNRESOLVED_DAY, ReportLocale
from pos_report.sales.cleaning_utils import (
    is_missing,
    parse_hour,
    parse_number,
    to_timestamp,
)
from pos_report.sales.types import ColumnMap, RawRow, SaleRecord

logger = logging.getLogger(__name__)


def normalize_row(
    row: RawRow,
    columns: ColumnMap,
    locale: ReportLocale = RU_LOCALE,
) -> SaleRecord:
    """Convert one raw row into a SaleRecord.

    Rules, in order:
    1. revenue: numeric parse of the revenue cell, 0 on failure.
    2. quantity: numeric parse of the quantity cell, 1 when the column is
       unresolved or the cell is unparsable.
    3. product: product cell as trimmed text.
    4. date: parsed timestamp, None on failure.
    5. hour: explicit hour column if it parses, else the hour of date,
       else None.
    6. day_label: locale label of date's weekday, UNRESOLVED_DAY without date.

    Args:
        row: Header -> value mapping.
        columns: Resolved column mapping.
        locale: Weekday vocabulary.

    Returns:
        SaleRecord (possibly with revenue <= 0; see filter_records).
    """
    revenue = parse_number(row.get(columns.revenue))
    if revenue is None:
        revenue = 0.0

    quantity = parse_number(row.get(columns.quantity)) if columns.quantity else None
    if quantity is None:
        quantity = 1.0

    product_cell = row.get(columns.product)
    product = "" if is_missing(product_cell) else str(product_cell).strip()

    ts = to_timestamp(row.get(columns.date)) if columns.date else None

    hour: Optional[int] = parse_hour(row.get(columns.hour)) if columns.hour else None
    if hour is None and ts is not None:
        hour = ts.hour

    day_label = locale.day_label_for(ts.day_name()) if ts is not None else UNRESOLVED_DAY

    return SaleRecord(
        product=product,
        revenue=revenue,
        quantity=quantity,
        date=ts,
        hour=hour,
        day_label=day_label,
    )


def filter_records(records: Iterable[SaleRecord]) -> list[SaleRecord]:
    """Drop records without positive revenue or without a product name."""
    kept: list[SaleRecord] = []
    non_positive = 0
    unnamed = 0
    for record in records:
        if record.revenue <= 0:
            non_positive += 1
        elif not record.product:
            unnamed += 1
        else:
            kept.append(record)

    if non_positive:
        logger.debug("Dropped %d rows with non-positive revenue", non_positive)
    if unnamed:
        logger.warning("Dropped %d rows with an empty product name", unnamed)
    return kept


def normalize_rows(
    rows: Iterable[RawRow],
    columns: ColumnMap,
    locale: ReportLocale = RU_LOCALE,
) -> list[SaleRecord]:
    """Normalize every row and keep only actual sales.

    Args:
        rows: Raw rows sharing the header set columns was resolved from.
        columns: Resolved column mapping.
        locale: Weekday vocabulary.

    Returns:
        Filtered records in input order.
    """
    return filter_records(normalize_row(row, columns, locale) for row in rows)


def records_have_dates(records: Iterable[SaleRecord]) -> bool:
    """Return True when at least one record has a parsed date."""
    return any(isinstance(r.date, pd.Timestamp) for r in records)
