"""Shared types for the sales report pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional

import pandas as pd

# One decoded line of a sales export: header -> untyped scalar
RawRow = Mapping[str, Any]

# (label, value) pair used by every report series
SeriesPoint = tuple[str, float]

RECORD_COLUMNS = ["product", "revenue", "quantity", "date", "hour", "day_label"]


@dataclass(frozen=True)
class ColumnMap:
    """Headers resolved for each semantic role.

    Attributes:
        product: Header holding the product name (always resolved).
        revenue: Header holding the line amount (always resolved).
        date: Header holding the sale date, or None.
        hour: Header holding the sale hour/time, or None.
        quantity: Header holding the units sold, or None.
    """

    product: str
    revenue: str
    date: Optional[str] = None
    hour: Optional[str] = None
    quantity: Optional[str] = None


@dataclass(frozen=True)
class SaleRecord:
    """One normalized sales line.

    Attributes:
        product: Trimmed product name.
        revenue: Line amount in the report currency.
        quantity: Units sold (1 when the source has none).
        date: Sale timestamp, or None when absent or unparsable.
        hour: Hour of day in [0, 23], or None.
        day_label: Canonical weekday label, or UNRESOLVED_DAY.
    """

    product: str
    revenue: float
    quantity: float
    date: Optional[pd.Timestamp]
    hour: Optional[int]
    day_label: str


@dataclass(frozen=True)
class ReportModel:
    """Aggregates produced by one ingestion run.

    All series are fully populated: 7 day entries in canonical order,
    24 hour entries ascending, at most top_n top products and at most
    share_slots + 1 share entries.

    Attributes:
        total_revenue: Sum of record revenue.
        total_transactions: Number of records.
        average_check: total_revenue / total_transactions, 0 when empty.
        total_units: Sum of record quantity.
        revenue_by_day: (day_label, revenue) in Monday-first order.
        transactions_by_day: (day_label, count) in Monday-first order.
        revenue_by_hour: ("{hour}:00", revenue) for hours 0-23.
        top_products_by_revenue: (product, revenue), descending.
        top_products_by_quantity: (product, units), descending.
        product_revenue_share: Top products by revenue plus the "other" bucket.
        records: Normalized, filtered records.
        unresolved_day_revenue: Revenue of records without a date.
        unresolved_day_transactions: Count of records without a date.
        unresolved_hour_revenue: Revenue of records without a usable hour.
        columns: Column mapping that produced this report.
    """

    total_revenue: float
    total_transactions: int
    average_check: float
    total_units: float
    revenue_by_day: tuple[SeriesPoint, ...]
    transactions_by_day: tuple[tuple[str, int], ...]
    revenue_by_hour: tuple[SeriesPoint, ...]
    top_products_by_revenue: tuple[SeriesPoint, ...]
    top_products_by_quantity: tuple[SeriesPoint, ...]
    product_revenue_share: tuple[SeriesPoint, ...]
    records: tuple[SaleRecord, ...] = field(repr=False)
    unresolved_day_revenue: float = 0.0
    unresolved_day_transactions: int = 0
    unresolved_hour_revenue: float = 0.0
    columns: Optional[ColumnMap] = None

    def busiest_hours(self, n: int = 3) -> list[SeriesPoint]:
        """Return the n hours with the most revenue.

        Ties keep ascending hour order.
        """
        return _top_points(self.revenue_by_hour, n)

    def busiest_days(self, n: int = 3) -> list[SeriesPoint]:
        """Return the n days with the most revenue.

        Ties keep canonical weekday order.
        """
        return _top_points(self.revenue_by_day, n)

    def records_frame(self) -> pd.DataFrame:
        """Row-level detail as a DataFrame (one row per record)."""
        if not self.records:
            return pd.DataFrame(columns=RECORD_COLUMNS)
        return pd.DataFrame([asdict(r) for r in self.records], columns=RECORD_COLUMNS)


def _top_points(points: tuple[SeriesPoint, ...], n: int) -> list[SeriesPoint]:
    # sorted() is stable, so equal values keep their canonical position
    return sorted(points, key=lambda p: p[1], reverse=True)[:n]
