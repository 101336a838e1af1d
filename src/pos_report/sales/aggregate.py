"""Aggregate normalized sales records into the report model.

This module turns the filtered SaleRecord sequence into every metric the
reporting surface consumes: scalar totals, day-of-week and hour-of-day
series, product rankings and the product share with an "other" bucket.

Every call builds its own DataFrame, so concurrent runs never share
accumulators.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pandas as pd

from pos_report.config import ReportConfig
from pos_report.sales.types import ColumnMap, ReportModel, SaleRecord, SeriesPoint

logger = logging.getLogger(__name__)

HOURS = range(24)


def records_to_frame(records: Sequence[SaleRecord]) -> pd.DataFrame:
    """Build the working DataFrame used by the aggregations.

    Columns: product, revenue, quantity, hour (nullable Int64), day_label,
    first_seen (position of the record in the input).
    """
    return pd.DataFrame(
        {
            "product": pd.Series([r.product for r in records], dtype="object"),
            "revenue": pd.Series([r.revenue for r in records], dtype="float64"),
            "quantity": pd.Series([r.quantity for r in records], dtype="float64"),
            "hour": pd.Series([r.hour for r in records], dtype="Int64"),
            "day_label": pd.Series([r.day_label for r in records], dtype="object"),
            "first_seen": pd.Series(range(len(records)), dtype="int64"),
        }
    )


def hour_label(hour: int) -> str:
    """Label for an hour bucket.

    Examples:
        >>> hour_label(9)
        '9:00'
    """
    return f"{hour}:00"


def _sum_in_order(values: pd.Series) -> float:
    """Left-to-right sum of the values, matching a plain sum over the records."""
    return float(sum(values.tolist()))


def _points(series: pd.Series) -> tuple[SeriesPoint, ...]:
    return tuple((str(name), float(value)) for name, value in series.items())


def rank_products(products: pd.DataFrame, column: str) -> pd.Series:
    """Sort a per-product column descending.

    Ties keep the order in which products were first encountered: the
    first_seen position is an explicit secondary key and mergesort is
    stable.

    Args:
        products: Per-product frame with the value column and first_seen.
        column: Column to rank by ("revenue" or "quantity").

    Returns:
        Series indexed by product name, highest value first.
    """
    ranked = products.sort_values(
        [column, "first_seen"],
        ascending=[False, True],
        kind="mergesort",
    )
    return ranked[column]


def aggregate_by_day(df: pd.DataFrame, day_labels: Sequence[str]) -> pd.DataFrame:
    """Revenue and transaction count per canonical day.

    Records whose label is not one of day_labels (the unresolved sentinel)
    are left out.

    Returns:
        DataFrame indexed by day label in canonical order, columns
        revenue and transactions, zero-filled.
    """
    in_week = df["day_label"].isin(list(day_labels))
    by_day = (
        df.loc[in_week]
        .groupby("day_label")["revenue"]
        .agg(revenue=_sum_in_order, transactions="count")
    )
    return by_day.reindex(list(day_labels), fill_value=0)


def aggregate_by_hour(df: pd.DataFrame) -> pd.Series:
    """Revenue per hour 0-23, zero-filled and ascending.

    Records without an hour or with an hour outside 0-23 are left out.
    """
    valid = _valid_hours(df)
    hours = df.loc[valid, "hour"].astype("int64")
    by_hour = df.loc[valid, "revenue"].groupby(hours).agg(_sum_in_order)
    return by_hour.reindex(HOURS, fill_value=0.0)


def _valid_hours(df: pd.DataFrame) -> pd.Series:
    return df["hour"].between(0, 23).fillna(False).astype(bool)


def aggregate_by_product(df: pd.DataFrame) -> pd.DataFrame:
    """Revenue and quantity per exact product name, in first-seen order."""
    return df.groupby("product", sort=False).agg(
        revenue=("revenue", _sum_in_order),
        quantity=("quantity", _sum_in_order),
        first_seen=("first_seen", "min"),
    )


def product_share(
    products: pd.DataFrame,
    slots: int,
    other_label: str,
    total_revenue: float,
) -> tuple[SeriesPoint, ...]:
    """Top products by revenue plus one bucket holding the rest.

    The bucket is appended only when there are more products than slots.
    Its value is total_revenue minus the shown entries, so the share always
    adds back up to the report total.

    Args:
        products: Output of aggregate_by_product.
        slots: Number of individual entries.
        other_label: Name of the remainder bucket.
        total_revenue: Report total revenue.

    Returns:
        At most slots + 1 (name, revenue) pairs.
    """
    ranked = rank_products(products, "revenue")
    share = list(_points(ranked.head(slots)))
    if len(ranked) > slots:
        shown = sum(value for _, value in share)
        share.append((other_label, total_revenue - shown))
    return tuple(share)


def aggregate_records(
    records: Sequence[SaleRecord],
    config: Optional[ReportConfig] = None,
    columns: Optional[ColumnMap] = None,
) -> ReportModel:
    """Compute the full report from filtered records.

    Never fails on empty input: an empty sequence gives an all-zero report
    with the fixed-length series still fully populated.

    Args:
        records: Normalized records with revenue > 0.
        config: Report settings (default: ReportConfig()).
        columns: Column mapping to attach to the report.

    Returns:
        ReportModel.
    """
    config = config or ReportConfig()
    records = tuple(records)
    day_labels = config.locale.day_labels

    df = records_to_frame(records)

    total_revenue = float(sum(r.revenue for r in records))
    total_units = float(sum(r.quantity for r in records))
    total_transactions = len(df)
    average_check = total_revenue / total_transactions if total_transactions > 0 else 0.0

    by_day = aggregate_by_day(df, day_labels)
    in_week = df["day_label"].isin(list(day_labels))

    by_hour = aggregate_by_hour(df)
    valid_hours = _valid_hours(df)

    products = aggregate_by_product(df)

    report = ReportModel(
        total_revenue=total_revenue,
        total_transactions=total_transactions,
        average_check=average_check,
        total_units=total_units,
        revenue_by_day=tuple((day, float(by_day.at[day, "revenue"])) for day in day_labels),
        transactions_by_day=tuple(
            (day, int(by_day.at[day, "transactions"])) for day in day_labels
        ),
        revenue_by_hour=tuple((hour_label(h), float(by_hour.at[h])) for h in HOURS),
        top_products_by_revenue=_points(rank_products(products, "revenue").head(config.top_n)),
        top_products_by_quantity=_points(rank_products(products, "quantity").head(config.top_n)),
        product_revenue_share=product_share(
            products, config.share_slots, config.locale.other_label, total_revenue
        ),
        records=records,
        unresolved_day_revenue=_sum_in_order(df.loc[~in_week, "revenue"]),
        unresolved_day_transactions=int((~in_week).sum()),
        unresolved_hour_revenue=_sum_in_order(df.loc[~valid_hours, "revenue"]),
        columns=columns,
    )

    logger.info(
        "Aggregated %d records: revenue=%.2f, units=%.2f, products=%d",
        total_transactions,
        total_revenue,
        total_units,
        len(products),
    )
    if report.unresolved_day_transactions:
        logger.debug(
            "%d records without a date excluded from day series (revenue %.2f)",
            report.unresolved_day_transactions,
            report.unresolved_day_revenue,
        )

    return report
