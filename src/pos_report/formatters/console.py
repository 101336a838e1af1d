"""Console output formatting utilities."""

from __future__ import annotations

from pos_report.sales.types import ReportModel


def _fmt(value: float) -> str:
    return f"{value:,.2f}"


def format_report_for_console(report: ReportModel) -> str:
    """Build a human-readable string representation of the report for console output.

    Args:
        report: ReportModel to describe.

    Returns:
        Human-readable text string for console output
    """
    if report.total_transactions == 0:
        return "No sales records."

    lines = []
    lines.append("Sales Report")
    lines.append("=" * 60)
    lines.append(f"Revenue:       {_fmt(report.total_revenue)}")
    lines.append(f"Transactions:  {report.total_transactions:,}")
    lines.append(f"Average check: {_fmt(report.average_check)}")
    lines.append(f"Units sold:    {report.total_units:,.0f}")
    lines.append("")

    lines.append("By day:")
    for (day, revenue), (_, count) in zip(report.revenue_by_day, report.transactions_by_day):
        lines.append(f"  {day}: {_fmt(revenue)} ({count} tx)")
    if report.unresolved_day_transactions:
        lines.append(
            f"  (no date: {_fmt(report.unresolved_day_revenue)}, "
            f"{report.unresolved_day_transactions} tx)"
        )
    lines.append("")

    # Only hours with sales, the full 24-hour series is in the report
    active_hours = [(label, value) for label, value in report.revenue_by_hour if value > 0]
    if active_hours:
        lines.append("By hour:")
        for label, value in active_hours:
            lines.append(f"  {label:>5}: {_fmt(value)}")
        lines.append("")

    lines.append("Top products by revenue:")
    for i, (name, value) in enumerate(report.top_products_by_revenue, start=1):
        lines.append(f"  {i:>2}. {name}: {_fmt(value)}")
    lines.append("")

    lines.append("Revenue share:")
    for name, value in report.product_revenue_share:
        pct = value / report.total_revenue * 100 if report.total_revenue else 0.0
        lines.append(f"  {name}: {_fmt(value)} ({pct:.1f}%)")

    return "\n".join(lines)
