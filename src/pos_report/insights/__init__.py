"""Insights module.

This module prepares the digest handed to an external narrative
generator and isolates its failures from the report.

Example:
    >>> from pos_report.sales import build_report
    >>> from pos_report.insights import generate_insights
    >>>
    >>> report = build_report(rows)
    >>> insight = generate_insights(report, my_generator)
    >>> if insight is not None:
    ...     print(insight.summary)

"""

from pos_report.insights.api import build_insight_request, generate_insights
from pos_report.insights.types import AIInsight, InsightGenerator, InsightRequest

__all__ = [
    "AIInsight",
    "InsightGenerator",
    "InsightRequest",
    "build_insight_request",
    "generate_insights",
]
