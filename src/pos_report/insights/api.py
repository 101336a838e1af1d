"""Public API for requesting narrative insights on a report.

The generator is an external collaborator. Its absence or failure must
never prevent the report itself from being used, so generate_insights
returns None instead of raising.
"""

from __future__ import annotations

import logging
from typing import Optional

from pos_report.insights.types import AIInsight, InsightGenerator, InsightRequest
from pos_report.sales.types import ReportModel

logger = logging.getLogger(__name__)

DEFAULT_INSIGHT_TOP_N = 3


def build_insight_request(report: ReportModel, top_n: int = DEFAULT_INSIGHT_TOP_N) -> InsightRequest:
    """Derive the generator input from a report.

    Busiest hours and days are computed here by sorting the canonical
    series descending, since the report stores them in calendar order.

    Args:
        report: Report model.
        top_n: Number of products, hours and days to include (default: 3).

    Returns:
        InsightRequest.
    """
    return InsightRequest(
        total_revenue=report.total_revenue,
        average_check=report.average_check,
        total_transactions=report.total_transactions,
        top_products=tuple(name for name, _ in report.top_products_by_revenue[:top_n]),
        busiest_hours=tuple(label for label, _ in report.busiest_hours(top_n)),
        busiest_days=tuple(label for label, _ in report.busiest_days(top_n)),
    )


def generate_insights(
    report: ReportModel,
    generator: Optional[InsightGenerator],
    top_n: int = DEFAULT_INSIGHT_TOP_N,
) -> Optional[AIInsight]:
    """Ask the generator for a narrative on the report.

    Args:
        report: Report model.
        generator: Insight generator, or None when none is configured.
        top_n: Digest size passed to build_insight_request.

    Returns:
        AIInsight, or None if there is no generator or it failed.
    """
    if generator is None:
        logger.debug("No insight generator configured; skipping insights")
        return None

    request = build_insight_request(report, top_n)
    try:
        insight = generator.generate(request)
    except Exception as e:
        logger.warning("Insight generation failed (report unaffected): %s", e)
        return None

    if not isinstance(insight, AIInsight):
        logger.warning(
            "Insight generator returned %s instead of AIInsight (report unaffected)",
            type(insight).__name__,
        )
        return None

    logger.info(
        "Received insights: %d highlights, %d recommendations",
        len(insight.highlights),
        len(insight.recommendations),
    )
    return insight
