"""Types exchanged with the narrative insight generator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Protocol

# Shown when the generator returns no summary
DEFAULT_SUMMARY = "Не удалось загрузить анализ."


@dataclass(frozen=True)
class InsightRequest:
    """Digest of a report handed to the insight generator.

    Attributes:
        total_revenue: Report total revenue.
        average_check: Report average check.
        total_transactions: Report transaction count.
        top_products: Names of the best-selling products by revenue.
        busiest_hours: Hour labels with the most revenue, busiest first.
        busiest_days: Day labels with the most revenue, busiest first.
    """

    total_revenue: float
    average_check: float
    total_transactions: int
    top_products: tuple[str, ...]
    busiest_hours: tuple[str, ...]
    busiest_days: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with list values, suitable for JSON encoding."""
        data = asdict(self)
        for key in ("top_products", "busiest_hours", "busiest_days"):
            data[key] = list(data[key])
        return data


@dataclass(frozen=True)
class AIInsight:
    """Narrative returned by the insight generator."""

    summary: str
    highlights: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> AIInsight:
        """Build an insight from a decoded generator response.

        Missing keys fall back to the default summary and empty lists.

        Examples:
            >>> AIInsight.from_payload({"highlights": ["Утро"]}).highlights
            ('Утро',)
        """
        return cls(
            summary=payload.get("summary") or DEFAULT_SUMMARY,
            highlights=tuple(payload.get("highlights") or ()),
            recommendations=tuple(payload.get("recommendations") or ()),
        )


class InsightGenerator(Protocol):
    """Protocol for services that write a narrative for a report digest.

    Implementations live outside this package (they call a language model
    or another remote service).
    """

    def generate(self, request: InsightRequest) -> AIInsight:
        ...
