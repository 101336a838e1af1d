"""Tests for the insight request digest and generator failure isolation."""

import pytest

from pos_report import build_report
from pos_report.insights import (
    AIInsight,
    InsightRequest,
    build_insight_request,
    generate_insights,
)
from pos_report.insights.types import DEFAULT_SUMMARY
from pos_report.sales.types import ReportModel


class RecordingGenerator:
    """Generator that returns a fixed insight and remembers its input."""

    def __init__(self) -> None:
        self.requests: list[InsightRequest] = []

    def generate(self, request: InsightRequest) -> AIInsight:
        self.requests.append(request)
        return AIInsight(
            summary="Хорошая неделя",
            highlights=("Утренний пик",),
            recommendations=("Добавить бариста в 8:00",),
        )


class FailingGenerator:
    """Generator that always fails, like an unreachable remote service."""

    def generate(self, request: InsightRequest) -> AIInsight:
        raise ConnectionError("service unavailable")


@pytest.fixture
def report() -> ReportModel:
    """Report with a clear ranking of products, hours and days."""
    rows = [
        {"Дата": "06.01.2025 08:10", "Товар": "Латте", "Сумма": 3000},
        {"Дата": "07.01.2025 12:30", "Товар": "Капучино", "Сумма": 2000},
        {"Дата": "08.01.2025 17:45", "Товар": "Круассан", "Сумма": 1000},
        {"Дата": "09.01.2025 09:05", "Товар": "Эспрессо", "Сумма": 500},
    ]
    return build_report(rows)


def test_build_insight_request(report: ReportModel) -> None:
    """Test that busiest hours and days are sorted by revenue."""
    request = build_insight_request(report)

    assert request.total_revenue == 6500.0
    assert request.total_transactions == 4
    assert request.average_check == 1625.0
    assert request.top_products == ("Латте", "Капучино", "Круассан")
    assert request.busiest_hours == ("8:00", "12:00", "17:00")
    assert request.busiest_days == ("Пн", "Вт", "Ср")


def test_insight_request_to_dict(report: ReportModel) -> None:
    """Test the JSON-ready form of the digest."""
    data = build_insight_request(report, top_n=1).to_dict()

    assert data == {
        "total_revenue": 6500.0,
        "average_check": 1625.0,
        "total_transactions": 4,
        "top_products": ["Латте"],
        "busiest_hours": ["8:00"],
        "busiest_days": ["Пн"],
    }


def test_generate_insights(report: ReportModel) -> None:
    """Test a successful generator call."""
    generator = RecordingGenerator()

    insight = generate_insights(report, generator)

    assert insight is not None
    assert insight.summary == "Хорошая неделя"
    assert generator.requests == [build_insight_request(report)]


def test_generator_failure_is_isolated(report: ReportModel) -> None:
    """Test that a failing generator yields None and leaves the report intact."""
    before = report.total_revenue

    assert generate_insights(report, FailingGenerator()) is None
    assert report.total_revenue == before


class MalformedGenerator:
    """Generator that returns something other than an AIInsight."""

    def __init__(self, result: object) -> None:
        self.result = result

    def generate(self, request: InsightRequest) -> object:
        return self.result


@pytest.mark.parametrize("result", [None, {"summary": "raw payload"}, "text"])
def test_malformed_generator_result_is_isolated(report: ReportModel, result: object) -> None:
    """Test that an unexpected generator result yields None instead of raising."""
    assert generate_insights(report, MalformedGenerator(result)) is None


def test_no_generator(report: ReportModel) -> None:
    """Test that no configured generator simply skips insights."""
    assert generate_insights(report, None) is None


def test_insight_from_payload_defaults() -> None:
    """Test defaults for an incomplete generator response."""
    insight = AIInsight.from_payload({})

    assert insight.summary == DEFAULT_SUMMARY
    assert insight.highlights == ()
    assert insight.recommendations == ()


def test_insight_from_payload() -> None:
    """Test a complete generator response."""
    insight = AIInsight.from_payload(
        {"summary": "Ок", "highlights": ["a", "b"], "recommendations": ["c"]}
    )

    assert insight == AIInsight(summary="Ок", highlights=("a", "b"), recommendations=("c",))
