"""Tests for column discovery by header substrings."""

import pytest

from pos_report.config import ColumnCandidates
from pos_report.exceptions import IngestionError, MissingColumnError
from pos_report.sales.columns import find_column, resolve_columns
from pos_report.sales.types import ColumnMap


def test_find_column_is_case_insensitive() -> None:
    """Test that headers are lower-cased before matching."""
    assert find_column(["ДАТА", "ТОВАР"], ["товар"]) == "ТОВАР"
    assert find_column(["Net Revenue"], ["REVENUE"]) == "Net Revenue"


def test_find_column_header_order_wins() -> None:
    """The first header in header order wins, not the first candidate."""
    headers = ["Итого со скидкой", "Сумма"]
    assert find_column(headers, ["сумм", "итого"]) == "Итого со скидкой"


def test_find_column_substring_match() -> None:
    """Test that candidates match anywhere inside the header."""
    assert find_column(["Наименование блюда"], ["наимен"]) == "Наименование блюда"
    assert find_column(["Кол-во"], ["кол"]) == "Кол-во"
    assert find_column(["Категория"], ["qty", "количество", "quantity", "кол"]) is None


def test_resolve_russian_export() -> None:
    """Test resolution of a typical iiko/Poster export header."""
    headers = ["Дата", "Время", "Товар", "Количество", "Сумма", "Категория"]

    columns = resolve_columns(headers)

    assert columns == ColumnMap(
        product="Товар",
        revenue="Сумма",
        date="Дата",
        hour="Время",
        quantity="Количество",
    )


def test_resolve_english_export() -> None:
    """Test resolution of an English export header."""
    headers = ["Order Date", "Item Name", "Qty", "Line Total"]

    columns = resolve_columns(headers)

    assert columns.date == "Order Date"
    assert columns.product == "Item Name"
    assert columns.quantity == "Qty"
    assert columns.revenue == "Line Total"
    assert columns.hour is None


def test_optional_roles_may_be_unresolved() -> None:
    """Test that date, hour and quantity can stay unresolved."""
    columns = resolve_columns(["Товар", "Сумма"])

    assert columns.date is None
    assert columns.hour is None
    assert columns.quantity is None


def test_missing_revenue_is_fatal() -> None:
    """Test that an export without a revenue column cannot be resolved."""
    with pytest.raises(MissingColumnError, match="Revenue column not found") as exc_info:
        resolve_columns(["Дата", "Товар", "Количество"])

    assert exc_info.value.role == "revenue"
    assert exc_info.value.headers == ["Дата", "Товар", "Количество"]
    assert isinstance(exc_info.value, IngestionError)


def test_missing_product_is_fatal() -> None:
    """Test that an export without a product column cannot be resolved."""
    with pytest.raises(MissingColumnError, match="Product column not found"):
        resolve_columns(["Дата", "Сумма"])


def test_revenue_checked_before_product() -> None:
    """Test that revenue is reported when both mandatory columns are missing."""
    with pytest.raises(MissingColumnError) as exc_info:
        resolve_columns(["Дата"])

    assert exc_info.value.role == "revenue"


def test_custom_candidates() -> None:
    """Test resolution with a custom candidate table."""
    candidates = ColumnCandidates(product=("artículo",), revenue=("importe",))

    columns = resolve_columns(["Fecha", "Artículo", "Importe"], candidates)

    assert columns.product == "Artículo"
    assert columns.revenue == "Importe"
    assert columns.date is None
