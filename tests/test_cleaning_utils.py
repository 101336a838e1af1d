"""Tests for the cell parsing utilities used by the record normalizer."""

from datetime import date, datetime, time

import numpy as np
import pandas as pd
import pytest

from pos_report.sales.cleaning_utils import (
    is_missing,
    parse_hour,
    parse_number,
    strip_invisibles,
    to_timestamp,
)


def test_is_missing() -> None:
    """Test missing-value detection across None and pandas markers."""
    assert is_missing(None) is True
    assert is_missing(float("nan")) is True
    assert is_missing(np.nan) is True
    assert is_missing(pd.NaT) is True
    assert is_missing(pd.NA) is True
    assert is_missing("") is False
    assert is_missing(0) is False
    assert is_missing("Латте") is False


def test_strip_invisibles() -> None:
    """Test that invisible whitespace is removed."""
    assert strip_invisibles("\u00a0 08:35\u200b ") == "08:35"
    assert strip_invisibles(None) is None


class TestParseNumber:
    """Numeric coercion: strip non-numeric characters, read the leading number."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("500", 500.0),
            (500, 500.0),
            (np.int64(750), 750.0),
            (12.5, 12.5),
            ("1 250 ₸", 1250.0),
            ("950.50 KZT", 950.5),
            ("-30", -30.0),
            ("1.5.2", 1.5),
            ("5-3", 5.0),
            (".5", 0.5),
        ],
    )
    def test_parses(self, raw: object, expected: float) -> None:
        """Test values that yield a number."""
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, float("nan"), "", "n/a", "--5", "-", True, float("inf")])
    def test_unparsable(self, raw: object) -> None:
        """Test values that yield None."""
        assert parse_number(raw) is None

    def test_comma_is_stripped_not_decimal(self) -> None:
        """Comma is not a decimal point: it is removed with other characters."""
        assert parse_number("1,5") == 15.0


class TestParseHour:
    """Hour extraction from hour/time cells."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("08:35", 8),
            ("23:59", 23),
            ("0", 0),
            ("14 ч", 14),
            (14, 14),
            (14.9, 14),
            (time(9, 30), 9),
            (datetime(2025, 1, 6, 18, 5), 18),
            (pd.Timestamp("2025-01-06 07:00"), 7),
        ],
    )
    def test_parses(self, raw: object, expected: int) -> None:
        """Test values that yield an hour."""
        assert parse_hour(raw) == expected

    @pytest.mark.parametrize("raw", [None, float("nan"), "", "утро", "25", "-1", 24, False])
    def test_unparsable_or_out_of_range(self, raw: object) -> None:
        """Test values that yield None."""
        assert parse_hour(raw) is None


class TestToTimestamp:
    """Date parsing from exports."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2025-01-06", pd.Timestamp("2025-01-06")),
            ("2025-01-06 14:20", pd.Timestamp("2025-01-06 14:20")),
            ("06.01.2025", pd.Timestamp("2025-01-06")),
            ("06.01.2025 09:15", pd.Timestamp("2025-01-06 09:15")),
            ("06/01/2025", pd.Timestamp("2025-01-06")),
            ("12/31/2025", pd.Timestamp("2025-12-31")),
            ("06-01-2025", pd.Timestamp("2025-01-06")),
            ("2025-01-06T14:20:00", pd.Timestamp("2025-01-06 14:20")),
            ("6 January 2025", pd.Timestamp("2025-01-06")),
            ("Jan 6, 2025", pd.Timestamp("2025-01-06")),
        ],
    )
    def test_text_formats(self, raw: str, expected: pd.Timestamp) -> None:
        """Test the supported text formats (day-first before month-first)."""
        assert to_timestamp(raw) == expected

    def test_native_values(self) -> None:
        """Test datetime, date and Timestamp cells."""
        assert to_timestamp(datetime(2025, 1, 6, 10, 0)) == pd.Timestamp("2025-01-06 10:00")
        assert to_timestamp(date(2025, 1, 6)) == pd.Timestamp("2025-01-06")
        assert to_timestamp(pd.Timestamp("2025-01-06")) == pd.Timestamp("2025-01-06")

    def test_excel_serial(self) -> None:
        """Test that numbers are read as Excel serial days."""
        assert to_timestamp(45658) == pd.Timestamp("2025-01-01")
        assert to_timestamp(45658.5) == pd.Timestamp("2025-01-01 12:00")

    @pytest.mark.parametrize(
        "raw",
        [
            None, float("nan"), pd.NaT, "", "not a date", "now", "today", 0, -5, True,
            "10:30", "March", "March 2025", "1,5", "2025",
        ],
    )
    def test_unparsable(self, raw: object) -> None:
        """Test that unparsable or partial values give None, never a completed date."""
        assert to_timestamp(raw) is None
