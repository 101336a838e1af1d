"""Cell-level parsing utilities for raw sales rows.

This module provides the scalar coercions used by the record normalizer.
Every function is total: malformed input yields None instead of raising,
so a single bad cell never fails an ingestion run.

Key utilities:
- Missing-value detection: None, NaN, NaT and pd.NA
- Number parsing: strip everything but digits, '.' and '-', then read the
  leading numeric prefix
- Hour parsing: leading integer of a cell, or the hour of a time object
- Date parsing: native datetimes, Excel serial days and multiple text formats

Examples:
    >>> parse_number("1 250 ₸")
    1250.0
    >>> parse_hour("08:35")
    8
    >>> to_timestamp("01.01.2025")
    Timestamp('2025-01-01 00:00:00')
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from typing import Any, Optional

import numpy as np
import pandas as pd

NBSP = "\u00a0"  # Non-breaking space
NNBSP = "\u202f"  # Narrow non-breaking space
ZW = "".join(chr(c) for c in (0x200B, 0x200C, 0x200D, 0xFEFF))  # Zero-width characters

# Everything that is not part of a plain decimal number
_NON_NUMERIC_RE = re.compile(r"[^\d.\-]")

# Leading numeric prefix, the way a lenient float parser reads it
_NUMBER_PREFIX_RE = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")

_LEADING_INT_RE = re.compile(r"^[-+]?\d+")

# Day-first formats come before month-first ones: exports from the
# supported POS systems write 01.02.2025 for the 1st of February.
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%d.%m.%Y",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y %H:%M:%S",
    "%d/%m/%Y",
    "%d/%m/%Y %H:%M",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%Y-%m-%dT%H:%M:%S",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

# Excel serial day numbers covering 1900-01-01 .. 9999-12-31
_EXCEL_EPOCH = "1899-12-30"
_EXCEL_SERIAL_MIN = 1
_EXCEL_SERIAL_MAX = 2958465


def is_missing(x: Any) -> bool:
    """Return True for None and pandas/numpy missing markers.

    Examples:
        >>> is_missing(float("nan"))
        True
        >>> is_missing("")
        False
    """
    if x is None:
        return True
    try:
        return bool(pd.isna(x))
    except (TypeError, ValueError):
        return False


def strip_invisibles(x: Any) -> Optional[str]:
    """Remove invisible and problematic whitespace characters from text.

    Args:
        x: Value to clean (string, number, or None).

    Returns:
        Cleaned string or None if input is missing.

    Examples:
        >>> strip_invisibles("  08:35 ")
        '08:35'
    """
    if is_missing(x):
        return None
    s = str(x)
    s = s.replace("\r", "").replace("\t", " ").replace(NBSP, " ").replace(NNBSP, " ")
    s = re.sub(r"[%s]" % re.escape(ZW), "", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float, np.integer, np.floating)) and not isinstance(
        x, (bool, np.bool_)
    )


def parse_number(x: Any) -> Optional[float]:
    """Parse a numeric cell.

    Native finite numbers are returned as floats. Anything else is turned
    into text, every character other than a digit, '.' or '-' is removed,
    and the leading numeric prefix of what remains is parsed.

    Args:
        x: Cell value.

    Returns:
        Parsed float, or None when nothing numeric is left.

    Examples:
        >>> parse_number("1 250.50 тг")
        1250.5
        >>> parse_number("1.5.2")
        1.5
        >>> parse_number("n/a") is None
        True
    """
    if is_missing(x) or isinstance(x, (bool, np.bool_)):
        return None
    if _is_number(x):
        v = float(x)
        return v if math.isfinite(v) else None

    s = _NON_NUMERIC_RE.sub("", str(x))
    m = _NUMBER_PREFIX_RE.match(s)
    if not m:
        return None
    return float(m.group(0))


def parse_hour(x: Any) -> Optional[int]:
    """Read an hour of day from a cell.

    time/datetime values give their hour, numbers are truncated, and text
    gives its leading integer ("08:35" -> 8, "14 ч" -> 14).

    Args:
        x: Cell value.

    Returns:
        Hour in [0, 23], or None when unparsable or out of range.

    Examples:
        >>> parse_hour("23:59")
        23
        >>> parse_hour("25") is None
        True
    """
    if is_missing(x) or isinstance(x, (bool, np.bool_)):
        return None

    if isinstance(x, (time, datetime)):
        hour = x.hour
    elif _is_number(x):
        if not math.isfinite(float(x)):
            return None
        hour = int(x)
    else:
        s = strip_invisibles(x) or ""
        m = _LEADING_INT_RE.match(s)
        if not m:
            return None
        hour = int(m.group(0))

    return hour if 0 <= hour <= 23 else None


def to_timestamp(val: Any) -> Optional[pd.Timestamp]:
    """Parse a sale date from various representations.

    Attempts, in order:
    1. Native datetime, date, Timestamp and datetime64 values
    2. Excel serial day numbers (numbers in the valid serial range)
    3. Known text formats (see DATE_FORMATS)

    Text must carry a full day, month and year. Partial values such as a
    bare time or month name are rejected rather than completed with
    today's date or a default year.

    Args:
        val: Cell value.

    Returns:
        Parsed Timestamp, or None if parsing fails.

    Examples:
        >>> to_timestamp("2025-12-01 08:15")
        Timestamp('2025-12-01 08:15:00')
        >>> to_timestamp("not a date") is None
        True
    """
    if is_missing(val) or isinstance(val, (bool, np.bool_)):
        return None

    if isinstance(val, (pd.Timestamp, datetime, date, np.datetime64)):
        return _valid(pd.to_datetime(val, errors="coerce"))

    if _is_number(val):
        serial = float(val)
        if not math.isfinite(serial) or not _EXCEL_SERIAL_MIN <= serial <= _EXCEL_SERIAL_MAX:
            return None
        return _valid(pd.to_datetime(serial, unit="D", origin=_EXCEL_EPOCH, errors="coerce"))

    s = strip_invisibles(val)
    if not s:
        return None
    for fmt in DATE_FORMATS:
        try:
            return _valid(pd.to_datetime(s, format=fmt, errors="raise"))
        except (ValueError, TypeError, OverflowError):
            pass
    return None


def _valid(ts: Any) -> Optional[pd.Timestamp]:
    if ts is None or ts is pd.NaT or not isinstance(ts, pd.Timestamp):
        return None
    return ts
