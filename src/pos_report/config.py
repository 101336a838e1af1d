"""Configuration for the POS sales report engine.

This module provides the configuration objects shared by the column
resolver, the record normalizer and the aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from pos_report.exceptions import ConfigError
from pos_report.locale import RU_LOCALE, UNRESOLVED_DAY, ReportLocale

# Number of entries in the top-products series
DEFAULT_TOP_N = 10

# Number of individual entries in the product share before the "other" bucket
DEFAULT_SHARE_SLOTS = 7

ROLES = ("date", "hour", "product", "quantity", "revenue")
REQUIRED_ROLES = ("revenue", "product")


@dataclass(frozen=True)
class ColumnCandidates:
    """Ordered, lower-cased substring candidates for each semantic role.

    A header resolves a role when its lower-cased form contains any of
    the role's candidates. Defaults cover common English and Russian
    export headers (iiko, Poster and similar cafe POS systems).
    """

    date: tuple[str, ...] = ("date", "дата", "день")
    hour: tuple[str, ...] = ("hour", "час", "time", "время")
    product: tuple[str, ...] = ("product", "товар", "item", "name", "наимен")
    quantity: tuple[str, ...] = ("qty", "количество", "quantity", "кол")
    revenue: tuple[str, ...] = ("revenue", "выруч", "сумм", "total", "стоимость", "итого")

    def for_role(self, role: str) -> tuple[str, ...]:
        """Return the candidates for a role name."""
        return getattr(self, role)


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one ingestion run.

    Attributes:
        columns: Candidate substrings used to discover columns.
        locale: Weekday vocabulary and "other" label.
        top_n: Length cap of the top-products series (default: 10).
        share_slots: Individual entries in the product share (default: 7).

    Raises:
        ConfigError: If any value is invalid.
    """

    columns: ColumnCandidates = field(default_factory=ColumnCandidates)
    locale: ReportLocale = RU_LOCALE
    top_n: int = DEFAULT_TOP_N
    share_slots: int = DEFAULT_SHARE_SLOTS

    def __post_init__(self) -> None:
        if self.top_n < 1:
            raise ConfigError(f"top_n must be positive, got {self.top_n}")
        if self.share_slots < 1:
            raise ConfigError(f"share_slots must be positive, got {self.share_slots}")

        labels = self.locale.day_labels
        if len(labels) != 7 or len(set(labels)) != 7:
            raise ConfigError(f"Locale must define 7 unique day labels, got {list(labels)}")
        if UNRESOLVED_DAY in labels:
            raise ConfigError(f"'{UNRESOLVED_DAY}' is reserved and cannot be a day label")
        if not self.locale.other_label:
            raise ConfigError("Locale other_label must not be empty")

        empty_roles = [f.name for f in fields(self.columns) if not getattr(self.columns, f.name)]
        if empty_roles:
            raise ConfigError(f"Column roles without candidates: {empty_roles}")
