"""Weekday vocabularies used to label day-of-week buckets.

A locale is passed explicitly to the normalizer and aggregator; there is
no process-wide locale state.
"""

from __future__ import annotations

from dataclasses import dataclass

# English weekday names as returned by pandas.Timestamp.day_name()
ENGLISH_DAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
    "Saturday", "Sunday",
)

# Marker for records whose date could not be determined
UNRESOLVED_DAY = "Unknown"


@dataclass(frozen=True)
class ReportLocale:
    """Day labels (Monday through Sunday) and the name of the share remainder.

    Attributes:
        day_labels: 7 canonical weekday abbreviations in Monday-first order.
        other_label: Name of the synthetic entry that sums products outside
            the share slots.
    """

    day_labels: tuple[str, ...]
    other_label: str

    def day_label_for(self, english_day: str) -> str:
        """Map an English weekday name to this locale's abbreviation.

        Args:
            english_day: Name like "Monday".

        Returns:
            Canonical label, or UNRESOLVED_DAY if the name is not a weekday.

        Examples:
            >>> RU_LOCALE.day_label_for("Wednesday")
            'Ср'
        """
        try:
            return self.day_labels[ENGLISH_DAYS.index(english_day)]
        except ValueError:
            return UNRESOLVED_DAY


RU_LOCALE = ReportLocale(
    day_labels=("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"),
    other_label="Другое",
)

EN_LOCALE = ReportLocale(
    day_labels=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    other_label="Other",
)
