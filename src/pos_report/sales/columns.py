"""Column discovery for loosely-structured sales exports.

Exports from different POS systems name the same field differently
("Сумма", "Total", "Выручка, ₸"). Each semantic role carries an ordered
list of lower-cased substrings; a header matches a role when it contains
any of them.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pos_report.config import REQUIRED_ROLES, ROLES, ColumnCandidates
from pos_report.exceptions import MissingColumnError
from pos_report.sales.types import ColumnMap

logger = logging.getLogger(__name__)

# Shown in the error message so the user knows what header to add
_MISSING_HINTS = {
    "revenue": "Выручка/Сумма",
    "product": "Товар/Наименование",
}


def find_column(headers: Iterable[str], candidates: Iterable[str]) -> Optional[str]:
    """Return the first header whose lower-cased form contains any candidate.

    Headers are scanned in their natural order; the candidate order does
    not change which header wins.

    Args:
        headers: Header strings in their original order.
        candidates: Substrings to look for (compared lower-cased).

    Returns:
        Matching header, or None.

    Examples:
        >>> find_column(["Дата", "Товар", "Сумма"], ["revenue", "сумм"])
        'Сумма'
        >>> find_column(["Дата"], ["qty"]) is None
        True
    """
    lowered = [c.lower() for c in candidates]
    for header in headers:
        h = str(header).lower()
        if any(c in h for c in lowered):
            return header
    return None


def resolve_columns(
    headers: Iterable[str],
    candidates: Optional[ColumnCandidates] = None,
) -> ColumnMap:
    """Resolve every semantic role against a header set.

    Roles are resolved independently, so one header may satisfy two roles;
    callers should not configure overlapping candidates.

    Args:
        headers: Headers of the first raw row.
        candidates: Candidate table (default: ColumnCandidates()).

    Returns:
        ColumnMap with the resolved header for each role.

    Raises:
        MissingColumnError: If the revenue or product role is unresolved
            (revenue is checked first).
    """
    candidates = candidates or ColumnCandidates()
    headers = list(headers)

    resolved = {role: find_column(headers, candidates.for_role(role)) for role in ROLES}

    for role in REQUIRED_ROLES:
        if resolved[role] is None:
            raise MissingColumnError(role, headers, _MISSING_HINTS.get(role, ""))

    logger.debug("Resolved columns %s from headers %s", resolved, headers)
    unresolved = [role for role in ROLES if resolved[role] is None]
    if unresolved:
        logger.info("Optional columns not found: %s", ", ".join(unresolved))

    return ColumnMap(**resolved)
