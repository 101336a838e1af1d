"""Sales report module.

This module turns loosely-structured sales exports into a report model:

- **Column resolution**: find the date, hour, product, quantity and
  revenue columns by header substrings.
- **Normalization**: one SaleRecord per raw row, with default values for
  unparsable cells; rows without positive revenue are dropped.
- **Aggregation**: totals, 7-day and 24-hour series, top products and the
  product share with an "other" bucket.

Example:
    >>> import pandas as pd
    >>> from pos_report.sales import build_report, rows_from_frame
    >>>
    >>> df = pd.read_csv("sales_export.csv")
    >>> report = build_report(rows_from_frame(df))
    >>> report.total_revenue, report.average_check
    >>> report.revenue_by_hour[9]
    ('9:00', 15400.0)
"""

from pos_report.sales.api import build_report, rows_from_frame
from pos_report.sales.types import ColumnMap, ReportModel, SaleRecord

__all__ = ["ColumnMap", "ReportModel", "SaleRecord", "build_report", "rows_from_frame"]
