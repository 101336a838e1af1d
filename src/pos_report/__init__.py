"""POS Report - sales metrics from loosely-structured POS exports.

This package turns the rows of a point-of-sale sales export (CSV or
spreadsheet, already decoded by the caller) into a fixed-shape report
model for dashboards and narrative summaries.

Module Structure:
    pos_report.sales: Column resolution, row normalization, aggregation
    pos_report.insights: Digest and failure isolation for narrative generators
    pos_report.formatters: Plain-text rendering of a report
    pos_report.config: ReportConfig and column candidate tables
    pos_report.locale: Weekday vocabularies

Quick Start:
    >>> import pandas as pd
    >>> from pos_report import ReportConfig, build_report, rows_from_frame
    >>> from pos_report.formatters import format_report_for_console
    >>>
    >>> df = pd.read_excel("sales_data_month.xlsx")
    >>> report = build_report(rows_from_frame(df), ReportConfig())
    >>> print(format_report_for_console(report))

Report Shape:
    - revenue_by_day / transactions_by_day: 7 entries, Monday first
    - revenue_by_hour: 24 entries, "0:00" .. "23:00"
    - top_products_by_revenue / top_products_by_quantity: at most 10
    - product_revenue_share: at most 7 products plus one "other" bucket
"""

__version__ = "0.1.0"

from pos_report.config import ColumnCandidates, ReportConfig
from pos_report.exceptions import (
    ConfigError,
    EmptyInputError,
    IngestionError,
    MissingColumnError,
    PosReportError,
)
from pos_report.locale import EN_LOCALE, RU_LOCALE, UNRESOLVED_DAY, ReportLocale
from pos_report.sales import ReportModel, SaleRecord, build_report, rows_from_frame

__all__ = [
    "EN_LOCALE",
    "RU_LOCALE",
    "UNRESOLVED_DAY",
    "ColumnCandidates",
    "ConfigError",
    "EmptyInputError",
    "IngestionError",
    "MissingColumnError",
    "PosReportError",
    "ReportConfig",
    "ReportLocale",
    "ReportModel",
    "SaleRecord",
    "__version__",
    "build_report",
    "rows_from_frame",
]
