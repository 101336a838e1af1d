"""Output formatting utilities."""

from pos_report.formatters.console import format_report_for_console

__all__ = ["format_report_for_console"]
