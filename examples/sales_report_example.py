"""Example: Build a sales report from a POS export.

This example demonstrates the full pipeline on a CSV or Excel export:
1. Decode the file with pandas (the engine itself never reads files)
2. Convert the DataFrame into raw rows
3. Build the report model and print it

Prerequisites:
- A sales export with at least a product column and a revenue column
  (e.g. the output of examples/generate_mock_sales.py)
- openpyxl installed for .xlsx files (pip install "pos-report[excel]")

Usage:
    python examples/sales_report_example.py sales_data_month.csv
"""

import argparse
import logging
from pathlib import Path

import pandas as pd

from pos_report import IngestionError, build_report, rows_from_frame
from pos_report.formatters import format_report_for_console
from pos_report.insights import build_insight_request

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

parser = argparse.ArgumentParser(description="Print a sales report for a POS export")
parser.add_argument("path", type=Path, help="CSV or Excel sales export")
args = parser.parse_args()

if args.path.suffix.lower() in (".xlsx", ".xls"):
    df = pd.read_excel(args.path)
else:
    df = pd.read_csv(args.path)

try:
    report = build_report(rows_from_frame(df))
except IngestionError as e:
    raise SystemExit(f"Ingestion failed: {e}")

print(format_report_for_console(report))

# What a narrative generator would receive
print("\nInsight request:")
print(build_insight_request(report).to_dict())
