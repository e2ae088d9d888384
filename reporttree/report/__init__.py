"""Report parsing: categorized lists and combined-symbol reports."""

from reporttree.report.models import ReportLists, ReportReadError
from reporttree.report.parser import (
    COMBINED_SYMBOLS,
    build_trees,
    parse_categorized_text,
    parse_combined_lines,
    parse_combined_report,
    read_report_file,
    split_report_lines,
)

__all__ = [
    "COMBINED_SYMBOLS",
    "ReportLists",
    "ReportReadError",
    "build_trees",
    "parse_categorized_text",
    "parse_combined_lines",
    "parse_combined_report",
    "read_report_file",
    "split_report_lines",
]
