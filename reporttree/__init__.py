"""reporttree - source/destination status trees for directory-comparison reports."""

from reporttree.config import ReporttreeConfig, load_config
from reporttree.report import (
    ReportLists,
    parse_categorized_text,
    parse_combined_lines,
    parse_combined_report,
)
from reporttree.tree import ReportCounts, Status, TreeNode, TreesResult, parse_report_data

__version__ = "0.1.0"

__all__ = [
    "ReportCounts",
    "ReportLists",
    "ReporttreeConfig",
    "Status",
    "TreeNode",
    "TreesResult",
    "load_config",
    "parse_categorized_text",
    "parse_combined_lines",
    "parse_combined_report",
    "parse_report_data",
]
