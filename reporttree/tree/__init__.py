"""Status tree subsystem: insertion passes and bottom-up propagation."""

from reporttree.tree.builder import (
    ReportTreeBuilder,
    mark_tree,
    propagate_status,
    propagate_tree,
    walk_tree,
)
from reporttree.tree.models import ReportCounts, Status, Tree, TreeNode, TreesResult


def parse_report_data(match, differ, missing_src, missing_dst) -> TreesResult:
    """Convenience wrapper around ReportTreeBuilder.build()."""
    return ReportTreeBuilder.build(match, differ, missing_src, missing_dst)


__all__ = [
    "ReportCounts",
    "ReportTreeBuilder",
    "Status",
    "Tree",
    "TreeNode",
    "TreesResult",
    "mark_tree",
    "parse_report_data",
    "propagate_status",
    "propagate_tree",
    "walk_tree",
]
