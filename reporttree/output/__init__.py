from .renderer import (
    NO_DATA_MESSAGE,
    build_rich_tree,
    filter_matches,
    format_flat,
    render_counts,
    render_report,
)

__all__ = [
    "NO_DATA_MESSAGE",
    "build_rich_tree",
    "filter_matches",
    "format_flat",
    "render_counts",
    "render_report",
]
