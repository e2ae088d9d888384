"""Rendering of status trees for the terminal."""

from __future__ import annotations

import logging

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree as RichTree

from reporttree.config.models import DisplayConfig
from reporttree.tree import ReportCounts, Status, Tree, TreeNode, TreesResult, walk_tree

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data loaded yet."


def filter_matches(tree: Tree) -> Tree:
    """Return a copy of *tree* without any node whose status is ``Match``.

    Folders survive only through their own status, so a mixed folder keeps
    its non-matching children and drops the rest.
    """
    filtered: Tree = {}
    stack = [(tree, filtered)]
    while stack:
        source, target = stack.pop()
        for name, node in source.items():
            if node.status is Status.MATCH:
                continue
            copy = target[name] = TreeNode(status=node.status)
            stack.append((node.children, copy.children))
    return filtered


def _status_style(status: Status, display: DisplayConfig) -> str:
    colors = display.colors
    return {
        Status.MATCH: colors.match,
        Status.DIFFER: colors.differ,
        Status.MISSING_SRC: colors.missing_src,
        Status.MISSING_DST: colors.missing_dst,
    }[status]


def _node_label(name: str, node: TreeNode, display: DisplayConfig) -> Text:
    label = name if node.is_leaf else f"{name}/"
    return Text(label, style=_status_style(node.status, display))


def _add_children(
    branch: RichTree, tree: Tree, display: DisplayConfig, depth: int
) -> None:
    stack = [(branch, tree, depth)]
    while stack:
        parent, level, level_depth = stack.pop()
        for name, node in level.items():
            child = parent.add(_node_label(name, node, display))
            if node.is_leaf:
                continue
            if display.max_depth is not None and level_depth >= display.max_depth:
                child.add(Text(f"… {len(node.children)} more", style="dim"))
                continue
            stack.append((child, node.children, level_depth + 1))


def build_rich_tree(tree: Tree, title: str, display: DisplayConfig | None = None) -> RichTree:
    """Build a rich Tree for one side, colour-coded by status."""
    display = display or DisplayConfig()
    if display.hide_matches:
        tree = filter_matches(tree)
    root = RichTree(f"[bold]{escape(title)}[/bold]")
    _add_children(root, tree, display, depth=1)
    return root


def render_counts(counts: ReportCounts, display: DisplayConfig | None = None) -> str:
    """Legend line with the four input counts, as rich markup."""
    colors = (display or DisplayConfig()).colors
    return "    ".join(
        [
            f"[{colors.match}]■ Identical: {counts.match}[/]",
            f"[{colors.differ}]■ Differ: {counts.differ}[/]",
            f"[{colors.missing_dst}]■ Additional (Source): {counts.missing_dst}[/]",
            f"[{colors.missing_src}]■ Additional (Remote): {counts.missing_src}[/]",
        ]
    )


def render_report(
    result: TreesResult | None,
    display: DisplayConfig | None = None,
    console: Console | None = None,
) -> None:
    """Print the legend and both trees, or a notice when there is nothing to show."""
    display = display or DisplayConfig()
    console = console or Console()

    if result is None or not (result.src_tree or result.dst_tree):
        console.print(Panel(f"[dim]{NO_DATA_MESSAGE}[/dim]"))
        return

    console.print(render_counts(result.counts, display), soft_wrap=True)
    console.print(
        Group(
            build_rich_tree(result.src_tree, display.source_title, display),
            build_rich_tree(result.dst_tree, display.destination_title, display),
        )
    )


def format_flat(tree: Tree, *, hide_matches: bool = False) -> list[str]:
    """One ``<status>\\t<path>`` line per node, folders before their contents."""
    if hide_matches:
        tree = filter_matches(tree)
    lines = []
    for path, node in walk_tree(tree):
        suffix = "" if node.is_leaf else "/"
        lines.append(f"{node.status.value}\t{path}{suffix}")
    return lines
