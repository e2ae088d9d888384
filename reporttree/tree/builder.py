"""Builder for the source/destination trees and their bottom-up status."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from reporttree.tree.models import ReportCounts, Status, Tree, TreeNode, TreesResult

logger = logging.getLogger(__name__)


def mark_tree(tree: Tree, paths: Iterable[str], status: Status) -> None:
    """Insert each "/"-delimited path into *tree*, tagging its last segment.

    Missing segments are created as ``Match`` placeholders. Only the terminal
    segment of each path gets *status*; intermediate folders keep whatever
    they had until propagation overwrites them.
    """
    for path in paths:
        parts = path.split("/")
        level = tree
        for i, part in enumerate(parts):
            node = level.get(part)
            if node is None:
                node = level[part] = TreeNode()
            if i == len(parts) - 1:
                node.status = status
            level = node.children


def propagate_status(node: TreeNode) -> Status:
    """Post-order merge of child statuses into *node*; returns the new status.

    A folder keeps a status only if every child agrees on ``Match``,
    ``MissingSource`` or ``MissingDestination``. Anything else, including a
    folder of only differing files, becomes ``Differ``.

    Uses an explicit stack, so path depth is not bounded by the recursion
    limit.
    """
    stack: list[tuple[TreeNode, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if current.is_leaf:
            continue
        if not expanded:
            # Revisit after every child has been merged
            stack.append((current, True))
            stack.extend((child, False) for child in current.children.values())
            continue

        statuses = {child.status for child in current.children.values()}
        if len(statuses) == 1 and Status.DIFFER not in statuses:
            current.status = statuses.pop()
        else:
            current.status = Status.DIFFER
    return node.status


def propagate_tree(tree: Tree) -> None:
    """Run :func:`propagate_status` over every root of the forest."""
    for node in tree.values():
        propagate_status(node)


def walk_tree(tree: Tree, prefix: str = "") -> Iterator[tuple[str, TreeNode]]:
    """Yield ``(path, node)`` pairs in pre-order, paths joined with "/"."""
    stack = [
        (f"{prefix}/{name}" if prefix else name, node)
        for name, node in reversed(tree.items())
    ]
    while stack:
        path, node = stack.pop()
        yield path, node
        stack.extend(
            (f"{path}/{name}", child) for name, child in reversed(node.children.items())
        )


class ReportTreeBuilder:
    """Builds both status trees from the four categorized path lists."""

    @staticmethod
    def build(
        match: Sequence[str],
        differ: Sequence[str],
        missing_src: Sequence[str],
        missing_dst: Sequence[str],
    ) -> TreesResult:
        """Construct fresh source and destination trees.

        Each side takes three passes: everything present on that side as
        ``Match``, then its missing-on-the-other-side paths, then the
        differing paths. Later passes win at the leaf, so ``Differ`` beats a
        contradictory missing entry.
        """
        src_tree: Tree = {}
        dst_tree: Tree = {}

        mark_tree(src_tree, [*match, *differ, *missing_dst], Status.MATCH)
        mark_tree(src_tree, missing_dst, Status.MISSING_DST)
        mark_tree(src_tree, differ, Status.DIFFER)

        mark_tree(dst_tree, [*match, *differ, *missing_src], Status.MATCH)
        mark_tree(dst_tree, missing_src, Status.MISSING_SRC)
        mark_tree(dst_tree, differ, Status.DIFFER)

        propagate_tree(src_tree)
        propagate_tree(dst_tree)

        counts = ReportCounts(
            match=len(match),
            differ=len(differ),
            missing_src=len(missing_src),
            missing_dst=len(missing_dst),
        )
        logger.debug(
            "built trees: %d source roots, %d destination roots (counts=%s)",
            len(src_tree),
            len(dst_tree),
            counts,
        )
        return TreesResult(src_tree=src_tree, dst_tree=dst_tree, counts=counts)
