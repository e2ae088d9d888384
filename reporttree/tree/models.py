"""Data models for the source/destination status trees."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    """Comparison status of a file, or the aggregate status of a folder."""

    MATCH = "match"
    DIFFER = "differ"
    MISSING_SRC = "missingSrc"
    MISSING_DST = "missingDst"


@dataclass
class TreeNode:
    """One path segment. A node with no children is a file."""

    status: Status = Status.MATCH
    children: dict[str, TreeNode] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def to_dict(self) -> dict:
        root = {"status": self.status.value, "children": {}}
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for name, child in node.children.items():
                entry = out["children"][name] = {"status": child.status.value, "children": {}}
                stack.append((child, entry))
        return root


# Forest of top-level segment name -> node
Tree = dict[str, TreeNode]


@dataclass(frozen=True)
class ReportCounts:
    """Sizes of the four input lists, as parsed (not deduplicated)."""

    match: int = 0
    differ: int = 0
    missing_src: int = 0
    missing_dst: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "match": self.match,
            "differ": self.differ,
            "missingSrc": self.missing_src,
            "missingDst": self.missing_dst,
        }


@dataclass(frozen=True)
class TreesResult:
    """Both annotated trees plus the input counts."""

    src_tree: Tree = field(default_factory=dict)
    dst_tree: Tree = field(default_factory=dict)
    counts: ReportCounts = field(default_factory=ReportCounts)

    def to_dict(self) -> dict:
        return {
            "counts": self.counts.to_dict(),
            "src_tree": {name: node.to_dict() for name, node in self.src_tree.items()},
            "dst_tree": {name: node.to_dict() for name, node in self.dst_tree.items()},
        }

    def to_json(self) -> str:
        """Serialize the result to a JSON string.

        The json encoder recurses per nesting level, so paths deeper than
        the interpreter's recursion limit raise ``RecursionError`` here;
        ``to_dict`` itself has no such limit.
        """
        return json.dumps(self.to_dict(), indent=2)
