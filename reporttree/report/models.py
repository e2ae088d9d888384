"""Data models for parsed comparison reports."""

from __future__ import annotations

from dataclasses import dataclass, field

from reporttree.tree.models import ReportCounts


class ReportReadError(Exception):
    """Raised when a report file cannot be read."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        super().__init__(f"Could not read report '{path}': {cause}")
        self.__cause__ = cause


@dataclass
class ReportLists:
    """The four categorized path lists of a comparison report."""

    match: list[str] = field(default_factory=list)
    differ: list[str] = field(default_factory=list)
    missing_src: list[str] = field(default_factory=list)
    missing_dst: list[str] = field(default_factory=list)

    @property
    def counts(self) -> ReportCounts:
        return ReportCounts(
            match=len(self.match),
            differ=len(self.differ),
            missing_src=len(self.missing_src),
            missing_dst=len(self.missing_dst),
        )
