"""Parsers for categorized and combined-symbol comparison reports."""

from __future__ import annotations

import logging
from pathlib import Path

from reporttree.report.models import ReportLists, ReportReadError
from reporttree.tree import TreesResult, parse_report_data

logger = logging.getLogger(__name__)

# Leading symbol of a combined-report line -> ReportLists attribute
COMBINED_SYMBOLS: dict[str, str] = {
    "=": "match",
    "*": "differ",
    "-": "missing_src",
    "+": "missing_dst",
}


def split_report_lines(text: str) -> list[str]:
    """Split on newlines, strip each line, and drop the empty ones."""
    return [line for line in (raw.strip() for raw in text.split("\n")) if line]


def parse_categorized_text(
    match_text: str = "",
    differ_text: str = "",
    missing_src_text: str = "",
    missing_dst_text: str = "",
) -> ReportLists:
    """Turn four raw list blobs into a ReportLists. Paths are not validated."""
    return ReportLists(
        match=split_report_lines(match_text),
        differ=split_report_lines(differ_text),
        missing_src=split_report_lines(missing_src_text),
        missing_dst=split_report_lines(missing_dst_text),
    )


def parse_combined_lines(
    combined_text: str,
    *,
    strict_separator: bool = False,
    separator: str = " ",
) -> ReportLists:
    """Sort the lines of a combined report into the four categories.

    Each line is ``<symbol><separator><path>``; the path is everything from
    the third character on. Lines with an unknown symbol are dropped. With
    *strict_separator*, lines whose second character is not *separator* are
    dropped too; otherwise the separator is not checked.
    """
    lists = ReportLists()
    dropped = 0
    for line in split_report_lines(combined_text):
        category = COMBINED_SYMBOLS.get(line[0])
        if category is None or (strict_separator and line[1:2] != separator):
            dropped += 1
            logger.debug("skipping combined report line %r", line)
            continue
        getattr(lists, category).append(line[2:])

    if dropped:
        logger.debug("dropped %d unrecognised combined report line(s)", dropped)
    return lists


def parse_combined_report(
    combined_text: str,
    *,
    strict_separator: bool = False,
    separator: str = " ",
) -> TreesResult:
    """Parse a combined-symbol report and build both status trees."""
    lists = parse_combined_lines(
        combined_text, strict_separator=strict_separator, separator=separator
    )
    return build_trees(lists)


def build_trees(lists: ReportLists) -> TreesResult:
    """Build both status trees from already-parsed lists."""
    return parse_report_data(lists.match, lists.differ, lists.missing_src, lists.missing_dst)


def read_report_file(path: str | Path) -> str:
    """Read a report file as UTF-8 text, dropping a leading byte-order mark."""
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ReportReadError(str(path), e) from e
    logger.debug("read %s (%d chars)", path, len(text))
    return text
