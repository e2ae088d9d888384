"""Shared test fixtures for reporttree."""

import pytest

from reporttree.config.models import ReporttreeConfig
from reporttree.report import ReportLists


@pytest.fixture
def sample_lists():
    """A small report touching every category, with nested folders."""
    return ReportLists(
        match=["src/main.py", "src/util.py", "README.md", "docs/guide.md"],
        differ=["src/config.py", "docs/api.md"],
        missing_src=["assets/logo.png", "assets/icons/app.ico"],
        missing_dst=["build/output.js", "docs/old.md"],
    )


@pytest.fixture
def sample_combined_text():
    return (
        "= src/main.py\n"
        "= src/util.py\n"
        "= README.md\n"
        "= docs/guide.md\n"
        "* src/config.py\n"
        "* docs/api.md\n"
        "- assets/logo.png\n"
        "- assets/icons/app.ico\n"
        "+ build/output.js\n"
        "+ docs/old.md\n"
    )


@pytest.fixture
def sample_config():
    return ReporttreeConfig()


@pytest.fixture
def report_dir(tmp_path, sample_lists, sample_combined_text):
    """Temp directory with the sample report as four list files and one combined file."""
    (tmp_path / "match.txt").write_text("\n".join(sample_lists.match) + "\n")
    (tmp_path / "differ.txt").write_text("\n".join(sample_lists.differ) + "\n")
    (tmp_path / "missing_src.txt").write_text("\n".join(sample_lists.missing_src) + "\n")
    (tmp_path / "missing_dst.txt").write_text("\n".join(sample_lists.missing_dst) + "\n")
    (tmp_path / "combined.txt").write_text(sample_combined_text)
    return tmp_path
