"""CLI entry point for reporttree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax

from reporttree.config import ReporttreeConfig, load_config
from reporttree.config.loader import DEFAULT_CONFIG_TEMPLATE
from reporttree.output import format_flat, render_report
from reporttree.report import (
    ReportLists,
    ReportReadError,
    build_trees,
    parse_categorized_text,
    parse_combined_lines,
    read_report_file,
)

app = typer.Typer(
    name="reporttree",
    help="Source and remote tree views for directory-comparison reports.",
)

config_app = typer.Typer(help="Manage reporttree configuration.")
app.add_typer(config_app, name="config")

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: ReporttreeConfig | None = None


def _get_config() -> ReporttreeConfig:
    if _config is None:
        return load_config()
    return _config


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to reporttree.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging(_config.log_level)


def _read_lists(
    combined: Path | None,
    match: Path | None,
    differ: Path | None,
    missing_src: Path | None,
    missing_dst: Path | None,
    cfg: ReporttreeConfig,
    strict_separator: bool,
) -> ReportLists:
    """Read report files into categorized lists.

    A non-empty combined report takes precedence; an empty one falls back to
    the four list files.
    """
    list_files = (match, differ, missing_src, missing_dst)
    combined_text = read_report_file(combined) if combined is not None else ""
    if combined_text:
        if any(p is not None for p in list_files):
            logger.warning("--combined given; ignoring the categorized list files")
        return parse_combined_lines(
            combined_text,
            strict_separator=strict_separator or cfg.parser.strict_separator,
            separator=cfg.parser.separator,
        )
    if combined is not None:
        logger.info("combined report %s is empty; using the list files", combined)

    texts = [read_report_file(p) if p is not None else "" for p in list_files]
    return parse_categorized_text(*texts)


@app.command()
def generate(
    combined: Annotated[
        Path | None,
        typer.Option(
            "--combined",
            help="Combined report (=, *, -, + prefixed lines); replaces the list files unless empty",
        ),
    ] = None,
    match: Annotated[
        Path | None, typer.Option("--match", help="File listing identical paths")
    ] = None,
    differ: Annotated[
        Path | None, typer.Option("--differ", help="File listing differing paths")
    ] = None,
    missing_src: Annotated[
        Path | None, typer.Option("--missing-src", help="File listing paths missing from source")
    ] = None,
    missing_dst: Annotated[
        Path | None,
        typer.Option("--missing-dst", help="File listing paths missing from destination"),
    ] = None,
    hide_matches: Annotated[
        bool, typer.Option("--hide-matches", help="Hide matching files/folders")
    ] = False,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: tree, json or flat")
    ] = "tree",
    max_depth: Annotated[
        int | None, typer.Option("--max-depth", min=1, help="Collapse folders below this depth")
    ] = None,
    strict_separator: Annotated[
        bool,
        typer.Option("--strict-separator", help="Drop combined lines with an unexpected separator"),
    ] = False,
) -> None:
    """Generate the source and remote file trees from a comparison report."""
    cfg = _get_config()
    if format not in ("tree", "json", "flat"):
        rprint(f"[red]Error:[/red] Invalid format '{format}'. Choose tree, json, or flat.")
        raise typer.Exit(1)

    try:
        lists = _read_lists(
            combined, match, differ, missing_src, missing_dst, cfg, strict_separator
        )
    except ReportReadError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = build_trees(lists)
    display = cfg.display.model_copy(
        update={
            "hide_matches": hide_matches or cfg.display.hide_matches,
            "max_depth": max_depth if max_depth is not None else cfg.display.max_depth,
        }
    )

    if format == "json":
        typer.echo(result.to_json())
    elif format == "flat":
        for side, tree in (("source", result.src_tree), ("remote", result.dst_tree)):
            for line in format_flat(tree, hide_matches=display.hide_matches):
                typer.echo(f"{side}\t{line}")
    else:
        render_report(result, display)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default reporttree.yaml in current directory."""
    target = Path("reporttree.yaml")
    if target.exists() and not force:
        rprint("[yellow]reporttree.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
