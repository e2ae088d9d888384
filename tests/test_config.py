"""Tests for reporttree.config — models and YAML loader."""

import os
import pytest
from unittest.mock import patch
from pydantic import ValidationError

from reporttree.config.models import (
    DisplayConfig,
    ParserConfig,
    ReporttreeConfig,
    StatusColors,
)
from reporttree.config.loader import DEFAULT_CONFIG_TEMPLATE, load_config, _expand_env_vars


# ── ReporttreeConfig defaults ──────────────────────────────────────


class TestReporttreeConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "warn"

    def test_default_parser_is_unchecked(self, sample_config):
        assert sample_config.parser.separator == " "
        assert sample_config.parser.strict_separator is False

    def test_default_display(self, sample_config):
        assert sample_config.display.hide_matches is False
        assert sample_config.display.max_depth is None
        assert sample_config.display.source_title == "Source Tree"
        assert sample_config.display.destination_title == "Remote Tree"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            ReporttreeConfig(log_level="verbose")


# ── Individual config model validations ─────────────────────────────


class TestParserConfig:
    def test_separator_must_be_one_character(self):
        with pytest.raises(ValidationError):
            ParserConfig(separator="")
        with pytest.raises(ValidationError):
            ParserConfig(separator="::")

    def test_custom_separator(self):
        cfg = ParserConfig(separator="\t", strict_separator=True)
        assert cfg.separator == "\t"
        assert cfg.strict_separator is True


class TestDisplayConfig:
    def test_max_depth_positive(self):
        with pytest.raises(ValidationError):
            DisplayConfig(max_depth=0)
        assert DisplayConfig(max_depth=3).max_depth == 3

    def test_default_colors(self):
        colors = StatusColors()
        assert colors.match == "grey50"
        assert colors.differ == "dark_orange"
        assert colors.missing_src == colors.missing_dst == "blue"

    def test_named_and_hex_colors_accepted(self):
        colors = StatusColors(match="bright_black", differ="#ff8800", missing_src="rgb(0,0,255)")
        assert colors.differ == "#ff8800"

    def test_unknown_color_rejected(self):
        with pytest.raises(ValidationError, match="unknown colour 'oragne'"):
            StatusColors(differ="oragne")


# ── Env var expansion ───────────────────────────────────────────────


class TestExpandEnvVars:
    def test_string_expansion(self):
        with patch.dict(os.environ, {"REPORT_TITLE": "Laptop"}):
            assert _expand_env_vars("${REPORT_TITLE} files") == "Laptop files"

    def test_missing_var_becomes_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            assert _expand_env_vars("x${NOPE}y") == "xy"

    def test_nested_structures(self):
        with patch.dict(os.environ, {"SIDE": "NAS"}):
            data = {"display": {"destination_title": "${SIDE}"}, "list": ["${SIDE}", 3]}
            assert _expand_env_vars(data) == {
                "display": {"destination_title": "NAS"},
                "list": ["NAS", 3],
            }


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    def test_defaults_when_no_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config == ReporttreeConfig()

    def test_cli_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg_file = tmp_path / "custom.yaml"
        cfg_file.write_text("display:\n  hide_matches: true\nlog_level: debug\n")
        config = load_config(str(cfg_file))
        assert config.display.hide_matches is True
        assert config.log_level == "debug"

    def test_cli_path_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("log_level: debug\n")
        with pytest.raises(ValueError, match="not found"):
            load_config(str(tmp_path / "typo.yaml"))

    def test_cli_path_overrides_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("log_level: debug\n")
        cfg_file = tmp_path / "custom.yaml"
        cfg_file.write_text("display:\n  hide_matches: true\n")
        config = load_config(str(cfg_file))
        assert config.display.hide_matches is True
        assert config.log_level == "warn"

    def test_project_local(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("parser:\n  strict_separator: true\n")
        config = load_config()
        assert config.parser.strict_separator is True

    def test_empty_file_falls_through(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("")
        assert load_config() == ReporttreeConfig()

    def test_env_expansion_in_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("REMOTE_NAME", "Backup")
        (tmp_path / "reporttree.yaml").write_text(
            'display:\n  destination_title: "${REMOTE_NAME} Tree"\n'
        )
        assert load_config().display.destination_title == "Backup Tree"

    def test_invalid_yaml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("display: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_invalid_values(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("display:\n  max_depth: -1\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_non_mapping_top_level(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_default_template_loads(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config() == ReporttreeConfig()

    def test_unknown_color_in_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "reporttree.yaml").write_text("display:\n  colors:\n    differ: oragne\n")
        with pytest.raises(ValueError, match="Invalid config") as exc_info:
            load_config()
        assert "oragne" in str(exc_info.value)
