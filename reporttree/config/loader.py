"""Config loading: an explicit file, else ./reporttree.yaml, else defaults."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ReporttreeConfig

PROJECT_CONFIG = Path("reporttree.yaml")

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def load_config(cli_path: str | None = None) -> ReporttreeConfig:
    """Resolve the config for this run.

    A path given on the command line must exist. Without one, a
    ``reporttree.yaml`` in the working directory is used if present. An empty
    file means defaults. ``${VAR}`` references in string values are expanded
    before validation.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
    elif PROJECT_CONFIG.is_file():
        path = PROJECT_CONFIG
    else:
        return ReporttreeConfig()

    raw = _read_yaml(path)
    try:
        return ReporttreeConfig.model_validate(_expand_env_vars(raw or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read config {path}: {e}") from e


def _expand_env_vars(value: object) -> object:
    """Substitute ${VAR} in string values; unset variables become ''."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {key: _expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


# Default YAML template for `reporttree config init`
DEFAULT_CONFIG_TEMPLATE = """\
# reporttree.yaml

# Combined report parsing
parser:
  separator: " "               # character between symbol and path
  strict_separator: false      # drop lines whose separator does not match

# Tree display
display:
  hide_matches: false          # hide files/folders whose status is match
  # max_depth: 3
  source_title: "Source Tree"
  destination_title: "Remote Tree"
  colors:
    match: "grey50"
    differ: "dark_orange"
    missing_src: "blue"
    missing_dst: "blue"

# Logging
log_level: "warn"              # debug | info | warn | error
"""
