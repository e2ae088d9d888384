from .loader import load_config
from .models import (
    DisplayConfig,
    ParserConfig,
    ReporttreeConfig,
    StatusColors,
)

__all__ = [
    "DisplayConfig",
    "ParserConfig",
    "ReporttreeConfig",
    "StatusColors",
    "load_config",
]
