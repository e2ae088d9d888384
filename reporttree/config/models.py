from pydantic import BaseModel, Field, field_validator
from rich.color import Color, ColorParseError
from typing import Literal


class ParserConfig(BaseModel):
    separator: str = Field(default=" ", min_length=1, max_length=1)
    strict_separator: bool = False


class StatusColors(BaseModel):
    match: str = "grey50"
    differ: str = "dark_orange"
    missing_src: str = "blue"
    missing_dst: str = "blue"

    @field_validator("match", "differ", "missing_src", "missing_dst")
    @classmethod
    def known_color(cls, value: str) -> str:
        try:
            Color.parse(value)
        except ColorParseError as e:
            raise ValueError(f"unknown colour {value!r}") from e
        return value


class DisplayConfig(BaseModel):
    hide_matches: bool = False
    max_depth: int | None = Field(default=None, gt=0)
    source_title: str = "Source Tree"
    destination_title: str = "Remote Tree"
    colors: StatusColors = Field(default_factory=StatusColors)


class ReporttreeConfig(BaseModel):
    parser: ParserConfig = Field(default_factory=ParserConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
