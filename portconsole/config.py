"""Configuration loading and validation using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from portconsole.domain import (
    DEFAULT_HISTORY_SIZE,
    DEFAULT_SCROLLBACK,
    BufferLimits,
    ConsoleSettings,
    DataMode,
    DisplayMode,
    LineEnding,
)
from portconsole.infrastructure.config import YAMLConfigLoader

# Short names accepted in config files and on the command line
_ALIASES: dict[type[Enum], dict[str, Enum]] = {
    DataMode: {
        "utf8": DataMode.UTF8,
        "utf-8": DataMode.UTF8,
        "ascii": DataMode.UTF8,
        "hex": DataMode.HEXADECIMAL,
        "hexadecimal": DataMode.HEXADECIMAL,
    },
    DisplayMode: {
        "plain": DisplayMode.PLAIN_TEXT,
        "plain_text": DisplayMode.PLAIN_TEXT,
        "text": DisplayMode.PLAIN_TEXT,
        "hex": DisplayMode.HEXADECIMAL,
        "hexadecimal": DisplayMode.HEXADECIMAL,
    },
    LineEnding: {
        "none": LineEnding.NONE,
        "nl": LineEnding.NEW_LINE,
        "lf": LineEnding.NEW_LINE,
        "new_line": LineEnding.NEW_LINE,
        "cr": LineEnding.CARRIAGE_RETURN,
        "carriage_return": LineEnding.CARRIAGE_RETURN,
        "both": LineEnding.BOTH,
        "crlf": LineEnding.BOTH,
    },
}


def parse_mode(enum_type: type[Enum], value: Any) -> Enum:
    """Resolve an enum member from a member, value or (case-insensitive) name."""
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        aliases = _ALIASES.get(enum_type, {})
        if key in aliases:
            return aliases[key]
        for member in enum_type:
            if member.name.lower() == key:
                return member
    elif isinstance(value, int) and not isinstance(value, bool):
        return enum_type(value)

    choices = ", ".join(sorted(_ALIASES.get(enum_type, {})))
    raise ValueError(f"Invalid {enum_type.__name__}: {value!r} (expected one of: {choices})")


class ConsoleConfig(BaseModel):
    """Console display and send options."""

    data_mode: DataMode = DataMode.UTF8
    line_ending: LineEnding = LineEnding.NONE
    display_mode: DisplayMode = DisplayMode.PLAIN_TEXT
    echo: bool = False
    autoscroll: bool = True
    show_timestamp: bool = True

    @field_validator("data_mode", mode="before")
    @classmethod
    def validate_data_mode(cls, v: Any) -> Enum:
        return parse_mode(DataMode, v)

    @field_validator("line_ending", mode="before")
    @classmethod
    def validate_line_ending(cls, v: Any) -> Enum:
        return parse_mode(LineEnding, v)

    @field_validator("display_mode", mode="before")
    @classmethod
    def validate_display_mode(cls, v: Any) -> Enum:
        return parse_mode(DisplayMode, v)

    def to_settings(self) -> ConsoleSettings:
        return ConsoleSettings(**self.model_dump())


class BufferConfig(BaseModel):
    """Scrollback and history capacities."""

    scrollback: int = Field(default=DEFAULT_SCROLLBACK, ge=1, le=1_000_000)
    history_size: int = Field(default=DEFAULT_HISTORY_SIZE, ge=1, le=10_000)

    def to_limits(self) -> BufferLimits:
        return BufferLimits(scrollback=self.scrollback, history_size=self.history_size)


class TickConfig(BaseModel):
    """Flush tick configuration."""

    rate_hz: float = Field(default=24.0, gt=0, le=1000)


class SerialConfig(BaseModel):
    """Serial port configuration."""

    port: str = ""
    baudrate: int = Field(default=115200, ge=50, le=10_000_000)
    write_timeout: float = Field(default=1.0, gt=0)


class Config(BaseModel):
    """Application configuration."""

    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    buffers: BufferConfig = Field(default_factory=BufferConfig)
    tick: TickConfig = Field(default_factory=TickConfig)
    serial: SerialConfig = Field(default_factory=SerialConfig)


def load_config(config_path: Path | str = "portconsole.yaml") -> Config:
    """Load configuration from a YAML file (defaults if it does not exist)."""
    data = YAMLConfigLoader(config_path).load()
    return Config.model_validate(data)
