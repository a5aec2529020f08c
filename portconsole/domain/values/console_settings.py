"""Console settings value object."""

from dataclasses import dataclass

from .console_modes import DataMode, DisplayMode, LineEnding


@dataclass(frozen=True, slots=True)
class ConsoleSettings:
    """User-selectable console options (value object).

    Defaults match a freshly opened console: UTF-8 input, no line
    ending, plain-text display, timestamps on, autoscroll on, echo off.
    """

    data_mode: DataMode = DataMode.UTF8
    line_ending: LineEnding = LineEnding.NONE
    display_mode: DisplayMode = DisplayMode.PLAIN_TEXT
    echo: bool = False
    autoscroll: bool = True
    show_timestamp: bool = True
