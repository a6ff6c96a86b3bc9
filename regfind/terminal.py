"""Terminal output targets for the markup renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console
from rich.style import Style
from rich.text import Text

from .markup import Color


def color_style(foreground: Color | None, background: Color | None) -> Style:
    """Build a rich Style; None leaves that side to the terminal default."""
    return Style(
        color=foreground.value if foreground is not None else None,
        bgcolor=background.value if background is not None else None,
    )


class AbstractTerminal(ABC):
    """Sink for rendered spans."""

    @abstractmethod
    def write(self, text: str, foreground: Color | None, background: Color | None) -> None:
        """Write *text* with optional color overrides."""

    @abstractmethod
    def newline(self) -> None:
        """Write one line break."""


class ConsoleTerminal(AbstractTerminal):
    """Writes spans straight to a rich Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def write(self, text: str, foreground: Color | None, background: Color | None) -> None:
        self.console.print(
            Text(text, style=color_style(foreground, background)),
            end="",
            soft_wrap=True,
        )

    def newline(self) -> None:
        self.console.print()


class TextTerminal(AbstractTerminal):
    """Collects spans into a rich Text, e.g. for a table cell."""

    def __init__(self) -> None:
        self.text = Text()

    def write(self, text: str, foreground: Color | None, background: Color | None) -> None:
        self.text.append(text, style=color_style(foreground, background))

    def newline(self) -> None:
        self.text.append("\n")
