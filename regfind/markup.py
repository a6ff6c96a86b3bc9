"""Inline color markup renderer.

Markup grammar::

    directive = DELIM name [":" name] DELIM
    name      = 1*ALPHA

``DELIM`` defaults to ``#``. A directive sets the foreground (and optionally
the background) for exactly the next token, which is always rendered as
text even if it looks like another directive. After every text token the
colors go back to the caller defaults. Names that don't resolve to a
:class:`Color` leave the token as plain text, and so does anything before
the first or after the last delimiter.

>>> tokenize("#green#hi#")
['', 'green', 'hi', '']
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.text import Text

    from .terminal import AbstractTerminal

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "#"

_DIRECTIVE_RE = re.compile(r"^([A-Za-z]+)(?::([A-Za-z]+))?$")


class Color(str, Enum):
    """Console colors, valued by the rich color name used to draw them."""

    black = "black"
    darkblue = "blue"
    darkgreen = "green"
    darkcyan = "cyan"
    darkred = "red"
    darkmagenta = "magenta"
    darkyellow = "yellow"
    gray = "white"
    darkgray = "bright_black"
    blue = "bright_blue"
    green = "bright_green"
    cyan = "bright_cyan"
    red = "bright_red"
    magenta = "bright_magenta"
    yellow = "bright_yellow"
    white = "bright_white"


class ClassifierState(str, Enum):
    expecting_directive = "expecting_directive"
    forced_text = "forced_text"


@dataclass(frozen=True)
class Directive:
    """A consumed color directive. ``None`` leaves that side unchanged."""

    foreground: Color | None = None
    background: Color | None = None


@dataclass(frozen=True)
class RenderConfig:
    """Caller options for one render call.

    ``None`` colors mean "no explicit override": the terminal's own default
    is used.
    """

    default_foreground: Color | None = None
    default_background: Color | None = None
    suppress_trailing_newline: bool = False
    delimiter: str = DEFAULT_DELIMITER


@dataclass
class RenderState:
    """Mutable color state owned by a single :func:`render` call."""

    default_foreground: Color | None = None
    default_background: Color | None = None
    foreground: Color | None = None
    background: Color | None = None
    mode: ClassifierState = ClassifierState.expecting_directive

    @classmethod
    def from_config(cls, config: RenderConfig) -> RenderState:
        return cls(
            default_foreground=config.default_foreground,
            default_background=config.default_background,
            foreground=config.default_foreground,
            background=config.default_background,
        )

    def apply(self, directive: Directive) -> None:
        if directive.foreground is not None:
            self.foreground = directive.foreground
        if directive.background is not None:
            self.background = directive.background

    def revert(self) -> None:
        self.foreground = self.default_foreground
        self.background = self.default_background


def tokenize(text: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split *text* at every *delimiter*, keeping empty tokens."""
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    return text.split(delimiter)


def resolve_color(name: str) -> Color | None:
    """Return the :class:`Color` called *name* (any case), or None."""
    return Color.__members__.get(name.lower())


def parse_directive(token: str) -> Directive | None:
    """Parse ``name`` or ``fg:bg``; None unless at least one name resolves."""
    match = _DIRECTIVE_RE.match(token)
    if not match:
        return None

    fg_name, bg_name = match.groups()
    foreground = resolve_color(fg_name)
    background = resolve_color(bg_name) if bg_name else None
    if foreground is None and background is None:
        logger.debug("Unresolved color directive %r rendered as text", token)
        return None
    return Directive(foreground=foreground, background=background)


def classify(
    token: str, state: ClassifierState, bounded: bool = True
) -> tuple[Directive | None, ClassifierState]:
    """Classify one token.

    *bounded* is False for the first and last tokens of a string, which lack
    a delimiter on one side and so are never directives.

    Returns ``(directive, next_state)``; a None directive means the token is
    literal text. Pure: no I/O and no render state is touched.
    """
    if state is ClassifierState.forced_text or not bounded:
        return None, ClassifierState.expecting_directive

    directive = parse_directive(token)
    if directive is None:
        return None, ClassifierState.expecting_directive
    return directive, ClassifierState.forced_text


def render(
    text: str,
    terminal: AbstractTerminal,
    config: RenderConfig | None = None,
) -> None:
    """Write marked-up *text* to *terminal*.

    Never raises for any input string: anything that isn't a resolvable
    directive is written as text.
    """
    config = config or RenderConfig()
    state = RenderState.from_config(config)

    tokens = tokenize(text, config.delimiter)
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        directive, state.mode = classify(token, state.mode, 0 < i < last)
        if directive is not None:
            state.apply(directive)
            continue

        if token:
            terminal.write(token, state.foreground, state.background)
        state.revert()

    if not config.suppress_trailing_newline:
        terminal.newline()


def render_text(text: str, config: RenderConfig | None = None) -> Text:
    """Render *text* into a :class:`rich.text.Text` (no trailing newline)."""
    from .terminal import TextTerminal

    config = config or RenderConfig()
    terminal = TextTerminal()
    render(text, terminal, replace(config, suppress_trailing_newline=True))
    return terminal.text


def strip_markup(text: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Return the characters :func:`render` would write, without colors."""
    parts: list[str] = []
    mode = ClassifierState.expecting_directive
    tokens = tokenize(text, delimiter)
    last = len(tokens) - 1
    for i, token in enumerate(tokens):
        directive, mode = classify(token, mode, 0 < i < last)
        if directive is None:
            parts.append(token)
    return "".join(parts)
