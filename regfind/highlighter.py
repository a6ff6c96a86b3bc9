"""Wrap search matches in color markup for the renderer."""

from __future__ import annotations

import re

from .markup import DEFAULT_DELIMITER, parse_directive
from .models import Entry

HIGHLIGHT_COLOR = "yellow"


def highlight(
    text: str,
    fragment: str,
    color: str = HIGHLIGHT_COLOR,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Wrap every case-insensitive occurrence of *fragment* as ``#color#match#``.

    The matched text keeps its original casing. Text between two matches is
    a delimited token of its own, so if it would parse as a directive it is
    split into single letters, which never name a color.
    """
    if not fragment:
        return text
    pattern = re.compile(re.escape(fragment), re.IGNORECASE)

    parts: list[str] = []
    pos = 0
    for i, match in enumerate(pattern.finditer(text)):
        segment = text[pos:match.start()]
        if i > 0 and parse_directive(segment) is not None:
            segment = delimiter.join(segment)
        parts.append(segment)
        parts.append(f"{delimiter}{color}{delimiter}{match.group(0)}{delimiter}")
        pos = match.end()
    parts.append(text[pos:])
    return "".join(parts)


def highlight_fields(
    entry: Entry,
    fragment: str,
    color: str = HIGHLIGHT_COLOR,
    delimiter: str = DEFAULT_DELIMITER,
) -> tuple[str, str, str]:
    """Return (id, name, server) with matches of *fragment* marked up."""
    return (
        highlight(entry.id, fragment, color, delimiter),
        highlight(entry.name, fragment, color, delimiter),
        highlight(entry.server, fragment, color, delimiter),
    )
