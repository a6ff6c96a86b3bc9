"""Table layout for lookup results."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from .highlighter import HIGHLIGHT_COLOR, highlight_fields
from .lookup import LookupResult
from .markup import RenderConfig, render_text
from .models import EntryKind

# Display names for the entry fields
COLUMNS = {
    "kind": "Kind",
    "id": "Identifier",
    "name": "Name",
    "server": "Server",
}

KIND_LABELS = {
    EntryKind.classes: "Class",
    EntryKind.interfaces: "Interface",
}


def build_table(
    result: LookupResult,
    fragment: str,
    color: str = HIGHLIGHT_COLOR,
    config: RenderConfig | None = None,
    plain: bool = False,
) -> Table:
    """Build a table of *result* with *fragment* highlighted in each field."""
    config = config or RenderConfig()
    table = Table(title=f"Matches ({result.tier.value})", highlight=False)
    for header in COLUMNS.values():
        table.add_column(header, overflow="fold")

    for entry in result.entries:
        if plain:
            rendered = [Text(entry.id), Text(entry.name), Text(entry.server)]
        else:
            cells = highlight_fields(entry, fragment, color, config.delimiter)
            rendered = [render_text(c, config) for c in cells]
        table.add_row(KIND_LABELS[entry.kind], *rendered)

    return table
