"""Tests for regfind.table — result table with highlighted cells."""

from pathlib import Path

from rich.console import Console
from rich.text import Text
from regfind.lookup import lookup
from regfind.parser import load_registry
from regfind.table import COLUMNS, build_table


def _cells(table, column: int) -> list:
    return list(table.columns[column].cells)


class TestBuildTable:
    def test_columns_renamed(self, registry_yaml: Path) -> None:
        table = build_table(lookup(load_registry(registry_yaml), 'shell'), 'shell')
        assert [c.header for c in table.columns] == list(COLUMNS.values())
        assert _cells(table, 0) == ['Class', 'Class', 'Interface']

    def test_names_highlighted_with_original_casing(self, registry_yaml: Path) -> None:
        table = build_table(lookup(load_registry(registry_yaml), 'SHELL'), 'SHELL')
        names = _cells(table, 2)
        assert all(isinstance(n, Text) for n in names)
        assert [n.plain for n in names] == ['ShellLink', 'Shell.Application', 'IShellLinkW']
        first = names[0]
        styled = [first.plain[s.start:s.end] for s in first.spans if s.style]
        assert styled == ['Shell']

    def test_plain_has_no_styles(self, registry_yaml: Path) -> None:
        table = build_table(lookup(load_registry(registry_yaml), 'shell'), 'shell', plain=True)
        names = _cells(table, 2)
        assert names[0].plain == 'ShellLink'
        assert names[0].spans == []

    def test_renders(self, registry_yaml: Path) -> None:
        result = lookup(load_registry(registry_yaml), 'IUnknown')
        console = Console(width=200, force_terminal=False, color_system=None)
        with console.capture() as capture:
            console.print(build_table(result, 'IUnknown'))
        out = capture.get()
        assert 'IUnknown' in out
        assert 'Interface' in out
        assert 'exact_name' in out
