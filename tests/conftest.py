"""Shared fixtures for regfind tests."""

import logging
from pathlib import Path

import pytest
from regfind.markup import Color
from regfind.terminal import AbstractTerminal

SHELL_LINK = '{00021401-0000-0000-C000-000000000046}'
SHELL_LINK_W = '{000214F9-0000-0000-C000-000000000046}'
UNKNOWN_IFACE = '{00000000-0000-0000-C000-000000000046}'

REGISTRY_YAML = f"""\
classes:
  - id: "{SHELL_LINK}"
    name: ShellLink
    server: C:\\Windows\\System32\\windows.storage.dll
  - id: "{{13709620-C279-11CE-A49E-444553540000}}"
    name: Shell.Application
    server: C:\\Windows\\System32\\shell32.dll
interfaces:
  - id: "{SHELL_LINK_W}"
    name: IShellLinkW
  - id: "{UNKNOWN_IFACE}"
    name: IUnknown
"""


class RecordingTerminal(AbstractTerminal):
    """Terminal that records every call instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def write(self, text: str, foreground: Color | None, background: Color | None) -> None:
        self.calls.append(('write', text, foreground, background))

    def newline(self) -> None:
        self.calls.append(('newline',))

    @property
    def writes(self) -> list[tuple]:
        return [c[1:] for c in self.calls if c[0] == 'write']

    @property
    def newlines(self) -> int:
        return sum(1 for c in self.calls if c[0] == 'newline')


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('regfind')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def terminal() -> RecordingTerminal:
    return RecordingTerminal()


@pytest.fixture
def registry_yaml(tmp_path: Path) -> Path:
    path = tmp_path / 'registry.yaml'
    path.write_text(REGISTRY_YAML, encoding='utf-8')
    return path
