"""Data models for regfind."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

GUID_RE = re.compile(
    r"^\{[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}\}$"
)
MAX_NAME_LEN = 256


class EntryKind(str, Enum):
    classes = "classes"
    interfaces = "interfaces"


class LookupTier(str, Enum):
    exact_id = "exact_id"
    exact_name = "exact_name"
    partial = "partial"
    none = "none"


def normalize_guid(guid: str) -> str:
    """Normalize a GUID to upper case wrapped in braces."""
    value = guid.strip().upper()
    if not value.startswith("{"):
        value = "{" + value
    if not value.endswith("}"):
        value = value + "}"
    return value


def validate_guid(guid: str) -> str:
    """Validate and normalize a GUID. Raises ValueError if invalid."""
    normalized = normalize_guid(guid)
    if not GUID_RE.match(normalized):
        raise ValueError(f"Invalid GUID: {guid}")
    return normalized


def validate_name(name: str) -> str:
    """Validate an entry name. Raises ValueError if invalid."""
    name = name.strip()
    if not name:
        raise ValueError("Entry name cannot be empty")
    if len(name) > MAX_NAME_LEN:
        raise ValueError(f"Entry name too long ({len(name)} > {MAX_NAME_LEN}): {name}")
    return name


@dataclass
class Entry:
    """One registered class or interface."""

    kind: EntryKind
    id: str
    name: str
    server: str = ""

    def __post_init__(self) -> None:
        self.kind = EntryKind(self.kind)
        self.id = validate_guid(self.id)
        self.name = validate_name(self.name)
        self.server = self.server.strip()


@dataclass
class Registry:
    """Entries of both kinds, keyed by normalized GUID per kind."""

    classes: dict[str, Entry] = field(default_factory=dict)
    interfaces: dict[str, Entry] = field(default_factory=dict)

    def section(self, kind: EntryKind) -> dict[str, Entry]:
        if kind == EntryKind.classes:
            return self.classes
        return self.interfaces

    def add(self, entry: Entry) -> bool:
        """Add *entry*; returns False if its id is already in that section."""
        section = self.section(entry.kind)
        if entry.id in section:
            return False
        section[entry.id] = entry
        return True

    def entries(self) -> list[Entry]:
        """All entries, classes first, each section in load order."""
        return list(self.classes.values()) + list(self.interfaces.values())

    def __len__(self) -> int:
        return len(self.classes) + len(self.interfaces)
