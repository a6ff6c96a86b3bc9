"""Parsers for registry files (txt + yaml formats)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .models import Entry, EntryKind, Registry

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Registry file missing or unreadable."""


def _add_entry(registry: Registry, entry: Entry) -> None:
    if not registry.add(entry):
        logger.warning("Duplicate %s id %s (name: %s) — skipping", entry.kind.value, entry.id, entry.name)


def _required(item: dict, key: str) -> str:
    """Return item[key] as a string; a missing or null value raises KeyError."""
    value = item[key]
    if value is None:
        raise KeyError(key)
    return str(value)


def parse_registry_txt(path: str | Path) -> Registry:
    """Parse a txt registry.

    ``[classes]`` / ``[interfaces]`` lines open a section; entry lines are
    ``ID NAME [SERVER...]``. ``#`` lines and blank lines are ignored.
    """
    registry = Registry()
    kind: EntryKind | None = None

    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read registry {path}: {e}") from e

    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped.startswith("[") and stripped.endswith("]"):
            section = stripped[1:-1].strip().lower()
            try:
                kind = EntryKind(section)
            except ValueError:
                logger.warning("Unknown section [%s] at line %d — entries ignored", section, lineno)
                kind = None
            continue

        if kind is None:
            logger.warning("Entry outside a known section at line %d: %r", lineno, stripped)
            continue

        parts = stripped.split(None, 2)
        if len(parts) < 2:
            logger.warning("Skipping malformed registry line %d: %r", lineno, stripped)
            continue

        try:
            entry = Entry(
                kind=kind,
                id=parts[0],
                name=parts[1],
                server=parts[2] if len(parts) > 2 else "",
            )
        except ValueError as e:
            logger.warning("Invalid registry entry at line %d: %s", lineno, e)
            continue
        _add_entry(registry, entry)

    return registry


def parse_registry_yaml(path: str | Path) -> Registry:
    """Parse a YAML registry with ``classes:`` and ``interfaces:`` lists."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read registry {path}: {e}") from e
    except yaml.YAMLError as e:
        raise RegistryError(f"Invalid YAML in registry {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RegistryError(f"Registry {path} must be a mapping with 'classes' and 'interfaces'")

    registry = Registry()
    for kind in EntryKind:
        section = data.get(kind.value) or []
        if not isinstance(section, list):
            logger.warning("YAML section '%s' is not a list — skipping", kind.value)
            continue
        for item in section:
            try:
                entry = Entry(
                    kind=kind,
                    id=_required(item, "id"),
                    name=_required(item, "name"),
                    server=str(item.get("server", "") or ""),
                )
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning("Skipping invalid YAML %s entry: %s", kind.value, e)
                continue
            _add_entry(registry, entry)

    return registry


def load_registry(path: str | Path) -> Registry:
    """Auto-detect format and load a registry."""
    p = Path(path)
    if not p.is_file():
        raise RegistryError(f"Registry file not found: {p}")
    if p.suffix in (".yaml", ".yml"):
        registry = parse_registry_yaml(p)
    else:
        registry = parse_registry_txt(p)
    logger.debug(
        "Loaded %d classes and %d interfaces from %s",
        len(registry.classes), len(registry.interfaces), p,
    )
    return registry
