"""Three-tier identifier lookup over a registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .models import GUID_RE, Entry, LookupTier, Registry, normalize_guid

logger = logging.getLogger(__name__)


@dataclass
class LookupResult:
    """Matches found and the tier that produced them."""

    tier: LookupTier = LookupTier.none
    entries: list[Entry] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.entries)


def _probe_id(registry: Registry, query: str) -> list[Entry]:
    """Exact id probe in both sections."""
    guid = normalize_guid(query)
    if not GUID_RE.match(guid):
        return []
    return [
        section[guid]
        for section in (registry.classes, registry.interfaces)
        if guid in section
    ]


def _match_name(registry: Registry, query: str) -> list[Entry]:
    needle = query.lower()
    return [e for e in registry.entries() if e.name.lower() == needle]


def _match_partial(registry: Registry, query: str) -> list[Entry]:
    needle = query.lower()
    return [
        e
        for e in registry.entries()
        if needle in e.id.lower() or needle in e.name.lower() or needle in e.server.lower()
    ]


def lookup(registry: Registry, query: str) -> LookupResult:
    """Resolve *query*: exact id, then exact name, then partial match."""
    query = query.strip()
    if not query:
        return LookupResult()

    for tier, finder in (
        (LookupTier.exact_id, _probe_id),
        (LookupTier.exact_name, _match_name),
        (LookupTier.partial, _match_partial),
    ):
        found = finder(registry, query)
        if found:
            logger.debug("Query %r matched %d entries (%s)", query, len(found), tier.value)
            return LookupResult(tier=tier, entries=found)

    logger.debug("Query %r matched nothing", query)
    return LookupResult()
