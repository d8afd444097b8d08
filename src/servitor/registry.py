"""Storage for named entries and the singleton instances built from them."""

import logging
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Optional

from servitor.domain import ClassId, Entry, EntryKind
from servitor.errors import IllegalMutationError, InvalidArgumentError, UnmappedEntryError

__all__ = ["EntryRegistry"]

logger = logging.getLogger(__name__)


class EntryRegistry:
    """Registry of entries, keyed by name.

    Entries can only be added through :meth:`map_value`, :meth:`map_service`
    and :meth:`map_factory`, so every entry always carries a declared kind.
    Instances built for SERVICE entries are kept in a separate cache which the
    registry invalidates whenever the entry is replaced or removed.
    """

    def __init__(self):
        self._entries: dict[str, Entry] = {}
        self._singletons: dict[str, Any] = {}

    @property
    def entries(self) -> Mapping[str, Entry]:
        """Read-only view of the registered entries."""
        return MappingProxyType(self._entries)

    def map_value(self, name: str, value: Any):
        self._store(Entry(_checked_name(name), EntryKind.VALUE, value))

    def map_service(self, name: str, class_id: ClassId, arguments: Any = None):
        self._store(Entry(_checked_name(name), EntryKind.SERVICE, class_id, arguments))

    def map_factory(self, name: str, class_id: ClassId, arguments: Any = None):
        self._store(Entry(_checked_name(name), EntryKind.FACTORY, class_id, arguments))

    def exists(self, name: str) -> bool:
        return name in self._entries

    def lookup(self, name: str) -> Entry:
        """Return the entry registered under ``name``.

        Raises:
            UnmappedEntryError: If nothing is registered under the name.
        """
        try:
            return self._entries[name]
        except KeyError:
            raise UnmappedEntryError(name) from None

    def unmap(self, name: str):
        """Remove an entry and its cached singleton. Unknown names are ignored."""
        if self._entries.pop(name, None) is not None:
            logger.debug("Unmapped %s", name)
        self._singletons.pop(name, None)

    def names(self) -> list[str]:
        return list(self._entries)

    def is_cached(self, name: str) -> bool:
        return name in self._singletons

    def cached(self, name: str) -> Optional[Any]:
        return self._singletons.get(name)

    def cache(self, name: str, instance: Any):
        self._singletons[name] = instance

    def cached_names(self) -> set[str]:
        return set(self._singletons)

    def evict(self, names: Iterable[str]):
        """Drop cached singletons without touching their entries."""
        for name in names:
            if self._singletons.pop(name, None) is not None:
                logger.debug("Evicted service %s", name)

    def _store(self, entry: Entry):
        if entry.name in self._entries:
            logger.debug("Replacing %s entry %s", self._entries[entry.name].kind.value, entry.name)
        self._singletons.pop(entry.name, None)
        self._entries[entry.name] = entry
        logger.debug("Mapped %s %s", entry.kind.value, entry.name)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)

    def __setitem__(self, name, value):
        raise IllegalMutationError(
            "Entries cannot be written directly. "
            "Use map_value, map_service or map_factory instead."
        )


def _checked_name(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"Entry name must be a non-empty string, got {name!r}")
    return name
