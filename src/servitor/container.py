"""The container facade and its process-wide accessor.

A :class:`Container` combines the entry registry, the instantiator and the
invoker behind one small API::

    container = Container()
    container.map_value("db.url", "sqlite://")
    container.map_service("db.engine", "myapp.db.Engine", ["db.url"])
    container.map_factory("db.session", "myapp.db.Session", ["db.engine"])

    engine = container["db.engine"]        # same object on every request
    session = container.get("db.session")  # new object on every request

Applications usually build one container at startup and hand it to their
collaborators. :func:`get_instance` offers a shared process-wide container for
code that cannot be handed one.
"""

import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Optional, Union

from servitor.config import ContainerConfig
from servitor.domain import ClassId, Entry, EntryKind
from servitor.errors import IllegalMutationError
from servitor.instantiator import Instantiator
from servitor.interface import DependencyContainer
from servitor.invoker import Invoker
from servitor.registry import EntryRegistry

__all__ = ["Container", "get_instance"]

logger = logging.getLogger(__name__)

_instance: Optional["Container"] = None


class Container(DependencyContainer):
    """Registry of services, factories and values with on-demand construction.

    Attributes:
        settings: Read-only view of the settings the container was created
            with. The container itself never interprets them.
        config: Parsing and construction tunables.
    """

    def __init__(
        self,
        settings: Optional[Mapping[str, Any]] = None,
        config: Union[ContainerConfig, Mapping[str, Any], None] = None,
    ):
        if config is None:
            config = ContainerConfig()
        elif not isinstance(config, ContainerConfig):
            config = ContainerConfig.from_mapping(config)

        self.settings: Mapping[str, Any] = MappingProxyType(dict(settings or {}))
        self.config = config
        self._registry = EntryRegistry()
        self._instantiator = Instantiator(self, config)
        self._invoker = Invoker()
        self._depth = 0

    @classmethod
    def get_instance(cls, settings: Optional[Mapping[str, Any]] = None) -> "Container":
        return get_instance(settings)

    @property
    def registry(self) -> EntryRegistry:
        return self._registry

    def map_value(self, name: str, value: Any):
        self._registry.map_value(name, value)

    def map_service(self, name: str, class_id: ClassId, arguments: Any = None):
        self._registry.map_service(name, class_id, arguments)

    def map_factory(self, name: str, class_id: ClassId, arguments: Any = None):
        self._registry.map_factory(name, class_id, arguments)

    def unmap(self, name: str):
        self._registry.unmap(name)

    def exists(self, name: str) -> bool:
        return self._registry.exists(name)

    def register_builder(self, name: str, builder: Callable[..., Any]):
        """Register a builder usable as class identifier ``name`` in map and instance calls."""
        self._instantiator.register_builder(name, builder)

    def instance(self, class_id: ClassId, arguments: Any = None) -> Any:
        with self._resolution():
            return self._instantiator.instance(class_id, arguments)

    def invoke_method(self, obj: Any, method_name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._invoker.invoke(obj, method_name, params)

    def get_sfv(self, name: str) -> Any:
        """Resolve a service, factory or value by name.

        Values are returned as mapped, factories build a new object on every
        call and services build one object on first request and return it
        from then on.

        Raises:
            UnmappedEntryError: If nothing is mapped under ``name``.
        """
        entry = self._registry.lookup(name)
        with self._resolution():
            return self._resolve(name, entry)

    def _resolve(self, name: str, entry: Entry) -> Any:
        if entry.kind is EntryKind.VALUE:
            return entry.payload
        if entry.kind is EntryKind.FACTORY:
            return self._instantiator.instance(entry.payload, entry.arguments)

        if not self._registry.is_cached(name):
            service = self._instantiator.instance(entry.payload, entry.arguments)
            self._registry.cache(name, service)
            logger.debug("Created service %s", name)
        return self._registry.cached(name)

    @contextmanager
    def _resolution(self):
        """Undo singleton caching done by a resolution that ends in an error.

        Only the outermost resolution takes the snapshot, so services built
        for nested references are evicted together with the failed request.
        """
        outermost = self._depth == 0
        cached_before = self._registry.cached_names() if outermost else set()
        self._depth += 1
        try:
            yield
        except Exception:
            if outermost:
                self._registry.evict(self._registry.cached_names() - cached_before)
            raise
        finally:
            self._depth -= 1

    def __setitem__(self, name: str, value: Any):
        raise IllegalMutationError(
            "It is not allowed to map services, factories or values this way. "
            "Use map_value, map_service or map_factory instead."
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<Container with {len(self)} entries>"


def get_instance(settings: Optional[Mapping[str, Any]] = None) -> Container:
    """Return the shared process-wide container, creating it on first call.

    Args:
        settings: Settings for the container. Only used by the call that
            creates it; later calls ignore them.
    """
    global _instance
    if _instance is None:
        _instance = Container(settings)
        logger.debug("Created shared container")
    return _instance
