"""Abstract contract of a dependency container.

Collaborators that only register and resolve entries can depend on
:class:`DependencyContainer` rather than on the concrete
:class:`~servitor.container.Container`.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from servitor.domain import ClassId

__all__ = ["DependencyContainer"]


class DependencyContainer(ABC):
    """Public contract of a container: mapping, resolution and invocation.

    The indexed view is implemented here on top of :meth:`get_sfv`,
    :meth:`exists` and :meth:`unmap`. Indexed writes are left to subclasses,
    which must reject them.
    """

    @abstractmethod
    def instance(self, class_id: ClassId, arguments: Any = None) -> Any:
        """Create an object, injecting the entries its arguments reference."""

    @abstractmethod
    def map_value(self, name: str, value: Any):
        """Map a named value, returned verbatim on every request."""

    @abstractmethod
    def map_service(self, name: str, class_id: ClassId, arguments: Any = None):
        """Map a named service. Requesting it always returns the same object."""

    @abstractmethod
    def map_factory(self, name: str, class_id: ClassId, arguments: Any = None):
        """Map a named factory. Requesting it always returns a new object."""

    @abstractmethod
    def unmap(self, name: str):
        """Remove a mapping. Unknown names are ignored."""

    @abstractmethod
    def invoke_method(self, obj: Any, method_name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Call a method, binding its parameters from ``params`` by name."""

    @abstractmethod
    def get_sfv(self, name: str) -> Any:
        """Return the requested service, factory product or value."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether anything is mapped under ``name``."""

    def get(self, name: str) -> Any:
        return self.get_sfv(name)

    def __getitem__(self, name: str) -> Any:
        return self.get_sfv(name)

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __delitem__(self, name: str):
        self.unmap(name)

    @abstractmethod
    def __setitem__(self, name: str, value: Any):
        """Always fails: entries are only created through the map operations."""
