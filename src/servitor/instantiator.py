"""Construction of objects from class identifiers and argument specifications."""

import builtins
import importlib
import logging
from typing import Any, Callable, Optional

from servitor.arguments import parse_arguments, resolve_argument
from servitor.config import ContainerConfig
from servitor.domain import ClassId
from servitor.errors import InvalidArgumentError, UnknownClassError

__all__ = ["Instantiator", "locate"]

logger = logging.getLogger(__name__)


class Instantiator:
    """Builds objects on behalf of a container.

    References found in argument specifications are resolved through the
    container's ``get``, and every constructed object receives a
    back-reference to the container under ``config.back_reference``.
    """

    def __init__(self, container: Any, config: ContainerConfig):
        self._container = container
        self._config = config
        self._builders: dict[str, Callable[..., Any]] = {}

    def register_builder(self, name: str, builder: Callable[..., Any]):
        """Make ``builder`` available as the class identifier ``name``.

        Builders take precedence over import paths of the same name.
        """
        if not callable(builder):
            raise InvalidArgumentError(f"Builder for {name!r} is not callable")
        self._builders[name] = builder

    def locate(self, class_id: ClassId) -> Callable[..., Any]:
        """Find the constructor for ``class_id``.

        Raises:
            UnknownClassError: If the identifier names nothing callable.
        """
        if isinstance(class_id, str):
            if class_id in self._builders:
                return self._builders[class_id]
            return locate(class_id)
        if callable(class_id):
            return class_id
        raise UnknownClassError(class_id, "Expected a class, a builder or an import path.")

    def instance(self, class_id: ClassId, arguments: Any = None) -> Any:
        """Construct an object, resolving references in ``arguments`` first.

        Args:
            class_id: Class, builder, builder name or import path.
            arguments: Argument specification, see :mod:`servitor.arguments`.

        Returns:
            The new object, carrying a back-reference to the container.

        Raises:
            UnknownClassError: If ``class_id`` cannot be located.
            UnmappedEntryError: If an argument references an unmapped entry.
        """
        constructor = self.locate(class_id)
        parsed = parse_arguments(arguments, self._config)
        values = [resolve_argument(argument, self._container.get) for argument in parsed]

        obj = constructor(*values)
        self._attach_container(obj)
        return obj

    def _attach_container(self, obj: Any):
        name = self._config.back_reference
        try:
            setattr(obj, name, self._container)
        except AttributeError:
            # frozen dataclasses refuse setattr but accept object.__setattr__
            try:
                object.__setattr__(obj, name, self._container)
            except (AttributeError, TypeError):
                logger.debug(
                    "%s instance does not accept attribute %s", type(obj).__qualname__, name
                )


def locate(path: str) -> Callable[..., Any]:
    """Import the callable named by ``path``.

    Accepts ``"package.module:Qualified.Name"``, ``"package.module.Name"``
    (the longest importable module prefix wins) and bare builtin names.

    Example:
        >>> locate("collections.OrderedDict")
        >>> locate("collections:OrderedDict")
        >>> locate("dict")
    """
    if not path:
        raise UnknownClassError(path, "Empty class identifier.")

    if ":" in path:
        module_name, _, qualname = path.partition(":")
        module = _import(path, module_name) if module_name else None
        if module is None:
            raise UnknownClassError(path, f'No module named "{module_name}".')
        target = _walk(module, qualname.split("."), path)
    elif "." not in path:
        if not hasattr(builtins, path):
            raise UnknownClassError(path)
        target = getattr(builtins, path)
    else:
        target = _locate_dotted(path)

    if not callable(target):
        raise UnknownClassError(path, "It does not name a class or callable.")
    return target


def _locate_dotted(path: str) -> Any:
    parts = path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module = _import(path, ".".join(parts[:split]))
        if module is not None:
            return _walk(module, parts[split:], path)
    raise UnknownClassError(path)


def _import(path: str, module_name: str) -> Optional[Any]:
    """Import a module, returning None if the module itself does not exist."""
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        missing = e.name or ""
        if module_name == missing or module_name.startswith(missing + "."):
            return None
        raise UnknownClassError(path, f"Importing {module_name} failed: {e}") from e
    except ImportError as e:
        raise UnknownClassError(path, f"Importing {module_name} failed: {e}") from e


def _walk(target: Any, attributes: list[str], path: str) -> Any:
    for attribute in attributes:
        try:
            target = getattr(target, attribute)
        except AttributeError:
            raise UnknownClassError(path) from None
    return target
