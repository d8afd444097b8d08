"""Parsing and resolution of constructor argument specifications.

Entries are registered with a loosely typed argument specification::

    container.map_service("app", "myapp.App", [
        "logger.default",                         # reference to another entry
        "plain-string",                           # literal
        ["color::theme.color", "size::theme.size"],  # option map
    ])

:func:`parse_arguments` turns such a specification into tagged
:class:`~servitor.domain.Literal`, :class:`~servitor.domain.Reference` and
:class:`~servitor.domain.OptionMap` arguments, and :func:`resolve_argument`
turns a tagged argument into the value passed to the constructor. Tagged
arguments can be given directly wherever the loose form is accepted.
"""

import logging
from typing import Any, Callable, Sized

from servitor.config import ContainerConfig
from servitor.domain import Argument, Literal, OptionMap, Reference
from servitor.errors import InvalidArgumentError

__all__ = ["parse_arguments", "parse_argument", "resolve_argument"]

logger = logging.getLogger(__name__)

_TAGGED = (Literal, Reference, OptionMap)


def parse_arguments(spec: Any, config: ContainerConfig) -> list[Argument]:
    """Normalise an argument specification into an ordered list of tagged arguments.

    Args:
        spec: None, a list or tuple of argument elements, or any other value,
            which is taken as the single argument. Empty values (``{}``,
            ``""``, empty sequences) mean no arguments.
        config: Supplies the reference delimiter and option separator.

    Returns:
        The tagged arguments in positional order. Empty if ``spec`` is None or
        empty.
    """
    if spec is None or (isinstance(spec, Sized) and len(spec) == 0):
        return []
    elements = spec if isinstance(spec, (list, tuple)) else [spec]
    return [parse_argument(element, config) for element in elements]


def parse_argument(element: Any, config: ContainerConfig) -> Argument:
    """Classify a single argument element.

    Example:
        >>> parse_argument("logger.default", ContainerConfig())  # Reference("logger.default")
        >>> parse_argument("plain", ContainerConfig())           # Literal("plain")
        >>> parse_argument(["a::x.y"], ContainerConfig())         # OptionMap({"a": Reference("x.y")})
        >>> parse_argument([1, 2], ContainerConfig())              # Literal([1, 2])
    """
    if isinstance(element, _TAGGED):
        return element
    if isinstance(element, (list, tuple)) and all(isinstance(item, str) for item in element):
        return _parse_option_map(element, config)
    if isinstance(element, str) and config.reference_delimiter in element:
        return Reference(element)
    return Literal(element)


def resolve_argument(argument: Argument, get: Callable[[str], Any]) -> Any:
    """Turn a tagged argument into a concrete value.

    Args:
        argument: The argument to resolve.
        get: Looks up container entries by name; called for every reference,
            so resolving may recursively construct other entries.
    """
    if isinstance(argument, Reference):
        return get(argument.name)
    if isinstance(argument, OptionMap):
        return {key: resolve_argument(value, get) for key, value in argument.options.items()}
    if isinstance(argument, Literal):
        return argument.value
    raise InvalidArgumentError(f"{argument!r} is not a tagged argument")


def _parse_option_map(items, config: ContainerConfig) -> OptionMap:
    options: dict[str, Argument] = {}
    for item in items:
        key, separator, reference = item.partition(config.option_separator)
        if not separator or config.reference_delimiter not in reference:
            if config.strict_options:
                raise InvalidArgumentError(f"Option item {item!r} does not name a reference")
            logger.debug("Skipping option item %r without a reference", item)
            continue
        options[key] = Reference(reference)
    return OptionMap(options)
