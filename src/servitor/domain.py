"""Domain models used throughout the container."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping, Union

__all__ = [
    "ClassId",
    "EntryKind",
    "Entry",
    "Literal",
    "Reference",
    "OptionMap",
    "Argument",
]


ClassId = Union[str, type, Callable[..., Any]]
"""Anything the instantiator can turn into a constructor.

Either a callable (a class or a builder function), the name of a registered
builder, or an import path such as ``"package.module.Class"`` or
``"package.module:Outer.Inner"``.
"""


class EntryKind(Enum):
    """How a registered entry is turned into a value on resolution."""

    VALUE = "value"
    SERVICE = "service"
    FACTORY = "factory"


@dataclass(frozen=True)
class Entry:
    """A single named registration.

    Attributes:
        name: The unique name the entry is registered under.
        kind: Whether the entry is a value, a singleton service or a factory.
        payload: The literal value for VALUE entries, the class identifier for
            SERVICE and FACTORY entries.
        arguments: The argument specification used when constructing the
            payload. Always None for VALUE entries.
    """

    name: str
    kind: EntryKind
    payload: Any
    arguments: Any = None


@dataclass(frozen=True)
class Literal:
    """An argument passed to a constructor exactly as given."""

    value: Any


@dataclass(frozen=True)
class Reference:
    """An argument replaced by the container entry registered under ``name``."""

    name: str


@dataclass(frozen=True)
class OptionMap:
    """An argument built as a dict whose values are themselves resolved.

    Example:
        >>> OptionMap({"color": Reference("theme.color"), "size": Literal(12)})
    """

    options: Mapping[str, "Argument"] = field(default_factory=dict)


Argument = Union[Literal, Reference, OptionMap]
