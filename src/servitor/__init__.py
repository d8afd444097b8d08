"""Servitor runtime service container.

Servitor maps names to values, singleton services and factories, and builds
objects on demand by resolving the constructor arguments that reference other
entries. Construction is late-bound: classes are named by import path, passed
directly, or registered as builder functions.

Key Features:
    - Values, singleton services and per-request factories under one registry
    - Reference arguments (``"logger.default"``) resolved recursively at construction
    - Option-map arguments (``["color::theme.color"]``) built into dicts
    - Tagged ``Literal``/``Reference``/``OptionMap`` arguments for unambiguous specs
    - Method invocation with parameters bound by name from the method signature
    - Every constructed object gets a back-reference to its container

Basic Usage:
    >>> from servitor import Container
    >>>
    >>> container = Container()
    >>> container.map_value("app.name", "demo")
    >>> container.map_service("app.logger", "logging.getLogger", ["app.name"])
    >>> container.map_factory("app.widget", "myapp.widgets.Widget", ["app.logger"])
    >>>
    >>> widget = container["app.widget"]
    >>> widget.di is container
    True

The package consists of:
    - container: The Container facade and the shared get_instance accessor
    - registry: Entry storage and the singleton cache
    - instantiator: Class location and object construction
    - arguments: Argument specification parsing and resolution
    - invoker: Signature-driven method invocation
    - domain: Entry and argument models
    - config: Container tunables
    - errors: Container-specific exceptions
"""

from servitor.config import ContainerConfig
from servitor.container import Container, get_instance
from servitor.domain import Entry, EntryKind, Literal, OptionMap, Reference
from servitor.errors import (
    ContainerError,
    IllegalMutationError,
    InvalidArgumentError,
    MethodNotFoundError,
    MissingParameterError,
    UnknownClassError,
    UnmappedEntryError,
)
from servitor.interface import DependencyContainer

__all__ = [
    "Container",
    "ContainerConfig",
    "DependencyContainer",
    "Entry",
    "EntryKind",
    "Literal",
    "OptionMap",
    "Reference",
    "get_instance",
    "ContainerError",
    "IllegalMutationError",
    "InvalidArgumentError",
    "MethodNotFoundError",
    "MissingParameterError",
    "UnknownClassError",
    "UnmappedEntryError",
]
