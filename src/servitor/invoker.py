"""Invocation of methods with named parameters bound from their signatures."""

import inspect
from collections.abc import Mapping
from typing import Any, Optional

from servitor.errors import InvalidArgumentError, MethodNotFoundError, MissingParameterError

__all__ = ["Invoker", "invoke_method"]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class Invoker:
    """Calls methods on objects, matching named parameters to the declared signature."""

    def invoke(self, obj: Any, method_name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return invoke_method(obj, method_name, params)


def invoke_method(obj: Any, method_name: str, params: Optional[Mapping[str, Any]] = None) -> Any:
    """Call ``obj.method_name`` with arguments taken from ``params`` by name.

    Each declared parameter is bound, in declaration order, to the value
    under its name in ``params`` or, failing that, to its declared default.
    Keys in ``params`` that match no parameter are ignored, and ``*args`` /
    ``**kwargs`` receive nothing.

    Args:
        obj: The object owning the method.
        method_name: Name of the method to call.
        params: Mapping of parameter names to values. None means no values.

    Returns:
        Whatever the method returns.

    Raises:
        InvalidArgumentError: If ``params`` is not a mapping or ``method_name``
            is not a string.
        MethodNotFoundError: If ``obj`` has no callable ``method_name``.
        MissingParameterError: If a parameter without default is absent from ``params``.

    Example:
        >>> class Greeter:
        ...     def greet(self, name, punctuation="!"):
        ...         return f"Hello {name}{punctuation}"
        >>> invoke_method(Greeter(), "greet", {"name": "Arthur"})  # "Hello Arthur!"
    """
    if params is None:
        params = {}
    if not isinstance(params, Mapping):
        raise InvalidArgumentError("Parameter to invoke needs to be a mapping of names to values.")
    if not isinstance(method_name, str):
        raise InvalidArgumentError(f"Method name must be a string, got {method_name!r}")

    method = getattr(obj, method_name, None)
    if method is None or not callable(method):
        raise MethodNotFoundError(method_name, obj)

    args = []
    kwargs = {}
    for name, parameter in _signature(method, method_name, obj).parameters.items():
        if parameter.kind in _VARIADIC:
            continue
        if name in params:
            value = params[name]
        elif parameter.default is not inspect.Parameter.empty:
            value = parameter.default
        else:
            raise MissingParameterError(name, method_name)

        if parameter.kind in _POSITIONAL:
            args.append(value)
        else:
            kwargs[name] = value

    return method(*args, **kwargs)


def _signature(method, method_name: str, obj: Any) -> inspect.Signature:
    try:
        return inspect.signature(method)
    except (TypeError, ValueError) as e:
        raise MethodNotFoundError(method_name, obj) from e
