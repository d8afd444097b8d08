__all__ = [
    "ContainerError",
    "UnmappedEntryError",
    "UnknownClassError",
    "MethodNotFoundError",
    "MissingParameterError",
    "InvalidArgumentError",
    "IllegalMutationError",
]


class ContainerError(Exception):
    """Base class for every error raised by the container."""

    pass


class UnmappedEntryError(ContainerError):
    """Raised when a requested name has no registered entry."""

    def __init__(self, name: str):
        super().__init__(f'Service, factory or value "{name}" is not mapped.')
        self.name = name


class UnknownClassError(ContainerError):
    """Raised when a class identifier cannot be located or is not constructible."""

    def __init__(self, class_id, reason: str = ""):
        message = f'Class "{class_id}" cannot be located.'
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.class_id = class_id


class MethodNotFoundError(ContainerError):
    """Raised when the method to invoke does not exist on the target object."""

    def __init__(self, method_name: str, target: object):
        super().__init__(
            f'Method "{method_name}" not found in "{type(target).__qualname__}".'
        )
        self.method_name = method_name
        self.target = target


class MissingParameterError(ContainerError):
    """Raised when a required method parameter has neither a value nor a default."""

    def __init__(self, parameter_name: str, method_name: str):
        super().__init__(
            f'Not optional parameter "{parameter_name}" of "{method_name}" missing.'
        )
        self.parameter_name = parameter_name
        self.method_name = method_name


class InvalidArgumentError(ContainerError):
    """Raised on malformed input to the container."""

    pass


class IllegalMutationError(ContainerError):
    """Raised when entries are written through indexed access."""

    pass
