"""Tunables for argument parsing and object construction."""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from servitor.errors import InvalidArgumentError

__all__ = ["ContainerConfig"]


@dataclass(frozen=True)
class ContainerConfig:
    """Configuration of a :class:`~servitor.container.Container`.

    Attributes:
        reference_delimiter: A string argument containing this marker is
            treated as a reference to another entry.
        option_separator: Separates the option key from the reference in
            the items of an option-map argument (``"color::theme.color"``).
        back_reference: Name of the attribute set on every constructed
            object, pointing back at the container that built it.
        strict_options: If True, malformed option-map items raise
            :class:`InvalidArgumentError` instead of being skipped.
    """

    reference_delimiter: str = "."
    option_separator: str = "::"
    back_reference: str = "di"
    strict_options: bool = False

    def __post_init__(self):
        if not self.reference_delimiter:
            raise InvalidArgumentError("reference_delimiter must not be empty")
        if not self.option_separator:
            raise InvalidArgumentError("option_separator must not be empty")
        if not self.back_reference.isidentifier():
            raise InvalidArgumentError(
                f"back_reference {self.back_reference!r} is not a valid attribute name"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ContainerConfig":
        """Build a config from plain key/value pairs, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise InvalidArgumentError(f"Unknown container config keys {sorted(unknown)}")
        return cls(**mapping)
