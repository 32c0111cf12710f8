from typing import Any

from attrs import define

from .types import type_name

__all__ = [
    "PathFmtError",
    "TemplateError",
    "MismatchError",
    "InvalidTargetError",
    "InaccessibleTaggedFieldError",
    "TypeCoercionFailedError",
    "FieldNotFoundError",
]


class PathFmtError(Exception):
    """The base for all errors raised by pathfmt."""


@define
class TemplateError(PathFmtError, ValueError):
    """The template text is malformed."""

    template: str
    token: str
    reason: str

    def __str__(self) -> str:
        return f"invalid template {self.template!r}: {self.reason}: {self.token!r}"


@define
class MismatchError(PathFmtError):
    """A static segment of the template doesn't match the path."""

    template: str
    path: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return (
            f"expected format {self.template!r}: got {self.path!r}: "
            f"expected string {self.expected!r}, got {self.actual!r}"
        )


@define
class InvalidTargetError(PathFmtError, TypeError):
    """Binding and rendering require an attrs instance."""

    target: Any
    reason: str = "expected an attrs instance"

    def __str__(self) -> str:
        return f"{self.reason}, got {self.target!r}"


@define
class InaccessibleTaggedFieldError(PathFmtError):
    """A tagged field can't be set: it's private, or its class is frozen."""

    field: str
    tag: str

    def __str__(self) -> str:
        return f"field {self.field!r} tagged with {self.tag!r} can't be set"


@define
class TypeCoercionFailedError(PathFmtError):
    """A path value couldn't be parsed into its field's type.

    The underlying parse error is available as `__cause__`.
    """

    field: str
    raw_value: str
    target_type: Any

    def __str__(self) -> str:
        return (
            f"can't convert {self.raw_value!r} to {type_name(self.target_type)} "
            f"for field {self.field!r}"
        )


@define
class FieldNotFoundError(PathFmtError):
    """No field is tagged with a variable of the template."""

    variable: str

    def __str__(self) -> str:
        return f"field {self.variable!r} not found"
