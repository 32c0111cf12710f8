"""Binding path values to attrs classes."""
import logging
from collections.abc import Mapping
from functools import cache
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from attr._make import _frozen_setattrs
from attrs import Attribute, field, fields, frozen, has, setters
from attrs.exceptions import FrozenError
from cattrs import Converter

from .errors import (
    FieldNotFoundError,
    InaccessibleTaggedFieldError,
    InvalidTargetError,
    TypeCoercionFailedError,
)
from .types import PATH_TAG, SUPPORTED_TYPES

__all__ = ["PathVar", "path_field", "bind_mapping", "path_fields", "render_value"]

log = logging.getLogger(__name__)


@frozen
class PathVar:
    """Metadata associating a field with a template variable.

    Use as `Annotated[int, PathVar("id")]`. Without a name, the field name is used.
    """

    name: str | None = None


@frozen
class PathField:
    """A field tagged with a template variable."""

    name: str
    tag: str
    type: Any
    #: Private fields and fields of frozen classes can't be set.
    settable: bool = True


def path_field(name: str, **kwargs: Any) -> Any:
    """An attrs field tagged with the template variable `name`."""
    metadata = dict(kwargs.pop("metadata", {})) | {PATH_TAG: name}
    return field(metadata=metadata, **kwargs)


def _unwrap_annotated(t: Any) -> tuple[Any, tuple]:
    if get_origin(t) is Annotated:
        args = get_args(t)
        return args[0], args[1:]
    return t, ()


def _get_tag(a: Attribute, extras: tuple) -> str | None:
    tag = a.metadata.get(PATH_TAG)
    if tag:
        return tag
    for arg in extras:
        if isinstance(arg, PathVar):
            return arg.name or a.name
    return None


@cache
def path_fields(cls: type) -> tuple[PathField, ...]:
    """The tagged fields of an attrs class, in declaration order."""
    try:
        hints = get_type_hints(cls, include_extras=True)
    except NameError as exc:
        raise InvalidTargetError(cls, "unresolvable field annotations") from exc
    frozen_cls = cls.__setattr__ is _frozen_setattrs
    res = []
    for a in fields(cls):
        base, extras = _unwrap_annotated(hints.get(a.name, a.type))
        tag = _get_tag(a, extras)
        if tag is None:
            continue
        settable = not (
            frozen_cls or a.name.startswith("_") or a.on_setattr is setters.frozen
        )
        res.append(PathField(a.name, tag, base, settable))
    return tuple(res)


def ensure_attrs_instance(target: Any) -> None:
    if isinstance(target, type) or not has(target.__class__):
        raise InvalidTargetError(target)


def bind_mapping(mapping: Mapping[str, str], target: Any, converter: Converter) -> None:
    """Set the tagged fields of `target` from `mapping`.

    Fields without a value in the mapping are left as they are, and so are
    fields of types path values can't be converted to. Binding stops at the
    first error; fields set before it keep their new values.
    """
    ensure_attrs_instance(target)
    for f in path_fields(target.__class__):
        if not f.settable:
            raise InaccessibleTaggedFieldError(f.name, f.tag)
        raw = mapping.get(f.tag)
        if raw is None:
            continue
        if f.type not in SUPPORTED_TYPES:
            log.debug("Skipping field %r of unsupported type %r", f.name, f.type)
            continue
        try:
            value = converter.structure(raw, f.type)
        except Exception as exc:
            raise TypeCoercionFailedError(f.name, raw, f.type) from exc
        try:
            setattr(target, f.name, value)
        except FrozenError as exc:
            raise InaccessibleTaggedFieldError(f.name, f.tag) from exc


def render_value(source: Any, variable: str, converter: Converter) -> str:
    """The text of the first field of `source` tagged with `variable`."""
    for f in path_fields(source.__class__):
        if f.tag == variable:
            res = converter.unstructure(getattr(source, f.name), unstructure_as=f.type)
            return res if isinstance(res, str) else str(res)
    raise FieldNotFoundError(variable)
