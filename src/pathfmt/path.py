"""Path templates."""
import logging
from typing import Any, TypeAlias

from attrs import Factory, field, frozen
from cattrs import Converter

from .binding import bind_mapping, ensure_attrs_instance, render_value
from .converters import make_converter
from .errors import MismatchError, TemplateError
from .types import PathTokens

__all__ = ["Static", "Variable", "Segment", "Template", "compile_template"]

log = logging.getLogger(__name__)


@frozen
class Static:
    """Literal text, matched exactly."""

    text: str


@frozen
class Variable:
    """A named placeholder, like `{id}`."""

    name: str


Segment: TypeAlias = Static | Variable


def split_path(path: str) -> PathTokens:
    return path.removeprefix("/").split("/")


def _parse_segment(template: str, token: str) -> Segment:
    if len(token) >= 2 and token[0] == "{" and token[-1] == "}":
        name = token[1:-1]
        if not name:
            raise TemplateError(template, token, "empty variable name")
        if "{" in name or "}" in name:
            raise TemplateError(template, token, "braces in variable name")
        return Variable(name)
    if "{" in token or "}" in token:
        raise TemplateError(template, token, "unmatched braces")
    return Static(token)


@frozen
class Template:
    """A compiled path template, like `/items/{id}/subitems/{subid}`."""

    template: str
    segments: tuple[Segment, ...]
    #: The converter used for binding and rendering values.
    converter: Converter = field(
        default=Factory(make_converter), eq=False, repr=False
    )

    @property
    def variables(self) -> list[str]:
        """The variable names, in order of appearance."""
        return [s.name for s in self.segments if isinstance(s, Variable)]

    def to_dict(self, path: str) -> dict[str, str]:
        """Extract the variables from a path.

        Paths shorter or longer than the template are fine; missing variables
        are absent from the result and extra tokens are ignored.

        :raises MismatchError: When a static segment doesn't match.
        """
        res = {}
        for segment, token in zip(self.segments, split_path(path)):
            if isinstance(segment, Variable):
                res[segment.name] = token
            elif segment.text != token:
                log.debug("Path %r doesn't match %r", path, self.template)
                raise MismatchError(self.template, path, segment.text, token)
        return res

    def bind(self, path: str, target: Any) -> None:
        """Set the tagged fields of the attrs instance `target` from a path."""
        bind_mapping(self.to_dict(path), target, self.converter)

    def render(self, source: Any) -> str:
        """Produce a path from the tagged fields of an attrs instance."""
        ensure_attrs_instance(source)
        tokens = [
            s.text
            if isinstance(s, Static)
            else render_value(source, s.name, self.converter)
            for s in self.segments
        ]
        prefix = "/" if self.template.startswith("/") else ""
        return prefix + "/".join(tokens)


def compile_template(
    template: str, converter: Converter | None = None
) -> Template:
    """Compile a template like `/items/{id}/subitems/{subid}`.

    A trailing slash produces a trailing empty static segment. Without a
    converter, the template gets a fresh one from `make_converter`.

    :raises TemplateError: On empty variable names and unmatched braces.
    """
    segments = tuple(_parse_segment(template, t) for t in split_path(template))
    log.debug("Compiled %r into %d segments", template, len(segments))
    if converter is None:
        return Template(template, segments)
    return Template(template, segments, converter)
