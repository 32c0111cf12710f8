"""Tests for rendering paths from attrs classes."""
import pytest

from pathfmt import (
    FieldNotFoundError,
    Float32,
    InvalidTargetError,
    compile_template,
)

from .models import MyPath, PrivateTagged, Repeated, UserIdentifier, WidthModel


def test_render() -> None:
    template = compile_template("/a/{a}/b/{b}/c/{c}/d/{d}")

    assert template.render(MyPath("abc", 123, 3.14, True)) == "/a/abc/b/123/c/3.14/d/true"


def test_render_no_leading_slash() -> None:
    template = compile_template("organizations/{org_num}/users/{id}/")

    assert template.render(UserIdentifier(1, "nick")) == "organizations/1/users/nick/"


def test_render_float32() -> None:
    """Single-precision floats render in their shortest form."""
    template = compile_template("/{f32}")

    assert template.render(WidthModel(f32=Float32(0.10000000149011612))) == "/0.1"


def test_render_private() -> None:
    """Private tagged fields can be read."""
    template = compile_template("/{a}/{secret}")

    assert template.render(PrivateTagged("x", "y")) == "/x/y"


def test_render_repeated() -> None:
    """The first tagged field is used."""
    assert compile_template("/{id}/{id}").render(Repeated()) == "/first/first"


def test_field_not_found() -> None:
    template = compile_template("/a/{a}/e/{e}")

    with pytest.raises(FieldNotFoundError) as exc_info:
        template.render(MyPath())

    assert exc_info.value.variable == "e"


@pytest.mark.parametrize("source", [MyPath, 1, {"a": "b"}])
def test_invalid_source(source) -> None:
    with pytest.raises(InvalidTargetError):
        compile_template("/a/{a}").render(source)


@pytest.mark.parametrize(
    "source",
    [MyPath("abc", 123, 3.14, True), MyPath("", -5, 0.5, False), MyPath("x y", 0)],
)
def test_render_then_bind(source: MyPath) -> None:
    """Rendering and binding recovers the original values."""
    template = compile_template("/{a}/{b}/{c}/{d}")
    target = MyPath("other", 1, 1.0, True)

    template.bind(template.render(source), target)

    assert target == source
