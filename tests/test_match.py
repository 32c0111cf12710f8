"""Tests for extracting variables from paths."""
import pytest

from pathfmt import MismatchError, compile_template


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/items/123/subitems/456", {"id": "123", "subid": "456"}),
        ("/items/123/subitems", {"id": "123"}),
        ("/items/123/subitems/456/extra", {"id": "123", "subid": "456"}),
        ("items/123/subitems/456", {"id": "123", "subid": "456"}),
        ("/items//subitems/", {"id": "", "subid": ""}),
        ("/items", {}),
    ],
)
def test_to_dict(path: str, expected: dict[str, str]) -> None:
    template = compile_template("/items/{id}/subitems/{subid}")

    assert template.to_dict(path) == expected


def test_mismatch() -> None:
    """Static segments must match exactly."""
    template = compile_template("/items/{id}/subitems/{subid}")

    with pytest.raises(MismatchError) as exc_info:
        template.to_dict("/items/123/invalid/456")

    exc = exc_info.value
    assert exc.expected == "subitems"
    assert exc.actual == "invalid"
    assert exc.template == "/items/{id}/subitems/{subid}"
    assert exc.path == "/items/123/invalid/456"
    assert str(exc) == (
        "expected format '/items/{id}/subitems/{subid}': "
        "got '/items/123/invalid/456': expected string 'subitems', got 'invalid'"
    )


def test_trailing_slash() -> None:
    """A trailing slash in the template must be matched by an empty token."""
    template = compile_template("/items/{id}/")

    assert template.to_dict("/items/1/") == {"id": "1"}
    assert template.to_dict("/items/1") == {"id": "1"}
    with pytest.raises(MismatchError):
        template.to_dict("/items/1/x")


def test_duplicate_names() -> None:
    """The last occurrence of a variable wins."""
    template = compile_template("/{a}/x/{a}")

    assert template.to_dict("/first/x/second") == {"a": "second"}
    assert template.to_dict("/first/x") == {"a": "first"}


def test_no_decoding() -> None:
    """Values are extracted verbatim."""
    template = compile_template("/files/{name}")

    assert template.to_dict("/files/a%20b..") == {"name": "a%20b.."}


def test_idempotent() -> None:
    template = compile_template("/api/v1/users/{id}")

    first = template.to_dict("/api/v1/users/123")
    second = template.to_dict("/api/v1/users/123")

    assert first == second == {"id": "123"}
    assert first is not second
