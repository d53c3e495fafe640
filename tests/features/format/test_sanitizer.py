"""Tests for filename sanitization."""

import pytest

from batchtag.features.format.domain.sanitizer import Sanitizer
from batchtag.shared.errors import InvalidSubstituteError


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("AC/DC", "AC_DC"),
        ("a\\b:c*d?e", "a_b_c_d_e"),
        ('<tag> "q" |pipe|', "_tag_ _q_ _pipe_"),
        ("tab\there", "tab_here"),
        ("plain name", "plain name"),
    ],
)
def test_sanitize_filename(text: str, expected: str) -> None:
    assert Sanitizer.sanitize_filename(text) == expected


def test_sanitize_filename_replaces_one_for_one() -> None:
    assert Sanitizer.sanitize_filename("a//b", substitute="-") == "a--b"


@pytest.mark.parametrize("substitute", ["/", ":", "\x00"])
def test_illegal_substitute_raises(substitute: str) -> None:
    with pytest.raises(InvalidSubstituteError):
        _ = Sanitizer.resolve_substitute(substitute)
    with pytest.raises(ValueError):
        _ = Sanitizer.sanitize_filename("x", substitute=substitute)


def test_default_substitute() -> None:
    assert Sanitizer.resolve_substitute() == "_"
    assert Sanitizer.resolve_substitute("") == ""


@pytest.mark.parametrize(
    ("stem", "usable"),
    [
        ("Song", True),
        ("", False),
        ("   ", False),
        (".hidden", False),
        ("..", False),
        ("a/b", False),
    ],
)
def test_is_usable_stem(stem: str, usable: bool) -> None:
    assert Sanitizer.is_usable_stem(stem) is usable
