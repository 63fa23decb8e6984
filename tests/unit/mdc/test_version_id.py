"""Unit tests for version identifiers and their text form."""

from __future__ import annotations

import pytest

from core.errors import VersionFormatError
from mdc.version_id import VersionId, parse_version_string, version_to_string

_BOUNDARY_COMPONENTS = (0, 1, 10, 65535)


def test_version_to_string_renders_dotted_decimal() -> None:
    """Rendering should join the four components with periods."""
    assert version_to_string(VersionId(1, 0, 0, 0)) == "1.0.0.0"


def test_version_to_string_handles_component_maximum() -> None:
    """Rendering should print full 16-bit components without padding."""
    assert version_to_string(VersionId(65535, 0, 10, 7)) == "65535.0.10.7"


def test_str_matches_canonical_rendering() -> None:
    """str() should use the canonical form."""
    assert str(VersionId(2, 3, 4, 5)) == "2.3.4.5"


def test_parse_version_string_returns_components() -> None:
    """Parsing should recover the rendered components."""
    assert parse_version_string("12.0.3.400") == VersionId(12, 0, 3, 400)


@pytest.mark.parametrize(
    "text",
    [
        "1.0.0",
        "1.0.0.0.0",
        "",
        "1..0.0",
        "1.0.0.a",
        "-1.0.0.0",
        "1.0.0.+1",
        " 1.0.0.0",
        "01.0.0.0",
    ],
)
def test_parse_version_string_rejects_malformed_text(text: str) -> None:
    """Parsing should reject anything but four canonical decimal components."""
    with pytest.raises(VersionFormatError):
        parse_version_string(text)


def test_parse_version_string_rejects_out_of_range_component() -> None:
    """Parsing should reject components above the 16-bit range."""
    with pytest.raises(VersionFormatError):
        parse_version_string("65536.0.0.0")


@pytest.mark.parametrize(
    "components",
    [(-1, 0, 0, 0), (0, 0, 0, 65536), (1, True, 0, 0), (1.0, 0, 0, 0)],
)
def test_version_id_rejects_invalid_components(components: tuple[object, ...]) -> None:
    """Construction should reject non-integer and out-of-range components."""
    with pytest.raises(VersionFormatError):
        VersionId(*components)  # type: ignore[arg-type]


def test_version_id_is_immutable() -> None:
    """Versions should be frozen once constructed."""
    version = VersionId(1, 0, 0, 0)

    with pytest.raises(AttributeError):
        version.major = 2  # type: ignore[misc]


@pytest.mark.parametrize("position", range(4))
@pytest.mark.parametrize("value", _BOUNDARY_COMPONENTS)
def test_rendered_version_parses_back(position: int, value: int) -> None:
    """Rendering then parsing should return the same version."""
    components = [1, 0, 0, 0]
    components[position] = value
    version = VersionId(*components)

    assert parse_version_string(version_to_string(version)) == version


def test_rendered_maximum_version_parses_back() -> None:
    """The all-maximum version should survive rendering and parsing."""
    version = VersionId(65535, 65535, 65535, 65535)

    assert parse_version_string(version_to_string(version)) == version


@pytest.mark.parametrize("component", ["100000", "9" * 5000])
def test_parse_version_string_rejects_overlong_component(component: str) -> None:
    """Components longer than the 16-bit maximum should fail before conversion."""
    with pytest.raises(VersionFormatError):
        parse_version_string(f"{component}.0.0.0")

