"""Four-component MDC content version identifiers.

This module defines the immutable version value and its canonical
``major.minor.patch.dev`` text form.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import (
    VERSION_COMPONENT_COUNT,
    VERSION_COMPONENT_MAX,
    VERSION_COMPONENT_MIN,
    VERSION_SEPARATOR,
)
from core.errors import VersionFormatError


@dataclass(frozen=True)
class VersionId:
    """MDC content version, ordered with major most significant.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
        dev: Development component.
    """

    major: int
    minor: int
    patch: int
    dev: int

    def __post_init__(self) -> None:
        for name, value in zip(("major", "minor", "patch", "dev"), self.components):
            _validate_component(name, value)

    @property
    def components(self) -> tuple[int, int, int, int]:
        """Components from most to least significant."""
        return (self.major, self.minor, self.patch, self.dev)

    def __str__(self) -> str:
        return version_to_string(self)


def version_to_string(version: VersionId) -> str:
    """Render a version in canonical dotted decimal form."""
    return VERSION_SEPARATOR.join(str(component) for component in version.components)


def parse_version_string(text: str) -> VersionId:
    """Parse canonical dotted decimal text into a version.

    Args:
        text: Version text such as ``"1.0.0.0"``.

    Returns:
        Parsed version.

    Raises:
        VersionFormatError: If text is not four canonical decimal components.
    """
    parts = text.split(VERSION_SEPARATOR)
    if len(parts) != VERSION_COMPONENT_COUNT:
        raise VersionFormatError(
            f"Invalid version '{text}': expected {VERSION_COMPONENT_COUNT} "
            "dot-separated components, e.g. 1.0.0.0."
        )
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise VersionFormatError(
                f"Invalid version '{text}': component '{part}' is not a decimal number."
            )
        if len(part) > len(str(VERSION_COMPONENT_MAX)):
            raise VersionFormatError(
                f"Invalid version '{text[:32]}': component is longer than "
                f"{len(str(VERSION_COMPONENT_MAX))} digits."
            )
        if len(part) > 1 and part.startswith("0"):
            raise VersionFormatError(
                f"Invalid version '{text}': component '{part}' has leading zeros."
            )
    major, minor, patch, dev = (int(part) for part in parts)
    return VersionId(major=major, minor=minor, patch=patch, dev=dev)


def _validate_component(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionFormatError(
            f"Invalid version {name}: expected integer, got {type(value).__name__}."
        )
    if not VERSION_COMPONENT_MIN <= value <= VERSION_COMPONENT_MAX:
        raise VersionFormatError(
            f"Invalid version {name}: {value} is outside "
            f"{VERSION_COMPONENT_MIN}..{VERSION_COMPONENT_MAX}."
        )
