"""YAML stamp manifest loading.

A stamp manifest lists version stamps collected from pools, for example::

    stamps:
      - "1.0.0.0"
      - "1.2.0.0"
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from core.constants import STAMP_MANIFEST_KEY
from core.errors import MdcverDependencyError, StampManifestError, VersionFormatError
from mdc.version_id import VersionId, parse_version_string


def load_stamp_manifest(manifest_path: str) -> tuple[VersionId, ...]:
    """Load and validate version stamps from a YAML manifest.

    Args:
        manifest_path: File path to YAML manifest.

    Returns:
        Parsed stamps in file order.

    Raises:
        MdcverDependencyError: If PyYAML is unavailable.
        StampManifestError: If file is invalid or a stamp is malformed.
    """
    payload = _load_yaml_payload(manifest_path)
    if not isinstance(payload, dict) or STAMP_MANIFEST_KEY not in payload:
        raise StampManifestError(
            f"Stamp manifest at {manifest_path} must be a mapping with a "
            f"'{STAMP_MANIFEST_KEY}' list."
        )
    raw_stamps = payload[STAMP_MANIFEST_KEY]
    if not isinstance(raw_stamps, list):
        raise StampManifestError(
            f"Invalid '{STAMP_MANIFEST_KEY}' in {manifest_path}: expected list, "
            f"got {type(raw_stamps).__name__}."
        )
    return tuple(_parse_stamp(raw, index, manifest_path) for index, raw in enumerate(raw_stamps))


def _parse_stamp(raw_stamp: object, index: int, manifest_path: str) -> VersionId:
    if not isinstance(raw_stamp, str):
        raise StampManifestError(
            f"Invalid stamp #{index} in {manifest_path}: expected quoted string, "
            f"got {type(raw_stamp).__name__}."
        )
    try:
        return parse_version_string(raw_stamp)
    except VersionFormatError as error:
        raise StampManifestError(f"Invalid stamp #{index} in {manifest_path}: {error}") from error


def _load_yaml_payload(manifest_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise MdcverDependencyError(
            "Stamp manifest support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    manifest_file = Path(manifest_path).expanduser().resolve()
    if not manifest_file.exists():
        raise StampManifestError(
            f"Stamp manifest does not exist at {manifest_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(manifest_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise StampManifestError(
            f"Failed to read stamp manifest at {manifest_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise StampManifestError(
            f"Failed to parse YAML stamp manifest at {manifest_file}: {error}."
        ) from error
    if payload is None:
        raise StampManifestError(f"Stamp manifest at {manifest_file} is empty.")
    return payload
