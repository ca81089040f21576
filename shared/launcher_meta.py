"""
Fetch and parse the Minecraft launcher version manifest (v2 format).

The manifest lists every published game version, newest first:

    {
      "latest": {"release": "1.20.4", "snapshot": "24w03a"},
      "versions": [
        {"id": "24w03a", "type": "snapshot", "url": "...", "time": "...",
         "releaseTime": "...", "sha1": "...", "complianceLevel": 1},
        ...
      ]
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import requests

from shared.errors import ManifestError

logger = logging.getLogger(__name__)

VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"


class VersionType(Enum):
    """Release channel of a game version."""

    RELEASE = "release"
    SNAPSHOT = "snapshot"
    OLD_BETA = "old_beta"
    OLD_ALPHA = "old_alpha"


@dataclass
class VersionRecord:
    """One entry of the version manifest."""

    id: str  # e.g., "1.18.1" or "21w44a"
    type: VersionType

    url: Optional[str] = None
    time: Optional[str] = None
    release_time: Optional[str] = None
    sha1: Optional[str] = None
    compliance_level: Optional[int] = None


@dataclass
class VersionManifest:
    """Parsed version manifest. `versions` keeps the document order (newest first)."""

    latest_release: Optional[str] = None
    latest_snapshot: Optional[str] = None
    versions: list[VersionRecord] = field(default_factory=list)


def _parse_version_record(entry: Any) -> VersionRecord:
    if not isinstance(entry, dict):
        raise ManifestError(f"Version entry must be an object, got: {entry!r}")

    try:
        version_id = entry["id"]
        raw_type = entry["type"]
    except KeyError as exc:
        raise ManifestError(f"Version entry is missing {exc.args[0]!r}: {entry!r}") from exc

    if not isinstance(version_id, str):
        raise ManifestError(f"Version id must be a string, got: {version_id!r}")

    try:
        version_type = VersionType(raw_type)
    except ValueError as exc:
        raise ManifestError(f'Unknown version type "{raw_type}" for version "{version_id}"') from exc

    return VersionRecord(
        id=version_id,
        type=version_type,
        url=entry.get("url"),
        time=entry.get("time"),
        release_time=entry.get("releaseTime"),
        sha1=entry.get("sha1"),
        compliance_level=entry.get("complianceLevel"),
    )


def parse_version_manifest(data: Any) -> VersionManifest:
    """Build a VersionManifest from the decoded manifest JSON.

    Raises:
        ManifestError: If the document does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise ManifestError("Version manifest must be a JSON object")
    if not isinstance(data.get("versions"), list):
        raise ManifestError('Version manifest has no "versions" list')

    latest = data.get("latest") or {}
    if not isinstance(latest, dict):
        raise ManifestError(f'Version manifest "latest" must be an object, got: {latest!r}')
    versions = [_parse_version_record(entry) for entry in data["versions"]]
    logger.debug(f"Parsed {len(versions)} versions from manifest")

    return VersionManifest(
        latest_release=latest.get("release"),
        latest_snapshot=latest.get("snapshot"),
        versions=versions,
    )


def fetch_version_manifest(url: str = VERSION_MANIFEST_URL, timeout: int = 30) -> VersionManifest:
    """Download and parse the launcher version manifest."""
    logger.debug(f"Fetching version manifest from {url}")
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return parse_version_manifest(resp.json())
