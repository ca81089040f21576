"""Version utilities shared across the project."""

from __future__ import annotations

from typing import Iterable

from semver import Version

from shared.errors import VersionParseError
from shared.launcher_meta import VersionRecord, VersionType


def extract_feature_line(identifier: str) -> str:
    """Truncate a version identifier to its "major.minor" feature line.

    Identifiers already in "major.minor" form (e.g. "1.18") are returned
    unchanged. Anything else must parse as a full semver version.

    Examples:
        "1.7.10" -> "1.7"
        "1.14.4" -> "1.14"
        "1.18"   -> "1.18"

    Raises:
        VersionParseError: If the identifier cannot be parsed.
    """
    if identifier.count(".") == 1:
        return identifier
    try:
        version = Version.parse(identifier)
    except ValueError as exc:
        raise VersionParseError(identifier) from exc
    return f"{version.major}.{version.minor}"


def select_latest(count: int, versions: Iterable[VersionRecord]) -> list[str]:
    """Pick at most `count` release ids, one per feature line.

    `versions` must already be ordered newest first (as the launcher manifest
    is), so the first release seen for a feature line is its latest patch.
    Non-release entries are skipped without being parsed. Iteration stops as
    soon as `count` ids are collected, so entries past that point are never
    inspected.

    Example:
        >>> select_latest(6, manifest.versions)
        ['1.18.1', '1.17.1', '1.16.5', '1.15.2', '1.14.4', '1.13.2']

    Raises:
        ValueError: If count is negative.
        VersionParseError: If an inspected release id cannot be parsed.
    """
    if count < 0:
        raise ValueError("count must not be negative")

    latest: list[str] = []
    seen_lines: set[str] = set()

    for record in versions:
        if len(latest) >= count:
            break
        if record.type is not VersionType.RELEASE:
            continue

        feature_line = extract_feature_line(record.id)
        if feature_line in seen_lines:
            continue

        latest.append(record.id)
        seen_lines.add(feature_line)

    return latest
