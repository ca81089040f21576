#!/usr/bin/env python
import json
import os
import sys

from workflows.common.utils import logger

from shared.errors import VersionParseError
from shared.launcher_meta import fetch_version_manifest
from shared.version_utils import extract_feature_line, select_latest
from workflows.mc_versions.settings import Settings


def load_versions(file_path: str) -> list:
    """Load the previously selected versions. Missing or empty files give an empty list."""
    if not os.path.exists(file_path) or os.path.getsize(file_path) == 0:
        return []
    with open(file_path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not isinstance(data.get("latest", []), list):
        raise ValueError(f'Versions file {file_path} must hold an object with a "latest" list')
    return data.get("latest", [])


def save_versions(versions: list, file_path: str):
    """Save the selected versions together with their feature lines."""
    data = {
        "latest": versions,
        "feature_lines": {extract_feature_line(v): v for v in versions},
    }
    with open(file_path, "w") as f:
        json.dump(data, f, indent=4)


def calculate_new_versions(old_versions: list, new_versions: list) -> list:
    """
    Find versions that were not part of the previous selection.

    Args:
        old_versions: Previously stored versions
        new_versions: Newly selected versions

    Returns:
        list: Versions only present in new_versions, in their original order
    """
    old = set(old_versions)
    return [v for v in new_versions if v not in old]


def main() -> int:
    """
    Select the latest release of each Minecraft feature line and record it.

    Process:
    1. Fetch the launcher version manifest
    2. Select the latest releases, one per feature line
    3. Compare with the previously stored selection
    4. Update the versions file
    """
    logger.info('Starting latest Minecraft versions selection')

    settings = Settings()

    logger.info(f'Fetching version manifest from {settings.manifest_url}')
    manifest = fetch_version_manifest(settings.manifest_url, timeout=settings.request_timeout_sec)
    logger.info(f'Received {len(manifest.versions)} versions '
                f'(latest release: {manifest.latest_release}, latest snapshot: {manifest.latest_snapshot})')

    try:
        latest = select_latest(settings.latest_versions_count, manifest.versions)
    except VersionParseError as exc:
        logger.error(f'{exc}. The version manifest contains a malformed release id.')
        return 1

    logger.info(f'Selected {len(latest)} of {settings.latest_versions_count} requested versions: {latest}')

    old_versions = load_versions(settings.versions_file_path)
    new_versions = calculate_new_versions(old_versions, latest)
    if not new_versions:
        logger.info('No version changes detected')
    else:
        logger.info(f'New versions since last run: {new_versions}')

    save_versions(latest, settings.versions_file_path)
    logger.info('Versions file updated')

    return 0


if __name__ == '__main__':
    sys.exit(main())
