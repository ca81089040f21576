"""Default Minecraft mods directory per operating system."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional


def get_mods_dir(platform: Optional[str] = None, home: Optional[Path] = None) -> Path:
    """
    Get the launcher's default mods directory.

    Args:
        platform: A sys.platform value (defaults to the running platform)
        home: User home directory (defaults to Path.home())

    Returns:
        Path to the mods directory (not created)

    Raises:
        ValueError: If the platform is not darwin, linux or win32.
    """
    if platform is None:
        platform = sys.platform
    if home is None:
        home = Path.home()

    if platform == "darwin":
        return home / "Library" / "Application Support" / "minecraft" / "mods"
    if platform.startswith("linux"):
        return home / ".minecraft" / "mods"
    if platform == "win32":
        return home / "AppData" / "Roaming" / ".minecraft" / "mods"

    raise ValueError(f"Unsupported platform: {platform}")
