"""Locations of the Windsurf global storage file.

The file lives under the user's home directory; only the relative part differs
per platform.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

STORAGE_FILE_NAME = "storage.json"


def storage_relative_path(platform: str) -> PurePosixPath:
    """Return the storage file location relative to the home directory."""
    if platform == "darwin":
        base = PurePosixPath("Library", "Application Support")
    elif platform.startswith("win"):
        base = PurePosixPath("AppData", "Roaming")
    else:
        base = PurePosixPath(".config")
    return base / "Windsurf" / "User" / "globalStorage" / STORAGE_FILE_NAME


def default_storage_file(home_dir: Path, platform: str) -> Path:
    return Path(home_dir).joinpath(*storage_relative_path(platform).parts)
