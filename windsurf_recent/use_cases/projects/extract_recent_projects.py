"""
Extraction of recent folders from Windsurf's serialized menu bar.
"""

import logging
from typing import Any, Iterable, Optional

from windsurf_recent.entities.RecentProject import RecentProject
from windsurf_recent.utils.json_tree import as_dict, as_list, get_field, get_path, get_str

RECENT_MENU_ID = "submenuitem.MenubarRecentMenu"
# Mnemonic marker included; the stored label is not localized
RECENT_MENU_LABEL = "Open &&Recent"
RECENT_FOLDER_ID = "openRecentFolder"

_logger = logging.getLogger(__name__)


def _menu_items(value: Any) -> Optional[list[dict[str, Any]]]:
    items = as_list(value)
    if items is None:
        return None
    return [item for item in items if isinstance(item, dict)]


def find_recent_menu(file_items: Iterable[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Return the first "Open Recent" submenu item, or None."""
    for item in file_items:
        if get_str(item, "id") == RECENT_MENU_ID and get_str(item, "label") == RECENT_MENU_LABEL:
            return item
    return None


def label_from_menu_label(label: Optional[str]) -> str:
    """Last ``/``-separated segment of a menu label, or ``""``."""
    if not label:
        return ""
    return label.split("/")[-1]


def _to_project(item: dict[str, Any]) -> Optional[RecentProject]:
    uri = as_dict(get_field(item, "uri"))
    if uri is None:
        return None
    path = get_str(uri, "path")
    if not path:
        return None
    return RecentProject(
        uri=path,
        label=label_from_menu_label(get_str(item, "label")),
        path=path,
    )


def extract_recent_projects(
    raw: Any, logger: Optional[logging.Logger] = None
) -> list[RecentProject]:
    """
    Recover recently opened folders from a decoded ``storage.json`` document.

    Walks ``lastKnownMenubarData.menus.File.items``, finds the "Open Recent"
    submenu and keeps its ``openRecentFolder`` entries that carry a structured
    ``uri``. Order is preserved. Any missing or mistyped node yields an empty
    list; this function never raises.

    Args:
        raw: Decoded JSON value of arbitrary shape
        logger: Logger instance to use for diagnostics

    Returns:
        List of RecentProject entities, possibly empty
    """
    log = logger or _logger

    file_items = _menu_items(get_path(raw, "lastKnownMenubarData", "menus", "File", "items"))
    if file_items is None:
        log.warning("File menu not found in storage data")
        return []

    recent_menu = find_recent_menu(file_items)
    if recent_menu is None:
        log.warning("Open Recent menu not found in File menu")
        return []

    entries = _menu_items(get_path(recent_menu, "submenu", "items"))
    if entries is None:
        log.warning("Open Recent menu has no items")
        return []

    projects: list[RecentProject] = []
    for entry in entries:
        if get_str(entry, "id") != RECENT_FOLDER_ID:
            continue
        project = _to_project(entry)
        if project is not None:
            projects.append(project)

    log.debug(f"Extracted {len(projects)} of {len(entries)} recent menu entries")
    return projects
