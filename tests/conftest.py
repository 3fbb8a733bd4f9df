"""
Pytest configuration and shared fixtures.
"""

import json
import os
from unittest.mock import MagicMock

import pytest

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def folder_entry(path, label=None, entry_id="openRecentFolder"):
    """Build one entry of the "Open Recent" submenu."""
    return {
        "id": entry_id,
        "label": label if label is not None else path.lstrip("/"),
        "uri": {"$mid": 1, "path": path, "scheme": "file"},
    }


def storage_document(entries, menu_id="submenuitem.MenubarRecentMenu", menu_label="Open &&Recent"):
    """Build a storage.json document whose File menu holds the given recent entries."""
    return {
        "lastKnownMenubarData": {
            "menus": {
                "File": {
                    "items": [
                        {"id": "workbench.action.files.newUntitledFile", "label": "&&New Text File"},
                        {"id": menu_id, "label": menu_label, "submenu": {"items": entries}},
                        {"id": "vscode.menubar.separator"},
                    ]
                }
            }
        }
    }


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def two_project_document():
    return storage_document(
        [
            folder_entry("/Users/alice/dev/proj", "alice/dev/proj"),
            {"id": "openRecentFile", "label": "~/notes.md", "uri": {"$mid": 1, "path": "/Users/alice/notes.md", "scheme": "file"}},
            folder_entry("/Users/alice/work/api", "~/work/api"),
            {"id": "workbench.action.clearRecentFiles", "label": "&&Clear Recently Opened..."},
        ]
    )


@pytest.fixture
def storage_file(tmp_path, two_project_document):
    """
    Write a storage.json with two recent folders.

    Returns:
        Path to the storage file
    """
    path = tmp_path / "storage.json"
    path.write_text(json.dumps(two_project_document), encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def qapp():
    """Shared QApplication for widget tests."""
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
