from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from windsurf_recent.container import container

from .main_window import RecentProjectsWindow
from .theme import apply_theme

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    argv = argv if argv is not None else sys.argv

    settings = container.settings
    settings.configure_logging()
    logger.info(f"Reading recent projects from {settings.storage_file}")

    app = QApplication(argv)
    apply_theme(app, settings.ui_theme)

    win = RecentProjectsWindow(
        container.get_list_recent_projects_use_case(),
        container.get_open_project_use_case(),
    )
    win.show()
    win.start_loading()
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
