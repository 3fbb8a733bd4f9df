from __future__ import annotations

from pathlib import Path
from typing import Literal

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

ThemeName = Literal["dark", "light"]

_CR = QPalette.ColorRole

# Only the roles the project list window paints with
_PALETTES: dict[str, dict[QPalette.ColorRole, QColor]] = {
    "dark": {
        _CR.Window: QColor(17, 18, 23),
        _CR.WindowText: QColor(235, 238, 246),
        _CR.Base: QColor(22, 24, 31),
        _CR.Text: QColor(235, 238, 246),
        _CR.PlaceholderText: QColor(170, 178, 207),
        _CR.ToolTipBase: QColor(27, 30, 39),
        _CR.ToolTipText: QColor(235, 238, 246),
        _CR.Highlight: QColor(108, 156, 255),
        _CR.HighlightedText: QColor(0, 0, 0),
    },
    "light": {
        _CR.Window: QColor(248, 249, 251),
        _CR.WindowText: QColor(24, 28, 37),
        _CR.Base: QColor(255, 255, 255),
        _CR.Text: QColor(24, 28, 37),
        _CR.PlaceholderText: QColor(102, 112, 133),
        _CR.ToolTipBase: QColor(255, 255, 255),
        _CR.ToolTipText: QColor(24, 28, 37),
        _CR.Highlight: QColor(62, 121, 247),
        _CR.HighlightedText: QColor(255, 255, 255),
    },
}


def _load_qss(theme: ThemeName) -> str:
    path = Path(__file__).with_name("styles") / f"{theme}.qss"
    try:
        return path.read_text(encoding="utf-8")
    except OSError:
        return ""


def apply_theme(app: QApplication, theme: str = "dark") -> ThemeName:
    """Apply the light or dark theme and return the one that is active."""
    name: ThemeName = "light" if theme.lower() == "light" else "dark"

    app.setStyle("Fusion")
    pal = QPalette()
    for role, color in _PALETTES[name].items():
        pal.setColor(role, color)
    # Search box is disabled while the list is empty
    pal.setColor(QPalette.ColorGroup.Disabled, _CR.Text, _PALETTES[name][_CR.PlaceholderText])
    app.setPalette(pal)

    qss = _load_qss(name)
    if qss:
        app.setStyleSheet(qss)
    app.setProperty("activeTheme", name)
    return name
