"""
Recent project domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecentProject:
    """
    A folder recently opened in Windsurf, as listed in its "Open Recent" menu.

    Attributes:
        uri: Path component of the menu entry's URI, verbatim
        label: Last segment of the menu label (empty if the label has none)
        path: Filesystem path to open; same value as ``uri``
    """

    uri: str
    label: str
    path: str

    def get_details(self) -> dict[str, str]:
        """
        Get the project fields as a plain dictionary.

        Returns:
            Dictionary with uri, label and path
        """
        return {"uri": self.uri, "label": self.label, "path": self.path}

    def __str__(self) -> str:
        """String representation of the RecentProject."""
        return f"RecentProject(label='{self.label}', path='{self.path}')"
