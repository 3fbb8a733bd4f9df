from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from windsurf_recent.entities.RecentProject import RecentProject


@dataclass(frozen=True)
class ProjectListState:
    """What the window shows: loading, or the loaded projects (possibly none)."""

    projects: tuple[RecentProject, ...] = ()
    is_loading: bool = True

    @classmethod
    def loading(cls) -> "ProjectListState":
        return cls()

    def ready(self, projects: Iterable[RecentProject]) -> "ProjectListState":
        if not self.is_loading:
            raise RuntimeError("Recent projects are only loaded once")
        return ProjectListState(projects=tuple(projects), is_loading=False)

    @property
    def is_empty(self) -> bool:
        return not self.is_loading and not self.projects


def matches_query(project: RecentProject, query: str) -> bool:
    """Case-insensitive substring match on label and path."""
    q = query.strip().lower()
    if not q:
        return True
    return q in project.label.lower() or q in project.path.lower()
