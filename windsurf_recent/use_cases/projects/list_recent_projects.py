"""
Use case for listing projects recently opened in Windsurf.
"""

import logging
from typing import Optional

from windsurf_recent.entities.RecentProject import RecentProject
from windsurf_recent.exceptions import StorageError
from windsurf_recent.ports.storage.storage_reader_port import StorageReaderPort
from windsurf_recent.use_cases.projects.extract_recent_projects import (
    extract_recent_projects,
)


class ListRecentProjectsUseCase:
    """Use case for listing recent projects; degrades to an empty list on any failure."""

    def __init__(
        self,
        storage_reader: StorageReaderPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            storage_reader: Reader for the editor's storage document
            logger: Logger instance to use for logging
        """
        self._storage_reader = storage_reader
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> list[RecentProject]:
        """
        Read the storage file and extract its recent folders.

        Returns:
            List of RecentProject entities, empty if the file is missing or unreadable
        """
        try:
            raw = self._storage_reader.load_raw_state()
        except StorageError as e:
            self._logger.error(f"Error reading recent projects: {e}")
            return []
        except Exception as e:
            self._logger.error(f"Unexpected error reading recent projects: {e}")
            return []

        if raw is None:
            self._logger.info("No storage file; no recent projects")
            return []

        projects = extract_recent_projects(raw, self._logger)
        self._logger.info(f"Found {len(projects)} recent projects")
        return projects
