"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from windsurf_recent.adapters.application.local_project_launcher import (
    LocalProjectLauncher,
)
from windsurf_recent.adapters.storage.local_storage_reader import LocalStorageReader
from windsurf_recent.config.settings import Settings
from windsurf_recent.config.settings import settings as default_settings
from windsurf_recent.ports.application.project_launcher_port import ProjectLauncherPort
from windsurf_recent.ports.storage.storage_reader_port import StorageReaderPort
from windsurf_recent.use_cases.projects.list_recent_projects import (
    ListRecentProjectsUseCase,
)
from windsurf_recent.use_cases.projects.open_project import OpenProjectUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_storage_reader(self) -> StorageReaderPort:
        """
        Get storage reader adapter instance.

        Returns:
            StorageReaderPort implementation
        """
        if "storage_reader" not in self._instances:
            self._instances["storage_reader"] = LocalStorageReader(
                self.settings.storage_file, self._logger
            )
        return self._instances["storage_reader"]

    def get_project_launcher(self) -> ProjectLauncherPort:
        """
        Get project launcher instance.

        Returns:
            ProjectLauncherPort implementation
        """
        if "project_launcher" not in self._instances:
            self._instances["project_launcher"] = LocalProjectLauncher(
                app_name=self.settings.app_name,
                command=self.settings.command,
                platform=self.settings.platform,
                logger=self._logger,
            )
        return self._instances["project_launcher"]

    def get_list_recent_projects_use_case(self) -> ListRecentProjectsUseCase:
        """
        Get list recent projects use case with injected dependencies.

        Returns:
            Configured ListRecentProjectsUseCase
        """
        if "list_recent_projects_use_case" not in self._instances:
            reader = self.get_storage_reader()
            self._instances["list_recent_projects_use_case"] = (
                ListRecentProjectsUseCase(reader, self._logger)
            )
        return self._instances["list_recent_projects_use_case"]

    def get_open_project_use_case(self) -> OpenProjectUseCase:
        """
        Get open project use case with injected dependencies.

        Returns:
            Configured OpenProjectUseCase
        """
        if "open_project_use_case" not in self._instances:
            launcher = self.get_project_launcher()
            self._instances["open_project_use_case"] = OpenProjectUseCase(
                launcher, self._logger
            )
        return self._instances["open_project_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
