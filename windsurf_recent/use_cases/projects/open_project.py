import logging
from typing import Optional

from windsurf_recent.exceptions import LaunchError
from windsurf_recent.ports.application.project_launcher_port import ProjectLauncherPort


class OpenProjectUseCase:
    def __init__(
        self,
        launcher: ProjectLauncherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> None:
        if not path:
            raise LaunchError("No project path given")
        try:
            self._logger.info(f"Opening project: {path}")
            self._launcher.open(path)
        except LaunchError:
            raise
        except Exception as e:
            self._logger.error(f"Error opening project: {e}")
            raise LaunchError(str(e))
