import logging
import shutil
import subprocess
import sys
from typing import Optional

from typing_extensions import override

from windsurf_recent.exceptions import LaunchError
from windsurf_recent.ports.application.project_launcher_port import ProjectLauncherPort


class LocalProjectLauncher(ProjectLauncherPort):
    def __init__(
        self,
        app_name: str = "Windsurf",
        command: str = "windsurf",
        platform: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._app_name = app_name
        self._command = command
        self._platform = platform or sys.platform
        self._logger = logger or logging.getLogger(__name__)

    def build_command(self, path: str) -> list[str]:
        """Return the argv used to open ``path``; the path is always a single element."""
        if self._platform == "darwin":
            return ["open", "-a", self._app_name, path]

        # Windows and Linux/Unix ship a CLI launcher on PATH
        exe = shutil.which(self._command)
        if not exe:
            raise LaunchError(f"Windsurf command not found on PATH: {self._command}")
        return [exe, path]

    @override
    def open(self, path: str) -> None:
        cmd = self.build_command(path)
        try:
            result = subprocess.run(
                cmd,
                shell=False,
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            self._logger.error(f"Failed to start {cmd[0]}: {e}")
            raise LaunchError(f"Failed to start {cmd[0]}: {e}")

        if result.returncode != 0:
            detail = (result.stderr or "").strip() or f"exit code {result.returncode}"
            self._logger.error(f"Opening {path} failed: {detail}")
            raise LaunchError(f"Could not open {path}: {detail}")

        self._logger.info(f"Opened project in {self._app_name}: {path}")
