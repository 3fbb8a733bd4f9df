"""
Tests for the OpenProjectUseCase.
"""

from unittest.mock import MagicMock

import pytest

from windsurf_recent.exceptions import LaunchError
from windsurf_recent.ports.application.project_launcher_port import ProjectLauncherPort
from windsurf_recent.use_cases.projects.open_project import OpenProjectUseCase


class TestOpenProjectUseCase:
    """Test cases for the OpenProjectUseCase."""

    def test_execute_success(self, mock_logger):
        mock_launcher = MagicMock(spec=ProjectLauncherPort)

        OpenProjectUseCase(mock_launcher, mock_logger).execute("/Users/alice/dev/proj")

        mock_launcher.open.assert_called_once_with("/Users/alice/dev/proj")
        mock_logger.info.assert_called_once_with("Opening project: /Users/alice/dev/proj")

    def test_execute_launch_error_is_reraised(self, mock_logger):
        mock_launcher = MagicMock(spec=ProjectLauncherPort)
        mock_launcher.open.side_effect = LaunchError("exit code 1")

        with pytest.raises(LaunchError, match="exit code 1"):
            OpenProjectUseCase(mock_launcher, mock_logger).execute("/p")

        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error_is_wrapped(self, mock_logger):
        mock_launcher = MagicMock(spec=ProjectLauncherPort)
        mock_launcher.open.side_effect = RuntimeError("unexpected")

        with pytest.raises(LaunchError, match="unexpected"):
            OpenProjectUseCase(mock_launcher, mock_logger).execute("/p")

        mock_logger.error.assert_called_once_with("Error opening project: unexpected")

    def test_execute_empty_path(self, mock_logger):
        mock_launcher = MagicMock(spec=ProjectLauncherPort)

        with pytest.raises(LaunchError, match="No project path given"):
            OpenProjectUseCase(mock_launcher, mock_logger).execute("")

        mock_launcher.open.assert_not_called()
