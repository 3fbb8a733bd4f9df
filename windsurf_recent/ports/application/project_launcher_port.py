from abc import ABC, abstractmethod


class ProjectLauncherPort(ABC):
    @abstractmethod
    def open(self, path: str) -> None:
        """
        Open the given project path in the editor.

        Raises:
            LaunchError: If the editor could not be started or reported failure
        """
        pass
