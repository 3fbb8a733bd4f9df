"""
Storage reader port interface defining the contract for loading editor state.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StorageReaderPort(ABC):
    """Port interface for reading the editor's global storage document."""

    @abstractmethod
    def load_raw_state(self) -> Optional[Any]:
        """
        Load the raw storage document.

        Returns:
            The decoded JSON value, or None if the storage file does not exist

        Raises:
            StorageError: If the file exists but cannot be read or decoded
        """
        pass
