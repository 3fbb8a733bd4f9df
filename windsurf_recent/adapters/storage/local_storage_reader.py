"""
Local file system adapter for the Windsurf global storage file.
"""

import json
import logging
import os
from typing import Any, Optional

from typing_extensions import override

from windsurf_recent.exceptions import StorageError
from windsurf_recent.ports.storage.storage_reader_port import StorageReaderPort


class LocalStorageReader(StorageReaderPort):
    """Reads ``storage.json`` from disk, fresh on every call."""

    def __init__(self, storage_file: str | os.PathLike[str], logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            storage_file: Absolute path to the storage file
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._storage_file = os.fspath(storage_file)
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    def storage_file(self) -> str:
        return self._storage_file

    @override
    def load_raw_state(self) -> Optional[Any]:
        if not os.path.isfile(self._storage_file):
            self._logger.warning(f"Storage file not found: {self._storage_file}")
            return None

        try:
            with open(self._storage_file, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read storage file {self._storage_file}: {e}")

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"Malformed JSON in {self._storage_file}: {e}")
