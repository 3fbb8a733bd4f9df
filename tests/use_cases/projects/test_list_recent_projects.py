"""
Tests for the ListRecentProjectsUseCase.
"""

from unittest.mock import MagicMock

from conftest import folder_entry, storage_document
from windsurf_recent.exceptions import StorageError
from windsurf_recent.ports.storage.storage_reader_port import StorageReaderPort
from windsurf_recent.use_cases.projects.list_recent_projects import (
    ListRecentProjectsUseCase,
)


class TestListRecentProjectsUseCase:
    """Test cases for the ListRecentProjectsUseCase."""

    def test_execute_success(self, mock_logger):
        """Test successful extraction from the reader's document."""
        mock_reader = MagicMock(spec=StorageReaderPort)
        mock_reader.load_raw_state.return_value = storage_document(
            [folder_entry("/a/one", "a/one"), folder_entry("/b/two", "b/two")]
        )

        use_case = ListRecentProjectsUseCase(mock_reader, mock_logger)
        result = use_case.execute()

        assert [p.label for p in result] == ["one", "two"]
        mock_reader.load_raw_state.assert_called_once_with()
        mock_logger.info.assert_any_call("Found 2 recent projects")

    def test_execute_missing_file(self, mock_logger):
        """A missing storage file means no recent projects."""
        mock_reader = MagicMock(spec=StorageReaderPort)
        mock_reader.load_raw_state.return_value = None

        use_case = ListRecentProjectsUseCase(mock_reader, mock_logger)

        assert use_case.execute() == []
        mock_logger.error.assert_not_called()

    def test_execute_storage_error(self, mock_logger):
        """Malformed storage degrades to an empty list and is logged."""
        mock_reader = MagicMock(spec=StorageReaderPort)
        mock_reader.load_raw_state.side_effect = StorageError("Malformed JSON")

        use_case = ListRecentProjectsUseCase(mock_reader, mock_logger)

        assert use_case.execute() == []
        mock_logger.error.assert_called_once_with(
            "Error reading recent projects: Malformed JSON"
        )

    def test_execute_unexpected_error(self, mock_logger):
        """Test execution when the reader raises an unexpected exception."""
        mock_reader = MagicMock(spec=StorageReaderPort)
        mock_reader.load_raw_state.side_effect = RuntimeError("boom")

        use_case = ListRecentProjectsUseCase(mock_reader, mock_logger)

        assert use_case.execute() == []
        mock_logger.error.assert_called_once_with(
            "Unexpected error reading recent projects: boom"
        )

    def test_execute_rereads_every_time(self, mock_logger):
        mock_reader = MagicMock(spec=StorageReaderPort)
        mock_reader.load_raw_state.return_value = {}

        use_case = ListRecentProjectsUseCase(mock_reader, mock_logger)
        use_case.execute()
        use_case.execute()

        assert mock_reader.load_raw_state.call_count == 2
