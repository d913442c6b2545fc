"""Unit tests for Drive constants."""

from src.drive.constants import (
    BARE_FILE_ID_MIN_LENGTH,
    COMPONENT_CLI,
    COMPONENT_DRIVE,
    COMPONENT_STATUS,
    FOLDER_ID_PATTERN,
)


class TestConstants:
    """Tests for shared constants."""

    def test_component_names(self) -> None:
        """Log component names are distinct."""
        assert (COMPONENT_CLI, COMPONENT_DRIVE, COMPONENT_STATUS) == (
            "cli",
            "drive",
            "status",
        )

    def test_folder_pattern_named_group(self) -> None:
        """The folder pattern exposes the identifier as the 'id' group."""
        match = FOLDER_ID_PATTERN.search("/folders/a_b-c?x")
        assert match is not None
        assert match.group("id") == "a_b-c"

    def test_bare_file_id_min_length(self) -> None:
        """Bare file IDs need at least 20 characters."""
        assert BARE_FILE_ID_MIN_LENGTH == 20
