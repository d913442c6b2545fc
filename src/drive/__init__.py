"""Google Drive link handling.

This module provides:
- extract_folder_id for turning folder sharing links into folder IDs
- extract_file_id for the file link formats used by downloads
- resolve_folder_input for lenient link-or-ID user input
- ExtractionResult as the tagged FOUND / NOT_FOUND result
"""

from src.drive.errors import DriveLinkError, IdentifierNotFoundError
from src.drive.extractor import (
    analyze_identifier,
    build_files_query,
    extract_file_id,
    extract_folder_id,
    resolve_folder_input,
)
from src.drive.models import (
    CharacterInfo,
    ExtractionKind,
    ExtractionResult,
    IdentifierReport,
)


__all__ = [
    "CharacterInfo",
    "DriveLinkError",
    "ExtractionKind",
    "ExtractionResult",
    "IdentifierNotFoundError",
    "IdentifierReport",
    "analyze_identifier",
    "build_files_query",
    "extract_file_id",
    "extract_folder_id",
    "resolve_folder_input",
]
