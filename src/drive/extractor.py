"""Google Drive sharing-link identifier extraction.

Links are treated as opaque text and scanned with regular expressions;
they are never parsed as full URLs. Absence of an identifier is a normal
outcome and is returned as a NOT_FOUND result rather than raised.
"""

from urllib.parse import quote

from src.drive.constants import (
    BARE_FILE_ID_PATTERN,
    DEFAULT_FILES_PATH,
    FILE_ID_PATTERNS,
    FOLDER_ID_PATTERN,
    FOLDER_ID_QUERY_PARAM,
)
from src.drive.models import CharacterInfo, ExtractionResult, IdentifierReport


def extract_folder_id(link: str) -> ExtractionResult:
    """Extract a folder identifier from a Drive sharing link.

    The identifier is the maximal run of ``[a-zA-Z0-9_-]`` immediately
    following the first ``/folders/`` in the link. Query separators,
    slashes and fragments end the run. A bare identifier without the
    ``/folders/`` prefix is not recognized.

    Args:
        link: Sharing link, possibly empty.

    Returns:
        FOUND with the identifier, or NOT_FOUND.
    """
    match = FOLDER_ID_PATTERN.search(link)
    if match is None:
        return ExtractionResult.not_found()
    return ExtractionResult.found(match.group("id"))


def resolve_folder_input(raw: str) -> str:
    """Resolve user input that may be either a folder link or a bare ID.

    Surrounding whitespace is stripped first. If the input is a folder
    link the extracted identifier is returned, otherwise the stripped
    input is passed through unchanged.

    Args:
        raw: Text pasted by the user.

    Returns:
        Folder identifier or the stripped input.
    """
    trimmed = raw.strip()
    return extract_folder_id(trimmed).identifier_or(trimmed)


def extract_file_id(link: str) -> ExtractionResult:
    """Extract a file identifier from the various Drive file link formats.

    Supports ``/file/d/<id>``, ``?id=<id>``, ``/open?id=<id>``, ``/d/<id>``
    and ``uc?...id=<id>`` links. Input that is itself a plausible bare ID
    (at least 20 identifier characters and nothing else) is accepted as is.

    Args:
        link: File link or bare file ID.

    Returns:
        FOUND with the identifier, or NOT_FOUND.
    """
    for pattern in FILE_ID_PATTERNS:
        match = pattern.search(link)
        if match:
            return ExtractionResult.found(match.group("id"))

    if BARE_FILE_ID_PATTERN.fullmatch(link):
        return ExtractionResult.found(link)

    return ExtractionResult.not_found()


def build_files_query(folder_id: str, base_path: str = DEFAULT_FILES_PATH) -> str:
    """Build the dashboard path that lists the files of a folder.

    Args:
        folder_id: Folder identifier.
        base_path: Listing endpoint path.

    Returns:
        Path with the ``folderId`` query parameter, e.g.
        ``/google-drive/files?folderId=<id>``.
    """
    return f"{base_path}?{FOLDER_ID_QUERY_PARAM}={quote(folder_id, safe='')}"


def analyze_identifier(identifier: str, expected: str | None = None) -> IdentifierReport:
    """Break an identifier into characters and compare it to an expected one.

    Args:
        identifier: Identifier to inspect.
        expected: Known-good identifier to compare against.

    Returns:
        Report with one entry per character.
    """
    characters = tuple(
        CharacterInfo(index=index, char=char, code_point=ord(char))
        for index, char in enumerate(identifier)
    )
    return IdentifierReport(
        identifier=identifier, characters=characters, expected=expected
    )
