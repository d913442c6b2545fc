"""Constants for Google Drive link extraction."""

import re


# Characters allowed in a Drive resource identifier
IDENTIFIER_CHARSET = r"[a-zA-Z0-9_-]"

# Folder link: .../folders/<id>[?usp=sharing]
FOLDER_ID_PATTERN = re.compile(rf"/folders/(?P<id>{IDENTIFIER_CHARSET}+)")

# File link patterns, tried in order; first match wins
FILE_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"/file/d/(?P<id>{IDENTIFIER_CHARSET}+)"),
    re.compile(rf"[?&]id=(?P<id>{IDENTIFIER_CHARSET}+)"),
    re.compile(rf"/open\?id=(?P<id>{IDENTIFIER_CHARSET}+)"),
    re.compile(rf"/d/(?P<id>{IDENTIFIER_CHARSET}+)"),
    re.compile(rf"drive\.google\.com/uc\?.*id=(?P<id>{IDENTIFIER_CHARSET}+)"),
)

# A bare file ID pasted without any URL around it
BARE_FILE_ID_MIN_LENGTH = 20
BARE_FILE_ID_PATTERN = re.compile(
    rf"{IDENTIFIER_CHARSET}{{{BARE_FILE_ID_MIN_LENGTH},}}"
)

# Dashboard endpoint that lists the files of a folder
DEFAULT_FILES_PATH = "/google-drive/files"
FOLDER_ID_QUERY_PARAM = "folderId"

# Log component names
COMPONENT_CLI = "cli"
COMPONENT_DRIVE = "drive"
COMPONENT_STATUS = "status"
