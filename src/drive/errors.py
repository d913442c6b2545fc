"""Error types for Drive link extraction."""


class DriveLinkError(Exception):
    """Base exception for Drive link handling.

    Extraction itself never raises; these are only used by callers that
    explicitly ask for an identifier to be present.
    """

    def __init__(self, message: str, link: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error message.
            link: The sharing link that was being processed.
        """
        super().__init__(message)
        self.message = message
        self.link = link

    def to_dict(self) -> dict[str, str | None]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "link": self.link,
        }


class IdentifierNotFoundError(DriveLinkError):
    """No resource identifier could be extracted from a link."""

    def __init__(self, link: str | None = None) -> None:
        """Initialize the error.

        Args:
            link: The sharing link without a recognizable identifier.
        """
        super().__init__("No Drive identifier found in link", link=link)
