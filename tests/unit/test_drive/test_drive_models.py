"""Unit tests for Drive extraction models."""

import pytest
from pydantic import ValidationError

from src.drive.errors import DriveLinkError, IdentifierNotFoundError
from src.drive.models import ExtractionKind, ExtractionResult


class TestExtractionResult:
    """Tests for ExtractionResult."""

    def test_found(self) -> None:
        """FOUND carries the identifier."""
        result = ExtractionResult.found("abc-123_X")
        assert result.kind == ExtractionKind.FOUND
        assert result.is_found
        assert result.unwrap() == "abc-123_X"

    def test_not_found(self) -> None:
        """NOT_FOUND has no identifier."""
        result = ExtractionResult.not_found()
        assert result.kind == ExtractionKind.NOT_FOUND
        assert not result.is_found
        assert result.identifier is None

    def test_found_requires_identifier(self) -> None:
        """FOUND without an identifier is rejected."""
        with pytest.raises(ValidationError):
            ExtractionResult(kind=ExtractionKind.FOUND)

    def test_not_found_rejects_identifier(self) -> None:
        """NOT_FOUND with an identifier is rejected."""
        with pytest.raises(ValidationError):
            ExtractionResult(kind=ExtractionKind.NOT_FOUND, identifier="abc")

    @pytest.mark.parametrize("identifier", ["", "a b", "abc?", "a/b", "ab.c"])
    def test_identifier_charset_enforced(self, identifier: str) -> None:
        """Identifiers outside the charset are rejected."""
        with pytest.raises(ValidationError):
            ExtractionResult.found(identifier)

    def test_frozen(self) -> None:
        """Results are immutable."""
        result = ExtractionResult.found("abc")
        with pytest.raises(ValidationError):
            result.identifier = "other"  # type: ignore[misc]

    def test_identifier_or(self) -> None:
        """identifier_or falls back only for NOT_FOUND."""
        assert ExtractionResult.found("abc").identifier_or("x") == "abc"
        assert ExtractionResult.not_found().identifier_or("x") == "x"

    def test_unwrap_not_found_raises(self) -> None:
        """unwrap on NOT_FOUND raises with the link attached."""
        with pytest.raises(IdentifierNotFoundError) as exc_info:
            ExtractionResult.not_found().unwrap("https://example.com")
        assert exc_info.value.link == "https://example.com"
        assert isinstance(exc_info.value, DriveLinkError)


class TestDriveLinkError:
    """Tests for error serialization."""

    def test_to_dict(self) -> None:
        """Errors serialize their type, message and link."""
        error = IdentifierNotFoundError("https://drive.google.com/drive/")
        assert error.to_dict() == {
            "error_type": "IdentifierNotFoundError",
            "message": "No Drive identifier found in link",
            "link": "https://drive.google.com/drive/",
        }
