"""Models for Drive link extraction results."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.drive.constants import IDENTIFIER_CHARSET
from src.drive.errors import IdentifierNotFoundError


# Non-empty token drawn from the identifier charset
ResourceIdentifier = Annotated[str, Field(pattern=rf"^{IDENTIFIER_CHARSET}+$")]


class ExtractionKind(str, Enum):
    """Outcome of an extraction attempt."""

    FOUND = "found"
    NOT_FOUND = "not_found"


class ExtractionResult(BaseModel):
    """Tagged result of extracting an identifier from a sharing link.

    Either FOUND with an identifier, or NOT_FOUND without one. A result is
    never partially populated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ExtractionKind
    identifier: ResourceIdentifier | None = None

    @model_validator(mode="after")
    def validate_identifier_matches_kind(self) -> "ExtractionResult":
        """Ensure FOUND carries an identifier and NOT_FOUND does not."""
        if self.kind == ExtractionKind.FOUND and self.identifier is None:
            msg = "FOUND result requires an identifier"
            raise ValueError(msg)
        if self.kind == ExtractionKind.NOT_FOUND and self.identifier is not None:
            msg = "NOT_FOUND result must not carry an identifier"
            raise ValueError(msg)
        return self

    @classmethod
    def found(cls, identifier: str) -> "ExtractionResult":
        """Build a FOUND result."""
        return cls(kind=ExtractionKind.FOUND, identifier=identifier)

    @classmethod
    def not_found(cls) -> "ExtractionResult":
        """Build a NOT_FOUND result."""
        return cls(kind=ExtractionKind.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        """Whether an identifier was extracted."""
        return self.kind == ExtractionKind.FOUND

    def identifier_or(self, default: str) -> str:
        """Return the identifier, or default when nothing was found."""
        if self.identifier is None:
            return default
        return self.identifier

    def unwrap(self, link: str | None = None) -> str:
        """Return the identifier or raise.

        Args:
            link: Original link, attached to the error for context.

        Returns:
            The extracted identifier.

        Raises:
            IdentifierNotFoundError: If the result is NOT_FOUND.
        """
        if self.identifier is None:
            raise IdentifierNotFoundError(link)
        return self.identifier


class CharacterInfo(BaseModel):
    """A single character of an identifier with its code point."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: Annotated[int, Field(ge=0)]
    char: Annotated[str, Field(min_length=1, max_length=1)]
    code_point: Annotated[int, Field(ge=0)]


class IdentifierReport(BaseModel):
    """Character-level breakdown of an identifier.

    Used to diagnose identifiers that look right but fail to resolve,
    e.g. when a copied link carries invisible or look-alike characters.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str
    characters: tuple[CharacterInfo, ...]
    expected: str | None = None

    @property
    def length(self) -> int:
        """Number of characters in the identifier."""
        return len(self.identifier)

    @property
    def matches_expected(self) -> bool | None:
        """Exact comparison with the expected identifier, if one was given."""
        if self.expected is None:
            return None
        return self.identifier == self.expected

    @property
    def first_mismatch(self) -> int | None:
        """Index of the first differing character, if any.

        Returns None when nothing was expected or both strings are equal.
        A length difference reports the length of the shorter string.
        """
        if self.expected is None or self.identifier == self.expected:
            return None
        for index, (actual, wanted) in enumerate(
            zip(self.identifier, self.expected, strict=False)
        ):
            if actual != wanted:
                return index
        return min(len(self.identifier), len(self.expected))
