"""History and favorites records."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class ConversionRecord(BaseModel):
    """A conversion the user made, kept in the history list."""

    id: UUID = Field(default_factory=uuid4, description="Record identifier")
    input: str = Field(description="Text the user entered")
    input_suffix: str = Field(description="Unit label shown after the input")
    result: str = Field(description="Rendered conversion result")
    result_suffix: str = Field(description="Unit label shown after the result")
    date: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the conversion was recorded",
    )


class FavoriteConversion(BaseModel):
    """A pinned conversion."""

    id: UUID = Field(default_factory=uuid4, description="Favorite identifier")
    input: str = Field(description="Text the user entered")
    input_suffix: str = Field(description="Unit label shown after the input")
    result: str = Field(description="Rendered conversion result")
    result_suffix: str = Field(description="Unit label shown after the result")

    def matches(self, input: str, input_suffix: str, result: str, result_suffix: str) -> bool:
        """True if this favorite holds the same conversion, ignoring the id."""
        return (
            self.input == input
            and self.input_suffix == input_suffix
            and self.result == result
            and self.result_suffix == result_suffix
        )
