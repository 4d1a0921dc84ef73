"""Split schedule models."""

from pydantic import BaseModel, ConfigDict, Field


class Split(BaseModel):
    """One segment of a split schedule."""

    distance: float = Field(
        description="Distance covered by the split, at most one unit",
        gt=0,
        le=1.0,
    )
    seconds: int = Field(
        description="Time for the split in seconds",
        ge=1,
    )

    model_config = ConfigDict(frozen=True)


class SplitRow(BaseModel):
    """A split annotated with its position and the running total."""

    index: int = Field(description="1-based split number", ge=1)
    distance: float = Field(description="Distance covered by the split", gt=0)
    seconds: int = Field(description="Time for the split in seconds", ge=1)
    elapsed: int = Field(description="Cumulative time at the end of the split", ge=1)

    model_config = ConfigDict(frozen=True)

    @property
    def pace_minutes(self) -> float:
        """Pace per full unit while running this split."""
        return self.seconds / 60 / self.distance
