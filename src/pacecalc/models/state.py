"""Converter selection state."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import ConversionDirection, SpeedUnit


class ConverterState(BaseModel):
    """
    Current direction, unit and typed input of the converter.

    Instances are immutable. Transitions live in
    ``pacecalc.engine.converter`` and return new states.
    """

    direction: ConversionDirection = Field(
        default=ConversionDirection.PACE_TO_SPEED,
        description="Which way the conversion runs",
    )
    unit: SpeedUnit = Field(
        default=SpeedUnit.MPH,
        description="Active unit system",
    )
    input_text: str = Field(
        default="",
        description="Sanitized text currently entered",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def result(self) -> str:
        """Rendered result for the current input, or an empty string."""
        from pacecalc.engine.converter import convert

        return convert(self.direction, self.input_text)

    @property
    def placeholder(self) -> str:
        if self.direction is ConversionDirection.PACE_TO_SPEED:
            return "mm:ss"
        return "10.00" if self.unit is SpeedUnit.MPH else "16.00"

    @property
    def input_suffix(self) -> str:
        if self.direction is ConversionDirection.PACE_TO_SPEED:
            return self.unit.pace_label
        return self.unit.speed_label

    @property
    def result_suffix(self) -> str:
        if self.direction is ConversionDirection.PACE_TO_SPEED:
            return self.unit.speed_label
        return self.unit.pace_label

    @property
    def helper_text(self) -> str:
        if self.direction is ConversionDirection.PACE_TO_SPEED:
            per = "per mile" if self.unit is SpeedUnit.MPH else "per km"
            return f"Enter pace {per} to get speed"
        return f"Enter speed in {self.unit.label} to get pace"
