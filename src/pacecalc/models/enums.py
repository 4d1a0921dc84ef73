"""Enumeration types for pace calculations."""

from enum import Enum


class SpeedUnit(str, Enum):
    """Unit system a pace or speed is expressed in."""

    MPH = "mph"  # miles
    KPH = "kph"  # kilometers

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def pace_label(self) -> str:
        """Suffix shown after a pace, e.g. "8:00 /mi"."""
        return "/mi" if self is SpeedUnit.MPH else "/km"

    @property
    def speed_label(self) -> str:
        """Suffix shown after a speed, e.g. "7.50 MPH"."""
        return "MPH" if self is SpeedUnit.MPH else "KM/H"

    @property
    def distance_name(self) -> str:
        return "mile" if self is SpeedUnit.MPH else "kilometer"


class ConversionDirection(str, Enum):
    """Which way a conversion runs."""

    PACE_TO_SPEED = "pace-to-speed"
    SPEED_TO_PACE = "speed-to-pace"

    @property
    def label(self) -> str:
        if self is ConversionDirection.PACE_TO_SPEED:
            return "Pace → Speed"
        return "Speed → Pace"


class RaceDistance(str, Enum):
    """Standard race distances plus a free-form custom entry."""

    FIVE_K = "5k"
    TEN_K = "10k"
    HALF_MARATHON = "half"
    MARATHON = "marathon"
    CUSTOM = "custom"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def miles(self) -> float | None:
        return _MILES.get(self)

    @property
    def kilometers(self) -> float | None:
        return _KILOMETERS.get(self)

    def in_units(self, unit: SpeedUnit) -> float | None:
        """Distance in the given unit system, or None for a custom distance."""
        return self.miles if unit is SpeedUnit.MPH else self.kilometers


_DISPLAY_NAMES = {
    RaceDistance.FIVE_K: "5K",
    RaceDistance.TEN_K: "10K",
    RaceDistance.HALF_MARATHON: "Half Marathon",
    RaceDistance.MARATHON: "Marathon",
    RaceDistance.CUSTOM: "Custom",
}

_MILES = {
    RaceDistance.FIVE_K: 3.10686,
    RaceDistance.TEN_K: 6.21371,
    RaceDistance.HALF_MARATHON: 13.1094,
    RaceDistance.MARATHON: 26.2188,
}

_KILOMETERS = {
    RaceDistance.FIVE_K: 5.0,
    RaceDistance.TEN_K: 10.0,
    RaceDistance.HALF_MARATHON: 21.0975,
    RaceDistance.MARATHON: 42.195,
}
