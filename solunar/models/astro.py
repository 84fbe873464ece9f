"""Solar and lunar event models."""

from dataclasses import dataclass
from enum import StrEnum


class EventKind(StrEnum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    MOONRISE = "moonrise"
    MOONSET = "moonset"
    MAJOR = "major"
    MINOR = "minor"
    PEAK_WINDOW = "peak-window"


class MoonPhase(StrEnum):
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"


class PeakKind(StrEnum):
    MAJOR = "major"
    MINOR = "minor"


@dataclass(frozen=True)
class SolarLunarEvent:
    kind: EventKind
    time: str  # "HH:MM", or a 12-hour range for PEAK_WINDOW
    label: str

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "time": self.time, "label": self.label}


@dataclass(frozen=True)
class SolarTimes:
    """Sun times as fractional local hours, possibly outside [0, 24)."""

    sunrise: float
    solar_noon: float
    sunset: float


@dataclass(frozen=True)
class SolunarPeaks:
    """Lunar transit derived peaks, as fractional hours in [0, 24)."""

    transit: float
    majors: tuple[float, float]
    minors: tuple[float, float]
    moonrise: float
    moonset: float


@dataclass(frozen=True)
class AstroDay:
    """Everything the scorer needs for one calendar day."""

    phase: float
    phase_name: MoonPhase
    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    majors: tuple[str, str]
    minors: tuple[str, str]
