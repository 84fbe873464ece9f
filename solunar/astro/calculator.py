"""Approximate solar and lunar calculator for solunar forecasting.

Accuracy is in the tens of minutes, which is plenty for activity windows
but not for navigation. All functions are pure and total: polar latitudes
produce clamped, degenerate day lengths instead of errors.
"""

import math
from datetime import UTC, date, datetime

from solunar.models.astro import AstroDay, MoonPhase, SolarTimes, SolunarPeaks
from solunar.models.common import round_half_up
from solunar.models.forecast import Location

SYNODIC_MONTH_DAYS = 29.530588853
NEW_MOON_REFERENCE = datetime(2000, 1, 6, 18, 14, tzinfo=UTC)

LUNAR_HALF_DAY_HOURS = 12.42
LUNAR_QUARTER_DAY_HOURS = 6.21

MAX_DECLINATION_RAD = 0.409

# (upper bound, name), checked in order; the new moon wraps at both ends
_PHASE_BUCKETS = [
    (0.22, MoonPhase.WAXING_CRESCENT),
    (0.28, MoonPhase.FIRST_QUARTER),
    (0.47, MoonPhase.WAXING_GIBBOUS),
    (0.53, MoonPhase.FULL_MOON),
    (0.72, MoonPhase.WANING_GIBBOUS),
    (0.78, MoonPhase.LAST_QUARTER),
]


def moon_phase_value(d: date) -> float:
    """Position in the synodic cycle at midday UTC: 0 new, 0.5 full."""
    instant = datetime(d.year, d.month, d.day, 12, tzinfo=UTC)
    days = (instant - NEW_MOON_REFERENCE).total_seconds() / 86400.0
    phase = math.fmod(days / SYNODIC_MONTH_DAYS, 1.0)
    if phase < 0:
        phase += 1.0
    if phase >= 1.0:
        phase = 0.0
    return phase


def moon_phase_name(phase: float) -> MoonPhase:
    if phase < 0.03 or phase > 0.97:
        return MoonPhase.NEW_MOON
    for upper, name in _PHASE_BUCKETS:
        if phase < upper:
            return name
    return MoonPhase.WANING_CRESCENT


def solar_times(d: date, latitude: float, longitude: float) -> SolarTimes:
    """Sunrise, solar noon and sunset in local zone-clock hours."""
    day_of_year = d.timetuple().tm_yday
    declination = MAX_DECLINATION_RAD * math.sin(
        2 * math.pi * (day_of_year - 81) / 365
    )
    phi = math.radians(latitude)
    cos_h = -math.tan(phi) * math.tan(declination)
    cos_h = max(-1.0, min(1.0, cos_h))
    hour_angle = math.acos(cos_h) * (12 / math.pi)

    solar_noon = 12 + timezone_correction_hours(longitude)
    return SolarTimes(
        sunrise=solar_noon - hour_angle,
        solar_noon=solar_noon,
        sunset=solar_noon + hour_angle,
    )


def timezone_correction_hours(longitude: float) -> float:
    """Offset of local solar time from the nearest 15-degree zone meridian."""
    zone_meridian = round_half_up(longitude / 15) * 15
    return (zone_meridian - longitude) * (12 / 180)


def solunar_peaks(solar_noon: float, phase: float) -> SolunarPeaks:
    # Coarse transit: the moon lags the sun by phase * 24h
    transit = (solar_noon + phase * 24) % 24
    majors = sorted([transit, (transit + LUNAR_HALF_DAY_HOURS) % 24])
    rise = (transit - LUNAR_QUARTER_DAY_HOURS + 24) % 24
    set_ = (transit + LUNAR_QUARTER_DAY_HOURS) % 24
    minors = sorted([rise, set_])
    return SolunarPeaks(
        transit=transit,
        majors=(majors[0], majors[1]),
        minors=(minors[0], minors[1]),
        moonrise=rise,
        moonset=set_,
    )


def format_hhmm(hours: float) -> str:
    """Render fractional hours as a 24-hour "HH:MM" clock string."""
    h = hours % 24.0
    if h >= 24.0:
        h = 0.0
    hh = math.floor(h)
    mm = math.floor((h - hh) * 60)
    return f"{hh:02d}:{mm:02d}"


def compute_astro_day(d: date, location: Location) -> AstroDay:
    phase = moon_phase_value(d)
    sun = solar_times(d, location.latitude, location.longitude)
    peaks = solunar_peaks(sun.solar_noon, phase)
    return AstroDay(
        phase=phase,
        phase_name=moon_phase_name(phase),
        sunrise=format_hhmm(sun.sunrise),
        sunset=format_hhmm(sun.sunset),
        moonrise=format_hhmm(peaks.moonrise),
        moonset=format_hhmm(peaks.moonset),
        majors=(format_hhmm(peaks.majors[0]), format_hhmm(peaks.majors[1])),
        minors=(format_hhmm(peaks.minors[0]), format_hhmm(peaks.minors[1])),
    )
