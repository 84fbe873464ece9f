"""24-hour activity curve built from twilight and solunar peak bumps."""

import math

from solunar.config.schema import ScoringConfig
from solunar.scoring.alignment import circular_diff_minutes, is_aligned

HOURS_PER_DAY = 24
ACTIVITY_MIN = 10
ACTIVITY_MAX = 100


def _clamp(value: float) -> int:
    return max(ACTIVITY_MIN, min(ACTIVITY_MAX, math.floor(value)))


def _half_cosine(diff: int, window: int) -> float:
    return math.cos((diff / window) * (math.pi / 2))


def hourly_activity(
    sunrise: int,
    sunset: int,
    majors: list[int],
    minors: list[int],
    cfg: ScoringConfig,
) -> list[int]:
    """Activity for each hour start, in [ACTIVITY_MIN, ACTIVITY_MAX]."""
    major_amps = [
        cfg.major_amplitude
        + (cfg.major_aligned_boost if is_aligned(p, sunrise, sunset, cfg.alignment_window_min) else 0)
        for p in majors
    ]
    minor_amps = [
        cfg.minor_amplitude
        + (cfg.minor_aligned_boost if is_aligned(p, sunrise, sunset, cfg.alignment_window_min) else 0)
        for p in minors
    ]

    curve: list[int] = []
    for h in range(HOURS_PER_DAY):
        minute = h * 60
        value = cfg.hourly_floor

        for anchor in (sunrise, sunset):
            diff = circular_diff_minutes(minute, anchor)
            if diff < cfg.twilight_window_min:
                value += _half_cosine(diff, cfg.twilight_window_min) * cfg.twilight_amplitude

        for peak, amp in zip(majors, major_amps):
            diff = circular_diff_minutes(minute, peak)
            if diff < cfg.major_window_min:
                value += _half_cosine(diff, cfg.major_window_min) ** 2 * amp

        for peak, amp in zip(minors, minor_amps):
            diff = circular_diff_minutes(minute, peak)
            if diff < cfg.minor_window_min:
                value += _half_cosine(diff, cfg.minor_window_min) ** 2 * amp

        curve.append(_clamp(value))
    return curve


def normalize_curve(curve: list[int], score: int) -> list[int]:
    """Stretch the curve of high-scoring days so the chart shows it.

    Epic days (>= 85) are scaled to touch 100, good days (>= 70) to 85.
    """
    peak = max(curve)
    if score >= 85 and peak < 95:
        target = 100
    elif score >= 70 and peak < 80:
        target = 85
    else:
        return list(curve)
    ratio = target / peak
    return [_clamp(v * ratio) for v in curve]
