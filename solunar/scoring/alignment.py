"""Moon-phase base score and solar-lunar alignment bonus."""

import math

from solunar.config.schema import ScoringConfig
from solunar.models.common import MINUTES_PER_DAY


def parse_hhmm(t: str) -> int:
    """Minutes past midnight for an "HH:MM" string."""
    hh, mm = t.split(":")
    return int(hh) * 60 + int(mm)


def circular_diff_minutes(a: int, b: int) -> int:
    diff = abs(a - b)
    return min(diff, MINUTES_PER_DAY - diff)


def twilight_distance(peak: int, sunrise: int, sunset: int) -> int:
    return min(circular_diff_minutes(peak, sunrise), circular_diff_minutes(peak, sunset))


def is_aligned(peak: int, sunrise: int, sunset: int, window_min: int) -> bool:
    return twilight_distance(peak, sunrise, sunset) <= window_min


def base_phase_score(phase: float, cfg: ScoringConfig) -> float:
    """Score from moon phase alone.

    cos(4*pi*phase) peaks four times per lunation; new and full moon get an
    extra flat bonus on top.
    """
    impact = (math.cos(phase * math.pi * 4) + 1) / 2
    score = cfg.phase_base + impact * cfg.phase_amplitude
    near_new = phase < cfg.phase_bonus_window or phase > 1 - cfg.phase_bonus_window
    near_full = abs(phase - 0.5) < cfg.phase_bonus_window
    if near_new or near_full:
        score += cfg.phase_bonus
    return score


def alignment_bonus(
    sunrise: int,
    sunset: int,
    majors: list[int],
    minors: list[int],
    cfg: ScoringConfig,
) -> int:
    """Bonus for peaks landing near sunrise or sunset, capped.

    Each peak is tested against both anchors, so a single peak can count
    twice on very short or very long days.
    """
    bonus = 0
    for peaks, per_anchor in (
        (majors, cfg.alignment_bonus_major),
        (minors, cfg.alignment_bonus_minor),
    ):
        for p in peaks:
            if circular_diff_minutes(p, sunrise) <= cfg.alignment_window_min:
                bonus += per_anchor
            if circular_diff_minutes(p, sunset) <= cfg.alignment_window_min:
                bonus += per_anchor
    return min(cfg.alignment_bonus_cap, bonus)


def final_score(base: float, bonus: int) -> int:
    return max(0, min(100, math.floor(base + bonus)))
