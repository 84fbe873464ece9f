"""Alignment scorer: turns one day's astronomy into a score and curve."""

from solunar.config.schema import ScoringConfig
from solunar.models.astro import AstroDay
from solunar.models.forecast import DayScore
from solunar.scoring.activity import hourly_activity, normalize_curve
from solunar.scoring.alignment import (
    alignment_bonus,
    base_phase_score,
    final_score,
    parse_hhmm,
)
from solunar.scoring.peak_window import pick_peak_window


class AlignmentScorer:
    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    def score_day(self, astro: AstroDay) -> DayScore:
        """Score one day from its moon phase, sun times and solunar peaks."""
        cfg = self.config
        sunrise = parse_hhmm(astro.sunrise)
        sunset = parse_hhmm(astro.sunset)
        majors = [parse_hhmm(t) for t in astro.majors]
        minors = [parse_hhmm(t) for t in astro.minors]

        base = base_phase_score(astro.phase, cfg)
        bonus = alignment_bonus(sunrise, sunset, majors, minors, cfg)
        score = final_score(base, bonus)

        curve = hourly_activity(sunrise, sunset, majors, minors, cfg)
        curve = normalize_curve(curve, score)

        return DayScore(
            score=score,
            hourly_activity=curve,
            alignment_bonus=bonus,
            peak_window=pick_peak_window(sunrise, sunset, majors, minors, cfg),
        )
