"""Tests for AlignmentScorer."""

from datetime import date

from solunar.astro.calculator import compute_astro_day
from solunar.config.schema import ScoringConfig
from solunar.models.astro import AstroDay, MoonPhase
from solunar.models.forecast import Location
from solunar.scoring.scorer import AlignmentScorer


def _astro(phase: float, majors: tuple[str, str], minors: tuple[str, str]) -> AstroDay:
    return AstroDay(
        phase=phase,
        phase_name=MoonPhase.NEW_MOON,
        sunrise="06:00",
        sunset="18:00",
        moonrise=minors[1],
        moonset=minors[0],
        majors=majors,
        minors=minors,
    )


class TestAlignmentScorer:
    def test_default_config(self):
        assert AlignmentScorer().config == ScoringConfig()

    def test_quarter_moon_without_alignment(self):
        result = AlignmentScorer().score_day(_astro(0.25, ("00:00", "12:00"), ("03:00", "15:00")))
        assert result.score == 50
        assert result.alignment_bonus == 0
        assert result.hourly_activity[0] == 70
        assert result.hourly_activity[9] == 20
        assert result.peak_window.window == "11:00 PM – 1:00 AM (Major)"

    def test_new_moon_with_aligned_majors(self):
        result = AlignmentScorer().score_day(_astro(0.0, ("06:40", "18:20"), ("00:30", "12:30")))
        assert result.score == 100
        assert result.alignment_bonus == 20
        assert max(result.hourly_activity) == 100
        assert result.peak_window.kind_label == "Major"
        assert result.peak_window.window == "5:20 PM – 7:20 PM (Major)"

    def test_custom_config_is_used(self):
        scorer = AlignmentScorer(ScoringConfig(phase_base=10.0, phase_amplitude=0.0))
        result = scorer.score_day(_astro(0.25, ("00:00", "12:00"), ("03:00", "15:00")))
        assert result.score == 10

    def test_real_days_are_well_formed(self):
        scorer = AlignmentScorer()
        loc = Location(45.2671, 19.8335)
        for day in range(1, 29):
            result = scorer.score_day(compute_astro_day(date(2025, 2, day), loc))
            assert 0 <= result.score <= 100
            assert len(result.hourly_activity) == 24
            assert all(10 <= v <= 100 for v in result.hourly_activity)
            assert 0 <= result.alignment_bonus <= 20
            assert result.peak_window.window.endswith(f"({result.peak_window.kind_label})")
