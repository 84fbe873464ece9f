"""Tests for base phase score, alignment bonus and clock helpers."""

import pytest

from solunar.config.schema import ScoringConfig
from solunar.scoring.alignment import (
    alignment_bonus,
    base_phase_score,
    circular_diff_minutes,
    final_score,
    is_aligned,
    parse_hhmm,
    twilight_distance,
)


@pytest.fixture
def cfg() -> ScoringConfig:
    return ScoringConfig()


class TestClockHelpers:
    def test_parse_hhmm(self):
        assert parse_hhmm("00:00") == 0
        assert parse_hhmm("06:05") == 365
        assert parse_hhmm("23:59") == 1439

    def test_circular_diff_wraps_midnight(self):
        assert circular_diff_minutes(10, 1430) == 20
        assert circular_diff_minutes(1430, 10) == 20
        assert circular_diff_minutes(0, 720) == 720
        assert circular_diff_minutes(300, 300) == 0

    def test_twilight_distance_uses_nearest_anchor(self):
        assert twilight_distance(400, 360, 1080) == 40
        assert twilight_distance(1100, 360, 1080) == 20
        assert twilight_distance(0, 360, 1080) == 360

    def test_is_aligned_inclusive(self):
        assert is_aligned(450, 360, 1080, 90)
        assert not is_aligned(451, 360, 1080, 90)


class TestBasePhaseScore:
    def test_new_moon_gets_bonus(self, cfg):
        assert base_phase_score(0.0, cfg) == pytest.approx(95.0)

    def test_full_moon_gets_bonus(self, cfg):
        assert base_phase_score(0.5, cfg) == pytest.approx(95.0)

    def test_quarter_is_minimum(self, cfg):
        assert base_phase_score(0.25, cfg) == pytest.approx(50.0)
        assert base_phase_score(0.75, cfg) == pytest.approx(50.0)

    def test_octant(self, cfg):
        assert base_phase_score(0.125, cfg) == pytest.approx(70.0)

    def test_bonus_window_is_strict(self, cfg):
        with_bonus = base_phase_score(0.049, cfg)
        without = base_phase_score(0.05, cfg)
        assert with_bonus - without > 4.5

    def test_waning_side_of_new_moon(self, cfg):
        assert base_phase_score(0.96, cfg) > base_phase_score(0.94, cfg) + 5

    def test_range(self, cfg):
        for i in range(1000):
            assert 50.0 <= base_phase_score(i / 1000, cfg) <= 95.0 + 1e-9


class TestAlignmentBonus:
    def test_no_alignment(self, cfg):
        assert alignment_bonus(360, 1080, [0, 720], [180, 900], cfg) == 0

    def test_major_and_minor(self, cfg):
        assert alignment_bonus(360, 1080, [400, 0], [330, 900], cfg) == 15

    def test_two_majors_hit_cap(self, cfg):
        assert alignment_bonus(360, 1080, [400, 1100], [330, 1000], cfg) == 20

    def test_short_day_counts_peak_against_both_anchors(self, cfg):
        assert alignment_bonus(660, 780, [], [720], cfg) == 10
        assert alignment_bonus(660, 780, [720], [], cfg) == 20

    def test_alignment_across_midnight(self, cfg):
        # sunset 23:30, major at 00:30
        assert alignment_bonus(480, 1410, [30], [], cfg) == 10

    def test_custom_cap(self):
        cfg = ScoringConfig(alignment_bonus_cap=12)
        assert alignment_bonus(360, 1080, [400, 1100], [], cfg) == 12


class TestFinalScore:
    def test_clamped_high(self):
        assert final_score(95.0, 20) == 100

    def test_floors(self):
        assert final_score(50.9, 0) == 50
        assert final_score(72.3, 5) == 77

    def test_clamped_low(self):
        assert final_score(-5.0, 0) == 0
