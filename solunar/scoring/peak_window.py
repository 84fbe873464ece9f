"""Selection of the single best activity window of the day."""

from dataclasses import dataclass

from solunar.config.schema import ScoringConfig
from solunar.models.astro import PeakKind
from solunar.models.common import MINUTES_PER_DAY
from solunar.models.forecast import PeakWindow
from solunar.scoring.alignment import twilight_distance


@dataclass(frozen=True)
class PeakCandidate:
    kind: PeakKind
    center: int  # minutes past midnight
    aligned: bool
    twilight_distance: int

    def sort_key(self) -> tuple[bool, bool, int, int]:
        return (
            not self.aligned,
            self.kind != PeakKind.MAJOR,
            self.twilight_distance,
            self.center,
        )


def format_12h(minutes: int) -> str:
    minutes %= MINUTES_PER_DAY
    h, m = divmod(minutes, 60)
    ampm = "PM" if h >= 12 else "AM"
    hh = ((h + 11) % 12) + 1
    return f"{hh}:{m:02d} {ampm}"


def pick_peak_window(
    sunrise: int,
    sunset: int,
    majors: list[int],
    minors: list[int],
    cfg: ScoringConfig,
) -> PeakWindow:
    candidates: list[PeakCandidate] = []
    for kind, peaks in ((PeakKind.MAJOR, majors), (PeakKind.MINOR, minors)):
        for p in peaks:
            d = twilight_distance(p, sunrise, sunset)
            candidates.append(
                PeakCandidate(
                    kind=kind,
                    center=p,
                    aligned=d <= cfg.alignment_window_min,
                    twilight_distance=d,
                )
            )

    best = min(candidates, key=PeakCandidate.sort_key)
    if best.kind == PeakKind.MAJOR:
        half, label = cfg.major_half_window_min, "Major"
    else:
        half, label = cfg.minor_half_window_min, "Minor"

    start = format_12h(best.center - half)
    end = format_12h(best.center + half)
    return PeakWindow(kind_label=label, window=f"{start} – {end} ({label})")
