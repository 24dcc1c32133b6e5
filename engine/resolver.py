"""
resolver.py — Speed / Tie Resolver
===================================
Turns two lanes' playback timestamps into a winner and relative-speed
labels.

    faster lane  →  "1x"
    slower lane  →  f"{t_slow / t_fast:.2f}x", never below "1.01x"
    |tA - tB| <= epsilon  →  "Tie", both "1x (Tie)"
    missing duration      →  no winner, both "—"

The 1.01x floor keeps the slower label from rounding to "1.00x" and
contradicting the winner.
"""

from dataclasses import dataclass
from typing import Optional

from engine.config import DEFAULT_CONFIG, ComparisonConfig


NO_VALUE  = "—"
TIE_LABEL = "1x (Tie)"


@dataclass(frozen=True)
class SpeedVerdict:
    winner:     Optional[str]   # "A", "B", "Tie" or None when undecided
    relative_a: str
    relative_b: str
    duration_a: Optional[float] = None   # seconds
    duration_b: Optional[float] = None

    @property
    def is_tie(self) -> bool:
        return self.winner == "Tie"

    def to_dict(self):
        return {
            "winner": self.winner if self.winner is not None else NO_VALUE,
            "relative_a": self.relative_a,
            "relative_b": self.relative_b,
            "duration_a": self.duration_a,
            "duration_b": self.duration_b,
            "is_tie": self.is_tie,
        }


def duration_seconds(start_ms: Optional[float], end_ms: Optional[float]) -> Optional[float]:
    if start_ms is None or end_ms is None:
        return None
    ms = end_ms - start_ms
    if ms < 0:
        return None
    return ms / 1000


def format_slower(ratio: float) -> str:
    if ratio <= 1:
        return "1.01x"
    rounded = f"{ratio:.2f}"
    if float(rounded) <= 1:
        return "1.01x"
    return f"{rounded}x"


def resolve_durations(
    t_a: Optional[float],
    t_b: Optional[float],
    config: ComparisonConfig = DEFAULT_CONFIG,
) -> SpeedVerdict:
    if t_a is None or t_b is None:
        return SpeedVerdict(None, NO_VALUE, NO_VALUE, t_a, t_b)

    if abs(t_a - t_b) <= config.tie_epsilon_s:
        return SpeedVerdict("Tie", TIE_LABEL, TIE_LABEL, t_a, t_b)

    if t_a < t_b:
        # zero-length faster lane: the ratio is unbounded and gets no label
        slower = format_slower(t_b / t_a) if t_a > 0 else NO_VALUE
        return SpeedVerdict("A", "1x", slower, t_a, t_b)

    slower = format_slower(t_a / t_b) if t_b > 0 else NO_VALUE
    return SpeedVerdict("B", slower, "1x", t_a, t_b)


def resolve_speed(
    start_a: Optional[float],
    end_a: Optional[float],
    start_b: Optional[float],
    end_b: Optional[float],
    config: ComparisonConfig = DEFAULT_CONFIG,
) -> SpeedVerdict:
    """Timestamps in milliseconds; see module docstring for the rules."""
    return resolve_durations(
        duration_seconds(start_a, end_a),
        duration_seconds(start_b, end_b),
        config,
    )
