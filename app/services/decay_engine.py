"""Decay engine: time-decayed review scores and display metrics."""

from dataclasses import dataclass, asdict
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Union

from app.models.review import ReviewRecord
from utils.math_helpers import half_life_decay, round_half_up

import config


class DecayConfigError(ValueError):
    """Raised when the decay configuration cannot produce valid scores."""


@dataclass(frozen=True)
class DecayConfig:
    """Decay parameters, bound once when a DecayEngine is built."""
    half_life: float = 90  # Days for an un-adjusted score to halve
    max_score: float = 10  # Upper clamp for base_score
    min_display_width: float = 5  # Lower clamp for ribbon_width, in percent

    @classmethod
    def from_settings(cls) -> "DecayConfig":
        return cls(
            half_life=config.DECAY_HALF_LIFE_DAYS,
            max_score=config.DECAY_MAX_SCORE,
            min_display_width=config.DECAY_MIN_DISPLAY_WIDTH,
        )

    def validate(self) -> None:
        if not self.half_life > 0:
            raise DecayConfigError(f"half_life must be > 0, got {self.half_life}")
        if not self.max_score > 0:
            raise DecayConfigError(f"max_score must be > 0, got {self.max_score}")
        if not 0 <= self.min_display_width <= 100:
            raise DecayConfigError(
                f"min_display_width must be within 0-100, got {self.min_display_width}"
            )


@dataclass(frozen=True)
class DecayResult:
    """Scores for one review at one instant. Built fresh on every call."""
    current_score: float
    base_score: float
    decay_percentage: int
    ribbon_width: int
    days_elapsed: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DecayEngine:
    """
    Computes decayed review scores. Pure computation: no I/O, no clock reads.

    current = min(initial + sum(changes), max_score) * 0.5 ** (days / half_life)

    The caller supplies `now`, so the same (record, now) always scores the
    same. Records are read, never modified.
    """

    # Inclusive lower thresholds, checked top-down
    COLOR_THRESHOLDS = (
        (8, "excellent"),
        (6, "good"),
        (4, "average"),
        (2, "below_average"),
    )
    FALLBACK_COLOR = "poor"

    def __init__(self, decay_config: DecayConfig = None):
        self.config = decay_config or DecayConfig()
        self.config.validate()

    def score(self, record: ReviewRecord, now: Union[datetime, date]) -> DecayResult:
        """
        Score a review at the given instant.

        Args:
            record: The review to score.
            now: Reference instant. Expected to be on or after
                 record.initial_date; earlier instants give negative
                 days_elapsed and are not corrected.

        Returns:
            DecayResult with current_score rounded to one decimal place and
            integer decay_percentage / ribbon_width.

        Raises:
            OverflowError: If `now` is so far before initial_date (over about
                1024 half-lives) that the growth factor leaves float range.
        """
        cfg = self.config
        days_elapsed = self.days_between(record.initial_date, now)

        base_score = min(record.initial_score + record.total_adjustment, cfg.max_score)

        try:
            decay_factor = half_life_decay(days_elapsed, cfg.half_life)
        except OverflowError as e:
            raise OverflowError(
                f"Cannot score review '{record.id}': now is {-days_elapsed} days "
                f"before initial_date {record.initial_date.isoformat()}"
            ) from e
        current_score = base_score * decay_factor

        ribbon_width = max((current_score / cfg.max_score) * 100, cfg.min_display_width)
        ribbon_width = min(ribbon_width, 100)

        # A base of zero has nothing to lose
        if base_score == 0:
            decay_percentage = 0.0
        else:
            decay_percentage = ((base_score - current_score) / base_score) * 100

        return DecayResult(
            current_score=round_half_up(current_score, 1),
            base_score=base_score,
            decay_percentage=int(round_half_up(decay_percentage)),
            ribbon_width=int(round_half_up(ribbon_width)),
            days_elapsed=days_elapsed,
        )

    @staticmethod
    def days_between(start: date, now: Union[datetime, date]) -> int:
        """Whole days from `start` to `now`, floored.

        A datetime `now` is measured from midnight of `start`: UTC midnight
        when `now` is timezone-aware, naive midnight otherwise.
        """
        if isinstance(now, datetime):
            tz = timezone.utc if now.tzinfo is not None else None
            start_dt = datetime.combine(start, time.min, tzinfo=tz)
            # timedelta.days already floors toward -infinity
            return (now - start_dt).days
        return (now - start).days

    @classmethod
    def color_for(cls, score: float) -> str:
        """Map a score to one of five colour tokens, best first."""
        for threshold, token in cls.COLOR_THRESHOLDS:
            if score >= threshold:
                return token
        return cls.FALLBACK_COLOR


def color_for(score: float) -> str:
    """Module-level alias of DecayEngine.color_for."""
    return DecayEngine.color_for(score)
