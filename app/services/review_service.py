"""Review service: loads reviews and scores them for display."""

import time
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from app.data.review_loader import ReviewLoader
from app.models.review import ReviewRecord
from app.services.decay_engine import DecayEngine
from utils.logger import get_logger, log_scoring_run

import config

logger = get_logger()


class ReviewService:
    """
    Glue between the review loader and the decay engine.

    Reviews are re-read on every call; nothing is cached between requests.
    """

    def __init__(self, loader: ReviewLoader, engine: DecayEngine, colors: Dict[str, str] = None):
        self.loader = loader
        self.engine = engine
        self.colors = colors if colors is not None else config.SCORE_COLORS

    def score_record(self, record: ReviewRecord, now: Union[datetime, date]) -> Dict[str, Any]:
        """
        Score one record and shape it into a display row.

        Returns:
            Dict with the record's identity fields, the DecayResult fields,
            and the colour token/hex for the current score.
        """
        result = self.engine.score(record, now)
        color = self.engine.color_for(result.current_score)

        return {
            "id": record.id,
            "title": record.title,
            "tags": list(record.tags),
            "extra": dict(record.extra),
            "initial_score": record.initial_score,
            "initial_date": record.initial_date.isoformat(),
            "history": [
                {"date": event.date.isoformat(), "change": event.change}
                for event in record.history
            ],
            **result.to_dict(),
            "color": color,
            "color_hex": self.colors.get(color, ""),
        }

    def get_scored_reviews(self, now: Union[datetime, date]) -> List[Dict[str, Any]]:
        """Load all reviews and score each against `now`."""
        t0 = time.perf_counter()
        records = self.loader.load_all()
        rows = [self.score_record(record, now) for record in records]

        elapsed = (time.perf_counter() - t0) * 1000
        log_scoring_run(logger, len(rows), elapsed, as_of=now.isoformat())
        return rows

    def get_scored_review(self, review_id: str, now: Union[datetime, date]) -> Optional[Dict[str, Any]]:
        """Score a single review by id, or None if it isn't loaded."""
        for record in self.loader.load_all():
            if record.id == review_id:
                return self.score_record(record, now)
        return None
