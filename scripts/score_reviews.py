"""Print decayed scores for every review.

Usage:
    python scripts/score_reviews.py
    python scripts/score_reviews.py --date 2026-12-31 --reviews-dir reviews
"""

import argparse
import logging
import os
import sys
from datetime import date, datetime, timezone

# Allow imports from project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config
from app.data.review_loader import ReviewLoader
from app.services.decay_engine import DecayConfig, DecayEngine
from app.services.review_service import ReviewService
from utils.logger import setup_logging


def score(as_of, reviews_dir):
    review_files = config.REVIEW_FILES if reviews_dir == config.REVIEWS_DIR else None
    loader = ReviewLoader(reviews_dir, review_files=review_files,
                          max_workers=config.LOADER_MAX_WORKERS)
    service = ReviewService(loader, DecayEngine(DecayConfig.from_settings()))

    rows = service.get_scored_reviews(as_of)
    if not rows:
        print(f"No reviews found in {reviews_dir}")
        return

    print(f"{'id':<24} {'score':>6} {'base':>6} {'decay':>6} {'days':>5}  color")
    for row in rows:
        print(
            f"{row['id']:<24} {row['current_score']:>6.1f} {row['base_score']:>6.1f} "
            f"{row['decay_percentage']:>5}% {row['days_elapsed']:>5}  {row['color']}"
        )


def main():
    parser = argparse.ArgumentParser(description="Print decayed review scores")
    parser.add_argument("--date", help="Score as of this date (YYYY-MM-DD). Defaults to now.")
    parser.add_argument("--reviews-dir", default=config.REVIEWS_DIR,
                        help=f"Directory of review .md files (default: {config.REVIEWS_DIR})")
    args = parser.parse_args()

    setup_logging(level=getattr(logging, config.LOG_LEVEL.upper()), log_to_file=False)

    try:
        as_of = date.fromisoformat(args.date) if args.date else datetime.now(timezone.utc)
    except ValueError as e:
        parser.error(f"Invalid --date: {e}")

    score(as_of, args.reviews_dir)


if __name__ == "__main__":
    main()
