"""Flask application entry point for Review Decay."""

import logging
from datetime import date, datetime, timezone
from flask import Flask, render_template, request, jsonify
from flask_cors import CORS

from app.data.review_loader import ReviewLoader
from app.services.decay_engine import DecayConfig, DecayEngine
from app.services.review_service import ReviewService
from utils.logger import setup_logging, get_logger
import config

# Setup logging
setup_logging(config.LOG_DIR, getattr(logging, config.LOG_LEVEL.upper()))
logger = get_logger()

# Create Flask app
app = Flask(__name__)
CORS(app)

# Initialize services (dependency injection); a bad decay config fails here
engine = DecayEngine(DecayConfig.from_settings())
loader = ReviewLoader(
    config.REVIEWS_DIR,
    review_files=config.REVIEW_FILES,
    max_workers=config.LOADER_MAX_WORKERS,
)
review_service = ReviewService(loader, engine)


def _resolve_now():
    """Reference instant for a request: ?date=YYYY-MM-DD, else current UTC time.

    Raises:
        ValueError: If the date parameter is malformed.
    """
    raw = request.args.get('date')
    if raw:
        return date.fromisoformat(raw)
    return datetime.now(timezone.utc)


# =============================================================================
# Routes
# =============================================================================

@app.route('/')
def home():
    """Render the review ribbons page."""
    try:
        now = _resolve_now()
    except ValueError:
        now = datetime.now(timezone.utc)
    reviews = review_service.get_scored_reviews(now)
    return render_template('index.html', reviews=reviews, decay=engine.config)


@app.route('/api/reviews', methods=['GET'])
def list_reviews():
    """Get all reviews with their decayed scores."""
    try:
        now = _resolve_now()
    except ValueError as e:
        return jsonify({'error': f'Invalid date: {e}'}), 400
    return jsonify(review_service.get_scored_reviews(now))


@app.route('/api/reviews/<review_id>', methods=['GET'])
def get_review(review_id):
    """Get a single review's decayed score."""
    try:
        now = _resolve_now()
    except ValueError as e:
        return jsonify({'error': f'Invalid date: {e}'}), 400

    row = review_service.get_scored_review(review_id, now)
    if row is None:
        return jsonify({'error': 'Not found'}), 404
    return jsonify(row)


@app.route('/api/config', methods=['GET'])
def get_decay_config():
    """Get the active decay configuration."""
    cfg = engine.config
    return jsonify({
        'half_life': cfg.half_life,
        'max_score': cfg.max_score,
        'min_display_width': cfg.min_display_width,
    })


if __name__ == '__main__':
    logger.info(f"Starting Review Decay on port {config.PORT}")
    app.run(debug=config.DEBUG, port=config.PORT)
