"""Centralized configuration for Review Decay."""

import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# --- Decay ---
DECAY_HALF_LIFE_DAYS = 90              # Days for a score to halve
DECAY_MAX_SCORE = 10                   # Maximum possible score
DECAY_MIN_DISPLAY_WIDTH = 5            # Minimum ribbon width percentage

# --- Review files ---
REVIEWS_DIR = os.path.join(BASE_DIR, 'reviews')

# Files to load, in display order. Empty list = every *.md in REVIEWS_DIR.
REVIEW_FILES = [
    'inception.md',
    'ichiran-ramen.md',
    'sony-wh1000xm5.md',
    'elden-ring.md',
    'spiderverse.md',
    'butter-chicken.md',
]

LOADER_MAX_WORKERS = 4                 # Threads used to read review files

# --- Display ---
SCORE_COLORS = {
    'excellent': '#22c55e',            # Green
    'good': '#84cc16',                 # Lime
    'average': '#eab308',              # Yellow
    'below_average': '#f97316',        # Orange
    'poor': '#ef4444',                 # Red
}

# --- Server ---
DEBUG = True
PORT = 5000

# --- Logging ---
LOG_DIR = os.path.join(BASE_DIR, 'logs')
LOG_LEVEL = "INFO"                     # Application log level
