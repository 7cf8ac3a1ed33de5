"""Logging configuration for Review Decay."""

import logging
import os
from datetime import datetime


def setup_logging(
    log_dir: str = 'logs',
    level: int = logging.INFO,
    log_to_file: bool = True,
    name: str = 'reviewdecay'
) -> logging.Logger:
    """
    Configure logging with console and (optionally) file handlers.

    The web app logs to both; the CLI script passes log_to_file=False so a
    one-off run doesn't touch the log directory. Console output goes to
    stderr, keeping stdout free for the script's table.

    Args:
        log_dir: Directory to store log files
        level: Logging level (default: INFO)
        log_to_file: Also write a dated log file under log_dir
        name: Logger name (default: the application logger)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers on multiple calls
    if logger.handlers:
        return logger

    # Custom formatter with timestamps
    formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler (stderr)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if not log_to_file:
        return logger

    # File handler (daily rotation by filename)
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, f'{name}_{datetime.now():%Y%m%d}.log')
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str = 'reviewdecay') -> logging.Logger:
    """Get a logger instance by name."""
    return logging.getLogger(name)


def log_scoring_run(
    logger: logging.Logger,
    reviews_scored: int,
    duration_ms: float,
    as_of: str = None
) -> None:
    """
    Log a batch scoring pass.

    Args:
        logger: Logger instance
        reviews_scored: Number of reviews scored
        duration_ms: Time taken in milliseconds
        as_of: Optional reference date the scores were computed for
    """
    as_of_str = f"as_of={as_of}" if as_of else "as_of=now"
    logger.info(
        f"[SCORING] {reviews_scored} reviews | "
        f"{duration_ms:.1f}ms | {as_of_str}"
    )
