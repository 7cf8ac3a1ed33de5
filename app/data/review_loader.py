"""Markdown review file loader."""

import math
import os
import re
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import yaml

from app.models.review import AdjustmentEvent, ReviewRecord
from utils.logger import get_logger

logger = get_logger()


class ReviewLoadError(Exception):
    """Raised when a review file cannot be turned into a ReviewRecord."""


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---', re.DOTALL)
HISTORY_LINE_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})\s*\|\s*([+-]?\d+)')
HISTORY_HEADING = '## History'

# Frontmatter keys consumed into ReviewRecord fields; the rest go to `extra`
RECORD_KEYS = {'title', 'initialScore', 'initialDate', 'tags'}


def parse_frontmatter(content: str) -> Optional[Dict[str, Any]]:
    """
    Parse the YAML frontmatter block at the top of a review file.

    Returns:
        Mapping of frontmatter keys, or None if the file has no block.
        A comma-separated `tags` string is split into a list.

    Raises:
        ReviewLoadError: If the block is not valid YAML or not a mapping.
    """
    match = FRONTMATTER_RE.match(content)
    if not match:
        return None

    try:
        data = yaml.safe_load(match.group(1))
    except (yaml.YAMLError, ValueError) as e:
        # Impossible timestamps (2024-02-30) surface as ValueError from the constructor
        raise ReviewLoadError(f"Invalid frontmatter YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ReviewLoadError(f"Frontmatter must be a mapping, got {type(data).__name__}")

    tags = data.get('tags')
    if isinstance(tags, str):
        data['tags'] = [t.strip() for t in tags.split(',') if t.strip()]

    return data


def parse_history(content: str) -> List[AdjustmentEvent]:
    """
    Parse `YYYY-MM-DD | +N` lines from the `## History` section.

    Lines that don't match the pattern are ignored. Order is preserved.
    """
    _, found, section = content.partition(HISTORY_HEADING)
    if not found:
        return []

    history = []
    for line in section.splitlines():
        match = HISTORY_LINE_RE.match(line.strip())
        if not match:
            continue
        try:
            event_date = date.fromisoformat(match.group(1))
        except ValueError as e:
            raise ReviewLoadError(f"Invalid history date '{match.group(1)}': {e}") from e
        history.append(AdjustmentEvent(date=event_date, change=int(match.group(2))))

    return history


def _coerce_score(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ReviewLoadError(f"initialScore must be a number, got {value!r}")
    try:
        score = float(value)
    except (TypeError, ValueError) as e:
        raise ReviewLoadError(f"initialScore must be a number, got {value!r}") from e
    if not math.isfinite(score):
        raise ReviewLoadError(f"initialScore must be finite, got {value!r}")
    return score


def _coerce_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ReviewLoadError(f"initialDate must be YYYY-MM-DD, got {value!r}") from e
    raise ReviewLoadError(f"initialDate must be a date, got {value!r}")


def _plain_value(value: Any, key: str) -> Any:
    """Reduce a frontmatter value to JSON-friendly data.

    Dates become ISO strings and mapping keys become strings. Anything else
    YAML can produce (sets, binary, custom tags) is rejected.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, list):
        return [_plain_value(item, key) for item in value]
    if isinstance(value, dict):
        return {_plain_key(k, key): _plain_value(v, key) for k, v in value.items()}
    raise ReviewLoadError(
        f"Unsupported frontmatter value for '{key}': {type(value).__name__}"
    )


def _plain_key(key: Any, parent: str = '') -> str:
    if isinstance(key, date):
        return key.isoformat()
    if key is None or isinstance(key, (str, bool, int, float)):
        return str(key)
    where = f" under '{parent}'" if parent else ""
    raise ReviewLoadError(f"Unsupported frontmatter key{where}: {type(key).__name__}")


def build_record(review_id: str, content: str) -> ReviewRecord:
    """Build a validated ReviewRecord from raw markdown content."""
    data = parse_frontmatter(content)
    if data is None:
        raise ReviewLoadError(f"No frontmatter in review '{review_id}'")

    if 'initialScore' not in data:
        raise ReviewLoadError(f"Missing initialScore in review '{review_id}'")
    if 'initialDate' not in data:
        raise ReviewLoadError(f"Missing initialDate in review '{review_id}'")

    tags = data.get('tags') or []
    if not isinstance(tags, list):
        tags = [tags]

    return ReviewRecord(
        id=review_id,
        initial_score=_coerce_score(data['initialScore']),
        initial_date=_coerce_date(data['initialDate']),
        history=parse_history(content),
        title=str(data.get('title') or ''),
        tags=[str(t) for t in tags],
        extra={
            _plain_key(k): _plain_value(v, str(k))
            for k, v in data.items() if k not in RECORD_KEYS
        },
    )


class ReviewLoader:
    """
    Reads review .md files from a directory and builds ReviewRecords.

    Files are read concurrently; results keep the configured order. A bad
    file is logged and skipped by load_all() so one broken review doesn't
    take the page down.
    """

    def __init__(
        self,
        reviews_dir: str,
        review_files: Optional[List[str]] = None,
        max_workers: int = 4
    ):
        self.reviews_dir = reviews_dir
        self.review_files = list(review_files or [])
        self.max_workers = max_workers

    def list_files(self) -> List[str]:
        """Configured filenames, or every *.md in reviews_dir when none are configured."""
        if self.review_files:
            return list(self.review_files)
        if not os.path.isdir(self.reviews_dir):
            logger.warning(f"[LOADER] Reviews directory not found: {self.reviews_dir}")
            return []
        return sorted(f for f in os.listdir(self.reviews_dir) if f.endswith('.md'))

    def load_review(self, filename: str) -> ReviewRecord:
        """
        Load a single review file.

        Raises:
            ReviewLoadError: If the file is missing or malformed.
        """
        path = os.path.join(self.reviews_dir, filename)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ReviewLoadError(f"Failed to read {filename}: {e}") from e

        review_id = os.path.splitext(filename)[0]
        return build_record(review_id, content)

    def load_all(self) -> List[ReviewRecord]:
        """Load every review file, skipping (and logging) ones that fail."""
        filenames = self.list_files()
        if not filenames:
            return []

        workers = max(1, min(self.max_workers, len(filenames)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [(name, pool.submit(self.load_review, name)) for name in filenames]

            records = []
            for name, future in futures:
                try:
                    records.append(future.result())
                except ReviewLoadError as e:
                    logger.warning(f"[LOADER] Skipping {name}: {e}")

        logger.info(f"[LOADER] Loaded {len(records)}/{len(filenames)} reviews")
        return records
