# Data package
from app.data.review_loader import ReviewLoader, ReviewLoadError, parse_frontmatter, parse_history

__all__ = ['ReviewLoader', 'ReviewLoadError', 'parse_frontmatter', 'parse_history']
