# Models package
from app.models.review import AdjustmentEvent, ReviewRecord

__all__ = ['AdjustmentEvent', 'ReviewRecord']
