# Services package
from app.services.decay_engine import DecayConfig, DecayConfigError, DecayEngine, DecayResult, color_for
from app.services.review_service import ReviewService

__all__ = ['DecayConfig', 'DecayConfigError', 'DecayEngine', 'DecayResult', 'color_for', 'ReviewService']
