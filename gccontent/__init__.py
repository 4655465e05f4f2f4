"""Convenience re‑exports."""
from .settings import Settings
from .analysis.composition import BaseTally, CompositionSummary, count_bases, gc_ratio
from .analysis.window import SlidingWindowSeries
from .errors import GCContentError, InputUnavailable, FormatError, InvalidWindowConfiguration

settings = Settings()
