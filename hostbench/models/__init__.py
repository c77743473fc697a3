"""Models for benchmark data structures."""

from .stat_summary import StatSummary
from .timed_operation import TimedOperation

__all__ = ["StatSummary", "TimedOperation"]
