"""Measurement harness: run labelled operations in order and time each one."""

from .harness import MeasurementHarness
from .operation import Operation

__all__ = ["MeasurementHarness", "Operation"]
