"""Host benchmark: CPU, disk and embedded-database timings in nanoseconds."""

__version__ = "0.1.0"
