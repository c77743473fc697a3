from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class TimedOperation:
    """
    Timing record for a single labelled operation.

    start_ns and end_ns are time.perf_counter_ns() readings; they only make
    sense relative to each other within one process.
    """
    name: str
    start_ns: int
    end_ns: int

    # Process RSS sampled just outside the timed window, when enabled
    rss_before_bytes: Optional[int] = None
    rss_after_bytes: Optional[int] = None

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    def format_line(self) -> str:
        return f"{self.name} time: {self.elapsed_ns} nanoseconds"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["elapsed_ns"] = self.elapsed_ns
        return data
