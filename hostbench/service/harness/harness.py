"""
Measurement harness.

Runs an ordered list of (label, action) pairs one at a time. Each action is
bracketed by two monotonic clock readings and reported as a single line:

    <label> time: <elapsed> nanoseconds

followed, once every action has finished, by one total line covering the
first start reading to the last end reading.

Exceptions raised by an action are not caught here. They propagate to the
caller, the failing action gets no line, and the remaining actions never run.
"""
import sys
import time
from typing import Callable, Iterable, List, Optional, TextIO, Tuple

from hostbench.consts.labels import TOTAL
from hostbench.models.run_result import RunResult
from hostbench.models.timed_operation import TimedOperation
from hostbench.service.monitor.process_snapshot import take_snapshot
from hostbench.util.log_config import setup_logger

logger = setup_logger(__name__)


class MeasurementHarness:

    def __init__(
        self,
        out: Optional[TextIO] = None,
        track_memory: bool = False,
        clock: Callable[[], int] = time.perf_counter_ns,
    ):
        """
        Args:
            out: Stream for the timing lines; sys.stdout at emit time when None
            track_memory: Sample process RSS right before and after each action
            clock: Monotonic nanosecond clock
        """
        self.out = out
        self.track_memory = track_memory
        self.clock = clock

    def run(self, operations: Iterable[Tuple[str, Callable]]) -> RunResult:
        records: List[TimedOperation] = []

        for label, action in operations:
            logger.debug(f"Running: {label}")
            rss_before = take_snapshot().rss_bytes if self.track_memory else None

            start_ns = self.clock()
            action()
            end_ns = self.clock()

            rss_after = take_snapshot().rss_bytes if self.track_memory else None

            record = TimedOperation(
                name=label,
                start_ns=start_ns,
                end_ns=end_ns,
                rss_before_bytes=rss_before,
                rss_after_bytes=rss_after,
            )
            self._emit(record.format_line())
            records.append(record)

        total_ns = records[-1].end_ns - records[0].start_ns if records else 0
        self._emit(f"{TOTAL} time: {total_ns} nanoseconds")
        return RunResult(operations=records, total_ns=total_ns)

    def _emit(self, line: str) -> None:
        print(line, file=self.out or sys.stdout, flush=True)
