"""Benchmark result data models."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from hostbench.models.stat_summary import StatSummary
from hostbench.models.timed_operation import TimedOperation
from hostbench.util.cal_utils import calculate_stat_summary


@dataclass
class RunResult:
    """
    One pass of the harness over the operation list.

    total_ns spans the first start timestamp to the last end timestamp.
    """
    operations: List[TimedOperation]
    total_ns: int

    @property
    def labels(self) -> List[str]:
        return [op.name for op in self.operations]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operations": [op.to_dict() for op in self.operations],
            "total_ns": self.total_ns,
        }


@dataclass
class BenchmarkReport:
    """
    All runs of one invocation, summarised per operation label.

    Labels keep the order in which they first appeared.
    """
    engine: str
    runs: List[RunResult] = field(default_factory=list)

    def add_run(self, run: RunResult) -> None:
        self.runs.append(run)

    def elapsed_by_label(self) -> Dict[str, List[int]]:
        values: Dict[str, List[int]] = {}
        for run in self.runs:
            for op in run.operations:
                values.setdefault(op.name, []).append(op.elapsed_ns)
        if self.runs:
            values["Total"] = [run.total_ns for run in self.runs]
        return values

    def summaries(self) -> Dict[str, StatSummary]:
        return {label: calculate_stat_summary(values) for label, values in self.elapsed_by_label().items()}

    def to_summary_dict(self) -> Dict[str, Any]:
        return {
            "engine": self.engine,
            "repeat": len(self.runs),
            "operations": {label: s.to_summary_dict() for label, s in self.summaries().items()},
        }

    def to_raw_data_dict(self) -> Dict[str, Any]:
        return {
            "engine": self.engine,
            "repeat": len(self.runs),
            "operations": {label: s.to_raw_data_dict() for label, s in self.summaries().items()},
            "runs": [run.to_dict() for run in self.runs],
        }

    def export(self, out_dir: Path) -> List[Path]:
        """Write summary.json and raw_data.json into out_dir and return both paths."""
        out_dir.mkdir(parents=True, exist_ok=True)
        summary_path = out_dir / "summary.json"
        with open(summary_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_summary_dict(), f, indent=2)
        raw_data_path = out_dir / "raw_data.json"
        with open(raw_data_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_raw_data_dict(), f, indent=2)
        return [summary_path, raw_data_path]
