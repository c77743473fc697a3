import os
from dataclasses import dataclass

import psutil


@dataclass
class ProcessSnapshot:
    """Single process resource usage snapshot"""
    rss_bytes: int


def take_snapshot(pid: int = None) -> ProcessSnapshot:
    """Sample resident memory of a process (default: this one)."""
    process = psutil.Process(pid if pid is not None else os.getpid())
    return ProcessSnapshot(rss_bytes=process.memory_info().rss)
