# src/dockscope/core/utils/benchmarking.py

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from statistics import mean, median
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class TimingStats:
    """Statistics for one timed pipeline stage."""

    name: str
    times: List[float] = field(default_factory=list)

    def add_timing(self, elapsed: float) -> None:
        """Record one measurement in seconds."""
        self.times.append(elapsed)

    @property
    def count(self) -> int:
        return len(self.times)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    @property
    def median_time(self) -> float:
        return median(self.times) if self.times else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"
        return (
            f"{self.name}: Total: {self.total_time * 1000:.2f}ms, "
            f"Count: {self.count}, Avg: {self.avg_time * 1000:.3f}ms, "
            f"Median: {self.median_time * 1000:.3f}ms"
        )


class PerformanceStats:
    """Collect and report per-stage timings."""

    def __init__(self) -> None:
        self.stats: Dict[str, TimingStats] = {}

    def get_stats(self, name: str) -> TimingStats:
        """Get or create stats for a stage."""
        if name not in self.stats:
            self.stats[name] = TimingStats(name=name)
        return self.stats[name]

    def add_timing(self, name: str, elapsed: float) -> None:
        self.get_stats(name).add_timing(elapsed)

    def report(self) -> str:
        """Generate a timing report, one line per stage."""
        if not self.stats:
            return "No performance data collected"

        total_time = sum(s.total_time for s in self.stats.values())
        lines = []
        for name in sorted(self.stats):
            stats = self.stats[name]
            pct = (stats.total_time / total_time) * 100 if total_time > 0 else 0
            lines.append(f"{stats} ({pct:.1f}%)")
        return "\n".join(lines)


@contextmanager
def timer(name: str, stats: Optional[PerformanceStats] = None):
    """Time a block and optionally record it in ``stats``.

    Args:
        name: Name of the stage being timed
        stats: Optional PerformanceStats object to collect metrics
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if stats is not None:
            stats.add_timing(name, elapsed)
        logger.debug(f"{name} took {elapsed * 1000:.3f}ms")
