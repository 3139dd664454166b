"""Metrics collection for batch runs."""

import time
from typing import Dict, Any, List
from collections import defaultdict


class MetricsCollector:
    """
    Collects timers, counters and recorded values for a batch run.
    Implements IMetricsCollector protocol.
    """

    def __init__(self):
        self._start_time = time.time()
        self._timers: Dict[str, float] = {}
        self._metrics: Dict[str, List[Any]] = defaultdict(list)
        self._counters: Dict[str, int] = defaultdict(int)

    def start_timer(self, name: str) -> None:
        """Start a named timer."""
        self._timers[name] = time.time()

    def stop_timer(self, name: str) -> float:
        """
        Stop a named timer and return elapsed time.

        Args:
            name: Timer name

        Returns:
            Elapsed time in seconds

        Raises:
            KeyError: If timer was not started
        """
        if name not in self._timers:
            raise KeyError(f"Timer '{name}' was not started")

        elapsed = time.time() - self._timers.pop(name)
        self.record_metric(f"{name}_duration", elapsed)
        return elapsed

    def record_metric(self, name: str, value: Any) -> None:
        """Record a metric value."""
        self._metrics[name].append(value)

    def increment_counter(self, name: str, amount: int = 1) -> None:
        """Increment a counter."""
        self._counters[name] += amount

    def get_counter(self, name: str) -> int:
        """Get counter value."""
        return self._counters.get(name, 0)

    def get_metric(self, name: str) -> list:
        """Get all values for a metric."""
        return self._metrics.get(name, [])

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all metrics.

        Returns:
            Dictionary with metric summaries
        """
        summary = {
            "total_elapsed": self.elapsed_time(),
            "counters": dict(self._counters),
            "metrics": {}
        }

        for name, values in self._metrics.items():
            if not values:
                continue
            if all(isinstance(v, (int, float)) for v in values):
                summary["metrics"][name] = {
                    "count": len(values),
                    "sum": sum(values),
                    "avg": sum(values) / len(values),
                    "min": min(values),
                    "max": max(values),
                }
            else:
                summary["metrics"][name] = {
                    "count": len(values),
                    "values": values
                }

        return summary

    def elapsed_time(self) -> float:
        """Get total elapsed time since initialization."""
        return time.time() - self._start_time

    def format_summary(self) -> List[str]:
        """Render the summary as log-friendly lines."""
        summary = self.get_summary()
        lines = [f"Total elapsed: {summary['total_elapsed']:.2f}s"]

        for name, value in sorted(summary['counters'].items()):
            lines.append(f"  {name}: {value}")

        for name, data in sorted(summary['metrics'].items()):
            if 'avg' in data:
                lines.append(
                    f"  {name}: count={data['count']} avg={data['avg']:.3f} "
                    f"min={data['min']:.3f} max={data['max']:.3f}"
                )

        return lines
