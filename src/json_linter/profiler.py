"""Performance profiler for the tokenize/parse/generate pipeline."""

import json
import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one pipeline stage."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float


class PerformanceProfiler:
    """
    Records duration, memory and throughput of pipeline stages.

    One PerformanceMetrics entry is appended to ``metrics_history`` per
    profiled stage.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.input_size = 0
        self.output_size = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling a stage.

        The yielded profiler's ``output_size`` may be set inside the block;
        metrics are recorded even when the block raises.

        Args:
            operation_name: Name of the stage being profiled
            input_size: Size of the stage input (characters or tokens)
        """
        self.start_profiling(operation_name, input_size)
        self.output_size = 0
        try:
            yield self
        finally:
            self.stop_profiling(self.output_size)

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """
        Start profiling a stage.

        Args:
            operation_name: Name of the stage
            input_size: Size of the stage input
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.start_memory = self._rss_mb()

        self.logger.debug(f"Started profiling: {operation_name}")

    def stop_profiling(self, output_size: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of the stage output

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.perf_counter()
        duration = end_time - self.start_time
        end_memory = self._rss_mb()

        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput,
        )

        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance - {self.current_operation}: "
                          f"{duration * 1000:.2f}ms, {throughput:.2f} MB/s, "
                          f"memory {self.start_memory:.1f} -> {end_memory:.1f} MB")

        self.current_operation = None
        self.start_time = None
        self.start_memory = None

        return metrics

    def _rss_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0

    def reset(self) -> None:
        self.metrics_history.clear()

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        peak_memory = max(max(m.memory_start_mb, m.memory_end_mb) for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "peak_memory_mb": peak_memory,
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "throughput": m.throughput_mbps,
                }
                for m in self.metrics_history
            ]
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export recorded metrics in the specified format.

        Args:
            format: Export format ("json", "csv", "summary")

        Returns:
            Formatted metrics string
        """
        if format == "json":
            return json.dumps([
                {
                    "operation": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "memory_start_mb": m.memory_start_mb,
                    "memory_end_mb": m.memory_end_mb,
                    "throughput_mbps": m.throughput_mbps,
                }
                for m in self.metrics_history
            ], indent=2)

        elif format == "csv":
            lines = ["operation,duration,input_size,output_size,memory_start_mb,memory_end_mb,throughput_mbps"]
            for m in self.metrics_history:
                lines.append(f"{m.operation_name},{m.duration},{m.input_size},{m.output_size},"
                             f"{m.memory_start_mb},{m.memory_end_mb},{m.throughput_mbps}")
            return "\n".join(lines)

        elif format == "summary":
            summary = self.get_performance_summary()
            if summary["total_operations"] == 0:
                return "Performance Summary: no operations recorded"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Total Duration: {summary['total_duration'] * 1000:.2f}ms",
                f"  Peak Memory: {summary['peak_memory_mb']:.1f} MB",
            ]
            for op in summary["operations"]:
                lines.append(f"  {op['name']}: {op['duration'] * 1000:.2f}ms "
                             f"({op['input_size']} in, {op['output_size']} out)")
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")
