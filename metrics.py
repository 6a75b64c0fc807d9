"""Simple timing helpers for comparing the MSF algorithms."""
import time
from typing import Dict, Optional


class Metrics:
    def __init__(self):
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.phase_times: Dict[str, float] = {}
        self._phase_start: Dict[str, float] = {}

    def start(self):
        self.start_time = time.perf_counter()

    def stop(self):
        self.end_time = time.perf_counter()

    def start_phase(self, name: str):
        self._phase_start[name] = time.perf_counter()

    def end_phase(self, name: str):
        elapsed = time.perf_counter() - self._phase_start.pop(name)
        self.phase_times[name] = self.phase_times.get(name, 0.0) + elapsed

    def timed(self, name: str, func, *args, **kwargs):
        """Run func(*args, **kwargs) as phase ``name`` and return its result."""
        self.start_phase(name)
        try:
            return func(*args, **kwargs)
        finally:
            self.end_phase(name)

    def summary(self):
        total = None
        if self.start_time is not None and self.end_time is not None:
            total = self.end_time - self.start_time
        return {
            'total_time': total,
            'phases': dict(self.phase_times),
        }
