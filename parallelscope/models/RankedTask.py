from dataclasses import dataclass
from parallelscope.models.Interval import Interval

@dataclass(frozen=True)
class RankedTask:
    """An interval paired with its duration, as listed in the longest-tasks report."""
    interval: Interval
    duration_seconds: float

    @property
    def name(self) -> str:
        return self.interval.name
