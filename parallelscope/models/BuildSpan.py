from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class BuildSpan:
    """Wall-clock start and end of the whole build (taken from the root node)."""
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()
