from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Interval:
    """A single executed task: [start, end] plus its display name.

    Zero-length intervals are valid; they contribute no duration but are
    still active at their instant.
    """
    start: datetime
    end: datetime
    name: str

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_seconds(self) -> float:
        return self.duration.total_seconds()
