from dataclasses import dataclass
from datetime import datetime

@dataclass(frozen=True)
class TimelineSample:
    """
    Concurrency at one timeline tick.
    display_count is actual_count capped at the core count.
    """
    instant: datetime
    display_count: int
    actual_count: int
