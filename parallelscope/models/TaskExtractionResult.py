from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from parallelscope.models.Interval import Interval
from parallelscope.models.BuildSpan import BuildSpan

@dataclass
class TaskExtractionResult:
    """
    Represents the result of extracting task intervals from a build trace.
    On a read failure the build bounds are None and no tasks are present.
    """
    build_start: Optional[datetime]
    build_end: Optional[datetime]
    # Task intervals in discovery (depth-first) order
    tasks: List[Interval] = field(default_factory=list)

    @property
    def span(self) -> Optional[BuildSpan]:
        if self.build_start is None or self.build_end is None:
            return None
        return BuildSpan(start=self.build_start, end=self.build_end)

    @staticmethod
    def empty() -> 'TaskExtractionResult':
        return TaskExtractionResult(build_start=None, build_end=None, tasks=[])
