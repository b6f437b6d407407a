from dataclasses import dataclass
from typing import Iterable, List
from parallelscope.models.BuildSpan import BuildSpan
from parallelscope.models.RankedTask import RankedTask
from parallelscope.models.TimelineSample import TimelineSample

@dataclass
class ParallelizationResult:
    """
    Represents the result of a parallelization analysis of one build.
    """
    span: BuildSpan
    metric: float  # summed task time / build wall time
    total_task_seconds: float
    build_seconds: float
    task_count: int
    core_count: int
    peak_concurrency: int
    # Lazily evaluated, iterable any number of times
    timeline: Iterable[TimelineSample]
    longest_tasks: List[RankedTask]
