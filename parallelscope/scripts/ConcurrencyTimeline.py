"""
Module: ConcurrencyTimeline
Per-second count of running tasks over the build span.

Counting uses a sweep over the sorted start and end offsets: at tick t the
active count is #(start <= t) - #(end < t). Both interval ends are inclusive,
so a task ending exactly when another starts is counted as running at that
instant alongside it.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator, Sequence, Tuple
import numpy as np
from parallelscope.Constants import TIMELINE_STEP_SECONDS
from parallelscope.models.Interval import Interval
from parallelscope.models.TimelineSample import TimelineSample
from parallelscope.utils.TimeUtils import to_microseconds

_STEP_US = TIMELINE_STEP_SECONDS * 1_000_000


@dataclass(frozen=True)
class ConcurrencyTimeline:
    """Lazy, restartable sequence of TimelineSample from build start to build end inclusive."""
    intervals: Tuple[Interval, ...]
    build_start: datetime
    build_end: datetime
    core_count: int

    def __post_init__(self):
        if isinstance(self.core_count, bool) or not isinstance(self.core_count, (int, np.integer)) or self.core_count <= 0:
            raise ValueError("core_count must be a positive integer")

    def __len__(self) -> int:
        span_us = to_microseconds(self.build_end - self.build_start)
        if span_us < 0:
            return 0
        return span_us // _STEP_US + 1

    def _offsets(self) -> Tuple[np.ndarray, np.ndarray]:
        # Intervals ending before they start can never be active
        valid = [i for i in self.intervals if i.end >= i.start]
        starts = np.sort(np.array([to_microseconds(i.start - self.build_start) for i in valid], dtype=np.int64))
        ends = np.sort(np.array([to_microseconds(i.end - self.build_start) for i in valid], dtype=np.int64))
        return starts, ends

    def actual_counts(self) -> np.ndarray:
        """Uncapped active-task count for every tick."""
        starts, ends = self._offsets()
        ticks = np.arange(len(self), dtype=np.int64) * _STEP_US
        started = np.searchsorted(starts, ticks, side='right')
        finished = np.searchsorted(ends, ticks, side='left')
        return started - finished

    def __iter__(self) -> Iterator[TimelineSample]:
        counts = self.actual_counts()
        for i, actual in enumerate(counts):
            actual = int(actual)
            yield TimelineSample(
                instant=self.build_start + timedelta(seconds=i * TIMELINE_STEP_SECONDS),
                display_count=min(actual, int(self.core_count)),
                actual_count=actual,
            )

    def peak(self) -> int:
        counts = self.actual_counts()
        return int(counts.max()) if counts.size else 0


def build_timeline(intervals: Sequence[Interval], build_start: datetime, build_end: datetime, core_count: int) -> ConcurrencyTimeline:
    """
    Build the concurrency timeline for a set of task intervals.

    :param intervals: Task intervals (not required to lie inside the build span).
    :param build_start: First tick.
    :param build_end: Last tick is the last whole second not after build_end.
    :param core_count: Cap applied to display_count.
    :return: ConcurrencyTimeline; iterate it to get the samples.
    """
    return ConcurrencyTimeline(
        intervals=tuple(intervals),
        build_start=build_start,
        build_end=build_end,
        core_count=core_count,
    )

