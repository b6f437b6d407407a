from typing import Iterable, List
from parallelscope.Constants import DEFAULT_TOP_TASKS
from parallelscope.models.Interval import Interval
from parallelscope.models.RankedTask import RankedTask


def top_longest(intervals: Iterable[Interval], k: int = DEFAULT_TOP_TASKS) -> List[RankedTask]:
    """
    The k longest intervals, longest first.

    Ties keep their input order (sorted() is stable, also with reverse=True).
    Fewer than k intervals returns all of them.
    """
    if k <= 0:
        return []
    ranked = [RankedTask(interval=i, duration_seconds=i.duration_seconds) for i in intervals]
    ranked = sorted(ranked, key=lambda r: r.interval.duration, reverse=True)
    return ranked[:k]
