"""
Module: ReportWriters
This module renders the console report of a parallelization analysis:
the metric, a short summary, the concurrency timeline and the longest tasks.
"""

import sys
from typing import Iterable, List, Optional, TextIO
from parallelscope.Constants import TIMELINE_BAR_CHAR
from parallelscope.models.ParallelizationResult import ParallelizationResult
from parallelscope.models.RankedTask import RankedTask
from parallelscope.models.TimelineSample import TimelineSample
from parallelscope.utils.TimeUtils import format_time_of_day


def render_metric(metric: float) -> str:
    return f"Build Parallelization Metric: {metric:.1f}"


def render_summary(result: ParallelizationResult) -> List[str]:
    return [
        f"- Tasks analysed: {result.task_count}",
        f"- Total task time: {result.total_task_seconds:.1f} seconds",
        f"- Build time: {result.build_seconds:.1f} seconds",
        f"- Peak concurrency: {result.peak_concurrency} tasks ({result.core_count} cores)",
    ]


def render_timeline(samples: Iterable[TimelineSample]) -> List[str]:
    """
    One line per sample: the time of day, a bar as wide as the capped count
    and the uncapped count in brackets.
    """
    lines = [
        "Parallelization Timeline:",
        "Time     - Active Tasks",
        "-------------------------",
    ]
    for sample in samples:
        bar = TIMELINE_BAR_CHAR * sample.display_count
        lines.append(f"{format_time_of_day(sample.instant)} - {bar} ({sample.actual_count} tasks)")
    return lines


def render_longest_tasks(tasks: List[RankedTask], k: int) -> List[str]:
    lines = [
        f"Top {k} Longest-Running Tasks:",
        "-----------------------------",
    ]
    for task in tasks:
        lines.append(f"{task.name} - {task.duration_seconds:.1f} seconds")
    return lines


def render_report(result: ParallelizationResult, top: Optional[int] = None) -> str:
    """
    Render the full report.

    :param result: Analysis result.
    :param top: Heading count for the longest tasks list; defaults to the number listed.
    :return: Report text, newline terminated.
    """
    k = top if top is not None else len(result.longest_tasks)
    lines: List[str] = [render_metric(result.metric)]
    lines += render_summary(result)
    lines.append("")
    lines += render_timeline(result.timeline)
    lines.append("")
    lines += render_longest_tasks(result.longest_tasks, k)
    return "\n".join(lines) + "\n"


def print_report(result: ParallelizationResult, top: Optional[int] = None, stream: Optional[TextIO] = None) -> None:
    """Write the rendered report to stream (stdout by default)."""
    (stream or sys.stdout).write(render_report(result, top))
