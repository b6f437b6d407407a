import logging
import os
import sys
from typing import Any, Dict, List
from parallelscope.Constants import *
from parallelscope.models.ParallelizationResult import ParallelizationResult
from parallelscope.models.TaskExtractionResult import TaskExtractionResult
from parallelscope.scripts.TraceWalker import extract_tasks
from parallelscope.scripts.IntervalAggregator import compute_parallelization_metric, total_task_time
from parallelscope.scripts.ConcurrencyTimeline import build_timeline
from parallelscope.scripts.TopTasks import top_longest
from parallelscope.utils.Errors import DegenerateTraceError, ParallelscopeError, UsageError
from parallelscope.utils.Parsers import parse_arguments_with_config
from parallelscope.utils.ReportWriters import print_report
from parallelscope.utils.Usage import print_usage_exit_ParallelizationAnalyzer as print_usage_exit

EXTRACTION_ERROR = "Error: Could not extract required information from the trace file."


def analyze_extraction(extraction: TaskExtractionResult, core_count: int, top: int = DEFAULT_TOP_TASKS) -> ParallelizationResult:
    """
    Compute the parallelization metric, timeline and longest tasks from extracted tasks.

    :param extraction: Output of the trace walker.
    :param core_count: Number of cores; caps the timeline bars.
    :param top: How many longest-running tasks to keep.
    :return: ParallelizationResult.
    :raises DegenerateTraceError: If the build span is unresolved or empty, or no task was found.
    """
    span = extraction.span
    if span is None or not extraction.tasks:
        raise DegenerateTraceError(EXTRACTION_ERROR)
    if span.duration_seconds <= 0:
        logging.error("Build span %s - %s has no duration", span.start, span.end)
        raise DegenerateTraceError(EXTRACTION_ERROR)

    tasks = extraction.tasks
    metric = compute_parallelization_metric(tasks, span.duration)
    timeline = build_timeline(tasks, span.start, span.end, core_count)

    return ParallelizationResult(
        span=span,
        metric=metric,
        total_task_seconds=total_task_time(tasks).total_seconds(),
        build_seconds=span.duration_seconds,
        task_count=len(tasks),
        core_count=core_count,
        peak_concurrency=timeline.peak(),
        timeline=timeline,
        longest_tasks=top_longest(tasks, top),
    )


def analyze(trace_path: str, core_count: int, top: int = DEFAULT_TOP_TASKS) -> ParallelizationResult:
    """
    Analyze how well the build recorded in trace_path used parallelism.

    :param trace_path: Path of the trace file.
    :param core_count: Number of cores of the build machine.
    :param top: How many longest-running tasks to keep.
    :return: ParallelizationResult.
    :raises DegenerateTraceError: If the trace yields no usable span or tasks.
    """
    return analyze_extraction(extract_tasks(trace_path), core_count, top)


def main(arguments: Dict[str, Any]) -> int:
    """
    Run the analysis for parsed arguments and print the report.

    :param arguments: Argument dictionary from parse_arguments_with_config.
    :return: Process exit status, 0 on success.
    """
    trace: str = arguments[TRACE]
    cores: int = arguments[CORES]
    top: int = arguments.get(TOP, DEFAULT_TOP_TASKS)

    if not os.path.isfile(trace):
        print(f"Error: Trace file '{trace}' not found.")
        return 1

    try:
        result = analyze(trace, cores, top)
    except DegenerateTraceError as e:
        print(e)
        return 1
    except ParallelscopeError as e:
        print(f"An error occurred: {e}")
        return 1

    print_report(result, top)
    return 0


def run(args: List[str]) -> int:
    try:
        arguments = parse_arguments_with_config(args)
    except UsageError as e:
        print_usage_exit(str(e))

    logging.basicConfig(level=arguments[LOG_LEVEL], format='%(levelname)s %(name)s: %(message)s')
    try:
        return main(arguments)
    except Exception as e:
        logging.debug("Unhandled failure", exc_info=True)
        print(f"An error occurred: {e}")
        return 1


def cli() -> None:
    sys.exit(run(sys.argv[1:]))


# Main Script
if __name__ == '__main__':
    cli()
