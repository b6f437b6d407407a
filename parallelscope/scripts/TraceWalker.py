"""
Module: TraceWalker
Walks a decoded build trace and extracts the executed tasks as flat intervals.
"""

import logging
from typing import Callable, Iterator, List
from parallelscope.models.Interval import Interval
from parallelscope.models.TaskExtractionResult import TaskExtractionResult
from parallelscope.models.TraceNode import NodeKind, TraceNode
from parallelscope.trace_readers.reader import read_trace
from parallelscope.utils.Errors import TraceReadError
from parallelscope.utils.TimeUtils import is_set


def walk(root: TraceNode) -> Iterator[TraceNode]:
    """Depth-first, pre-order traversal of root and all of its descendants."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # reversed so children come out in document order
        stack.extend(reversed(node.children))


def extract_intervals(root: TraceNode) -> List[Interval]:
    """
    Collect an Interval for every task node with both timestamps recorded.

    Nodes of any other kind (project, target, message, ...) are visited but
    contribute nothing.
    """
    intervals: List[Interval] = []
    for node in walk(root):
        if node.kind is not NodeKind.TASK:
            continue
        if not (is_set(node.start_time) and is_set(node.end_time)):
            continue
        if node.end_time < node.start_time:
            logging.warning("Skipping task %s: ends before it starts", node.name)
            continue
        intervals.append(Interval(start=node.start_time, end=node.end_time, name=node.name))
    return intervals


def extract_tasks(trace_path: str, reader: Callable[[str], TraceNode] = read_trace) -> TaskExtractionResult:
    """
    Read a trace file and extract the build span and task intervals.

    :param trace_path: Path of the trace file.
    :param reader: Function decoding the file into a TraceNode tree.
    :return: TaskExtractionResult; empty (no span, no tasks) if the trace cannot be read.
    """
    try:
        build = reader(trace_path)
    except TraceReadError as e:
        logging.error("Error parsing trace %s: %s", trace_path, e)
        return TaskExtractionResult.empty()

    build_start = build.start_time if is_set(build.start_time) else None
    build_end = build.end_time if is_set(build.end_time) else None
    tasks = extract_intervals(build)
    logging.info("Extracted %d tasks from %s", len(tasks), trace_path)
    return TaskExtractionResult(build_start=build_start, build_end=build_end, tasks=tasks)
