"""Reader for a build trace stored as a nested JSON tree.

    {"kind": "build", "startTime": "...", "endTime": "...",
     "children": [{"kind": "task", "name": "Csc", "startTime": "...", ...}]}

Both camelCase and snake_case keys are accepted.
"""
import json
import logging
from typing import Any, Dict, List, Tuple
from parallelscope.models.TraceNode import NodeKind, TraceNode
from parallelscope.utils.Errors import TraceReadError
from parallelscope.utils.TimeUtils import parse_timestamp


def _field(data: Dict[str, Any], *keys: str):
    for key in keys:
        if key in data:
            return data[key]
    return None


def _to_node(data: Any) -> Tuple[TraceNode, List[Any]]:
    if not isinstance(data, dict):
        raise TraceReadError(f"Expected a JSON object for a trace node, got {type(data).__name__}")
    try:
        start = parse_timestamp(_field(data, 'startTime', 'start_time', 'start'))
        end = parse_timestamp(_field(data, 'endTime', 'end_time', 'end'))
    except (ValueError, AttributeError) as e:
        raise TraceReadError(f"Invalid node timestamps: {e}") from e
    kind = _field(data, 'kind', 'type')
    if kind is not None and not isinstance(kind, str):
        raise TraceReadError(f"Node kind must be a string, got {type(kind).__name__}")
    children = _field(data, 'children') or []
    if not isinstance(children, list):
        raise TraceReadError("'children' must be a list")
    return TraceNode(
        kind=NodeKind.parse(kind),
        name=str(_field(data, 'name') or ''),
        start_time=start,
        end_time=end,
    ), children


def parse_json_tree(data: Any) -> TraceNode:
    """Build a TraceNode tree from already-decoded JSON data."""
    root, child_data = _to_node(data)
    stack = [(root, child_data)]
    while stack:
        node, pending = stack.pop()
        for item in pending:
            child, grandchildren = _to_node(item)
            node.add_child(child)
            stack.append((child, grandchildren))
    return root


def read_json_tree(filepath: str) -> TraceNode:
    """
    Decode a JSON trace file into a TraceNode tree.

    :raises TraceReadError: If the file cannot be read or is not a valid tree.
    """
    try:
        with open(filepath, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError, RecursionError) as e:
        raise TraceReadError(f"Failed to parse JSON trace {filepath}: {e}") from e
    root = parse_json_tree(data)
    logging.info("Read JSON trace %s", filepath)
    return root
