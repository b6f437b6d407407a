"""Reader for the XML export of an MSBuild structured log.

The MSBuild Structured Log Viewer saves a build as nested elements:

    <Build StartTime="..." EndTime="...">
      <Project Name="..." StartTime="..." EndTime="...">
        <Target Name="...">
          <Task Name="Csc" StartTime="..." EndTime="...">
            <Message>...</Message>

Element tags are mapped onto NodeKind; unknown tags become NodeKind.OTHER
and are still descended into.
"""
import logging
import xml.etree.ElementTree as ET
from parallelscope.models.TraceNode import NodeKind, TraceNode
from parallelscope.utils.Errors import TraceReadError
from parallelscope.utils.TimeUtils import parse_timestamp

TAG_KINDS = {
    'Build': NodeKind.BUILD,
    'Project': NodeKind.PROJECT,
    'ProjectEvaluation': NodeKind.PROJECT,
    'Target': NodeKind.TARGET,
    'Task': NodeKind.TASK,
    'Property': NodeKind.PROPERTY,
    'PropertyReuse': NodeKind.PROPERTY_REUSE,
    'Item': NodeKind.ITEM,
    'AddItem': NodeKind.ITEM_GROUP,
    'RemoveItem': NodeKind.ITEM_GROUP,
    'ItemGroup': NodeKind.ITEM_GROUP,
    'Message': NodeKind.MESSAGE,
    'Warning': NodeKind.WARNING,
    'Error': NodeKind.ERROR,
    'Issue': NodeKind.ISSUE,
    'Schedule': NodeKind.SCHEDULE,
    'Folder': NodeKind.FOLDER,
}

# Specialised task elements written by the logger (e.g. <CscTask>, <MSBuildTask>)
TASK_SUFFIX = 'Task'


def _kind_of(tag: str) -> NodeKind:
    if tag in TAG_KINDS:
        return TAG_KINDS[tag]
    if tag.endswith(TASK_SUFFIX):
        return NodeKind.TASK
    return NodeKind.OTHER


def _to_node(element: ET.Element) -> TraceNode:
    attrs = element.attrib
    try:
        start = parse_timestamp(attrs.get('StartTime'))
        end = parse_timestamp(attrs.get('EndTime'))
    except ValueError as e:
        raise TraceReadError(f"<{element.tag}>: {e}") from e
    return TraceNode(
        kind=_kind_of(element.tag),
        name=attrs.get('Name') or attrs.get('Title') or '',
        start_time=start,
        end_time=end,
    )


def read_xml_log(filepath: str) -> TraceNode:
    """
    Decode a structured log XML file into a TraceNode tree.

    :param filepath: Path of the .xml export.
    :return: Root (Build) node.
    :raises TraceReadError: If the file cannot be read or parsed.
    """
    try:
        root_element = ET.parse(filepath).getroot()
    except (ET.ParseError, OSError) as e:
        raise TraceReadError(f"Failed to parse XML log {filepath}: {e}") from e

    root = _to_node(root_element)
    # iterative copy of the element tree
    stack = [(root_element, root)]
    count = 1
    while stack:
        element, node = stack.pop()
        for child_element in element:
            child = node.add_child(_to_node(child_element))
            stack.append((child_element, child))
            count += 1
    logging.info("Read %d nodes from XML log %s", count, filepath)
    return root
