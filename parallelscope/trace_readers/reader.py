import os
from parallelscope.Constants import BINLOG_EXTENSION, JSON_EXTENSION, XML_EXTENSION
from parallelscope.models.TraceNode import TraceNode
from parallelscope.trace_readers.json_tree import read_json_tree
from parallelscope.trace_readers.xml_log import read_xml_log
from parallelscope.utils.Errors import TraceReadError


def read_trace(filepath: str) -> TraceNode:
    """Decode a build trace file into its root node, choosing the reader by extension."""
    extension = os.path.splitext(filepath)[1].lower()
    if extension == XML_EXTENSION:
        return read_xml_log(filepath)
    if extension == JSON_EXTENSION:
        return read_json_tree(filepath)
    if extension == BINLOG_EXTENSION:
        raise TraceReadError(
            f"Binary log {filepath} is not supported directly; "
            "save it as XML with the MSBuild Structured Log Viewer first"
        )
    raise TraceReadError(f"Unrecognised trace format '{extension or filepath}'")
