# Config / argument keys
TRACE = "trace"
CORES = "cores"
TOP = "top"
CONFIG = "config"
LOG_LEVEL = "log-level"

# Defaults
DEFAULT_TOP_TASKS = 5
DEFAULT_LOG_LEVEL = "WARNING"

# Timeline
TIMELINE_STEP_SECONDS = 1
TIMELINE_BAR_CHAR = "*"
TIME_FORMAT = "%H:%M:%S"

# Trace formats
XML_EXTENSION = ".xml"
JSON_EXTENSION = ".json"
BINLOG_EXTENSION = ".binlog"
