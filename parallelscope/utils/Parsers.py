"""
Module: Parsers
Command-line and YAML config parsing for the parallelization analyzer.
"""

import argparse
import logging
from typing import Any, Dict, List, Optional
import yaml
from parallelscope.Constants import CONFIG, CORES, DEFAULT_LOG_LEVEL, DEFAULT_TOP_TASKS, LOG_LEVEL, TOP, TRACE
from parallelscope.utils.Errors import UsageError

CORES_ERROR = "Error: Number of CPU cores must be a positive integer."
TOP_ERROR = "Error: Number of top tasks must be a non-negative integer."


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='parallelscope', description="Measure how well a build used parallelism")
    parser.add_argument(TRACE, nargs='?', help='Path to the build trace (.xml structured log export or .json)')
    parser.add_argument(CORES, nargs='?', help='Number of CPU cores the build machine had')
    parser.add_argument('--top', dest=TOP, help='Number of longest-running tasks to list')
    parser.add_argument('--config', dest=CONFIG, help='YAML file providing any of: trace, cores, top, log-level')
    parser.add_argument('--log-level', dest=LOG_LEVEL, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    return parser


def parse_config_file(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML config file.

    :param filepath: Path of the YAML file.
    :return: Mapping of config keys to values (empty for an empty file).
    :raises UsageError: If the file is missing, unparsable or not a mapping.
    """
    try:
        with open(filepath, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise UsageError(f"Error: Could not read config file '{filepath}': {e}") from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise UsageError(f"Error: Config file '{filepath}' must contain a mapping")
    return config


def parse_positive_int(value: Any, message: str = CORES_ERROR) -> int:
    if isinstance(value, bool):
        raise UsageError(message)
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise UsageError(message)
    if number <= 0:
        raise UsageError(message)
    return number


def _parse_top(value: Any) -> int:
    if isinstance(value, bool):
        raise UsageError(TOP_ERROR)
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise UsageError(TOP_ERROR)
    if number < 0:
        raise UsageError(TOP_ERROR)
    return number


def parse_arguments_with_config(args: List[str]) -> Dict[str, Any]:
    """
    Parse command-line arguments, merged over an optional YAML config.

    Command-line values win over config values.

    :param args: Arguments without the program name.
    :return: Dict with TRACE, CORES, TOP and LOG_LEVEL keys.
    :raises UsageError: On missing or invalid arguments.
    """
    namespace = vars(_build_parser().parse_args(args))

    settings: Dict[str, Any] = {}
    config_path: Optional[str] = namespace.get(CONFIG)
    if config_path:
        settings.update(parse_config_file(config_path))
        logging.info("Loaded config from %s", config_path)
    for key in (TRACE, CORES, TOP, LOG_LEVEL):
        if namespace.get(key) is not None:
            settings[key] = namespace[key]

    if not settings.get(TRACE) or settings.get(CORES) is None:
        raise UsageError("Error: A trace file and the number of CPU cores are required.")

    log_level = str(settings.get(LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise UsageError(f"Error: Unknown log level '{log_level}'")

    return {
        TRACE: str(settings[TRACE]),
        CORES: parse_positive_int(settings[CORES]),
        TOP: _parse_top(settings.get(TOP, DEFAULT_TOP_TASKS)),
        LOG_LEVEL: log_level,
    }
