import sys

USAGE = "Usage: python -m parallelscope.scripts.ParallelizationAnalyzer <path_to_trace_file> <number_of_cpu_cores> [--top N] [--config file.yaml] [--log-level LEVEL]"


def print_usage_exit_ParallelizationAnalyzer(message: str = None) -> None:
    """Print the analyzer usage (and an optional error message), then exit with status 1."""
    if message:
        print(message)
    print(USAGE)
    sys.exit(1)
