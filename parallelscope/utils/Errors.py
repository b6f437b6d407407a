"""
Module: Errors
Exception types raised while reading and analyzing a build trace.
"""


class ParallelscopeError(Exception):
    """Base class for all analyzer failures."""


class UsageError(ParallelscopeError):
    """Missing or invalid command-line / config arguments."""


class TraceReadError(ParallelscopeError):
    """The trace file could not be decoded into a node tree."""


class DegenerateTraceError(ParallelscopeError):
    """The trace decoded but holds no usable build span or tasks."""
