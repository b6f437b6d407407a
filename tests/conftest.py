"""
Shared fixtures for the parallelscope tests.
"""

from datetime import datetime, timedelta
from typing import Optional

import pytest

from parallelscope.models.Interval import Interval
from parallelscope.models.TraceNode import NodeKind, TraceNode


BASE = datetime(2024, 3, 1, 9, 0, 0)


def at(seconds: float) -> datetime:
    """Timestamp `seconds` after 09:00:00 on the test day."""
    return BASE + timedelta(seconds=seconds)


def interval(name: str, start: float, end: float) -> Interval:
    return Interval(start=at(start), end=at(end), name=name)


def task(name: str, start: Optional[float], end: Optional[float]) -> TraceNode:
    return TraceNode(
        kind=NodeKind.TASK,
        name=name,
        start_time=at(start) if start is not None else None,
        end_time=at(end) if end is not None else None,
    )


@pytest.fixture
def build_tree() -> TraceNode:
    """
    Build 09:00:00-09:00:10 with two projects:
      A [0, 5] and B [3, 8] are complete tasks, Untimed has no end,
      the target/message/property nodes carry timestamps but are not tasks.
    """
    build = TraceNode(kind=NodeKind.BUILD, name='Build', start_time=at(0), end_time=at(10))
    p1 = build.add_child(TraceNode(kind=NodeKind.PROJECT, name='App.csproj', start_time=at(0), end_time=at(9)))
    t1 = p1.add_child(TraceNode(kind=NodeKind.TARGET, name='CoreCompile', start_time=at(0), end_time=at(6)))
    t1.add_child(task('A', 0, 5))
    t1.add_child(TraceNode(kind=NodeKind.MESSAGE, name='compiling', start_time=at(1), end_time=at(2)))
    p2 = build.add_child(TraceNode(kind=NodeKind.PROJECT, name='Lib.csproj', start_time=at(3), end_time=at(9)))
    p2.add_child(TraceNode(kind=NodeKind.PROPERTY, name='Configuration'))
    t2 = p2.add_child(TraceNode(kind=NodeKind.TARGET, name='Build', start_time=at(3), end_time=at(9)))
    t2.add_child(task('B', 3, 8))
    t2.add_child(task('Untimed', 4, None))
    return build


STRUCTURED_LOG_XML = """<?xml version="1.0" encoding="utf-8"?>
<Build Succeeded="true" StartTime="2024-03-01T09:00:00.0000000" EndTime="2024-03-01T09:00:10.0000000">
  <Folder Name="Environment">
    <Property Name="PATH">C:\\bin</Property>
  </Folder>
  <Project Name="App.csproj" StartTime="2024-03-01T09:00:00.0000000" EndTime="2024-03-01T09:00:09.0000000">
    <Target Name="CoreCompile" StartTime="2024-03-01T09:00:00.0000000" EndTime="2024-03-01T09:00:06.0000000">
      <Task Name="Csc" StartTime="2024-03-01T09:00:00.0000000" EndTime="2024-03-01T09:00:05.0000000">
        <Message>csc.exe /noconfig</Message>
      </Task>
      <Warning Text="CS0168" />
    </Target>
    <Target Name="CopyFiles" StartTime="2024-03-01T09:00:03.0000000" EndTime="2024-03-01T09:00:08.5000000">
      <CopyTask Name="Copy" StartTime="2024-03-01T09:00:03.0000000" EndTime="2024-03-01T09:00:08.0000000" />
      <Task Name="Touch" StartTime="0001-01-01T00:00:00.0000000" EndTime="2024-03-01T09:00:08.0000000" />
    </Target>
  </Project>
</Build>
"""


@pytest.fixture
def xml_trace(tmp_path):
    path = tmp_path / 'build.xml'
    path.write_text(STRUCTURED_LOG_XML)
    return str(path)
