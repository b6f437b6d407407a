import json
from datetime import datetime

import pytest

from parallelscope.models.TraceNode import NodeKind
from parallelscope.scripts.TraceWalker import walk
from parallelscope.trace_readers.json_tree import parse_json_tree
from parallelscope.trace_readers.reader import read_trace
from parallelscope.utils.Errors import TraceReadError
from parallelscope.utils.TimeUtils import parse_timestamp


class TestParseTimestamp:

    def test_seven_fraction_digits(self):
        assert parse_timestamp('2024-03-01T09:00:01.1234567') == datetime(2024, 3, 1, 9, 0, 1, 123456)

    def test_offset_keeps_wall_time(self):
        assert parse_timestamp('2024-03-01T09:00:01.5+02:00') == datetime(2024, 3, 1, 9, 0, 1, 500000)
        assert parse_timestamp('2024-03-01T09:00:01Z') == datetime(2024, 3, 1, 9, 0, 1)

    @pytest.mark.parametrize('value', [None, '', '  ', '0001-01-01T00:00:00', '0001-01-01T00:00:00.0000000'])
    def test_unset(self, value):
        assert parse_timestamp(value) is None

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_timestamp('yesterday')


class TestXmlLog:

    def test_structure(self, xml_trace):
        root = read_trace(xml_trace)
        assert root.kind is NodeKind.BUILD
        assert root.start_time == datetime(2024, 3, 1, 9, 0, 0)
        assert root.end_time == datetime(2024, 3, 1, 9, 0, 10)
        kinds = [n.kind for n in walk(root)]
        assert kinds == [
            NodeKind.BUILD, NodeKind.FOLDER, NodeKind.PROPERTY, NodeKind.PROJECT,
            NodeKind.TARGET, NodeKind.TASK, NodeKind.MESSAGE, NodeKind.WARNING,
            NodeKind.TARGET, NodeKind.TASK, NodeKind.TASK,
        ]

    def test_task_names_and_sentinel(self, xml_trace):
        tasks = [n for n in walk(read_trace(xml_trace)) if n.kind is NodeKind.TASK]
        assert [t.name for t in tasks] == ['Csc', 'Copy', 'Touch']
        assert tasks[2].start_time is None

    def test_malformed(self, tmp_path):
        path = tmp_path / 'broken.xml'
        path.write_text('<Build StartTime="2024-03-01T09:00:00"><Project>')
        with pytest.raises(TraceReadError):
            read_trace(str(path))

    def test_bad_timestamp(self, tmp_path):
        path = tmp_path / 'bad.xml'
        path.write_text('<Build StartTime="soon" />')
        with pytest.raises(TraceReadError):
            read_trace(str(path))


class TestJsonTree:

    def test_nested(self, tmp_path):
        data = {
            'kind': 'Build', 'startTime': '2024-03-01T09:00:00', 'endTime': '2024-03-01T09:00:10',
            'children': [
                {'kind': 'ItemGroup', 'children': [{'kind': 'item', 'name': 'a.cs'}]},
                {'type': 'task', 'name': 'Csc', 'start_time': '2024-03-01T09:00:01', 'end_time': '2024-03-01T09:00:04'},
                {'kind': 'mystery'},
            ],
        }
        path = tmp_path / 'trace.json'
        path.write_text(json.dumps(data))
        root = read_trace(str(path))
        assert [n.kind for n in walk(root)] == [
            NodeKind.BUILD, NodeKind.ITEM_GROUP, NodeKind.ITEM, NodeKind.TASK, NodeKind.OTHER,
        ]
        assert root.children[1].end_time == datetime(2024, 3, 1, 9, 0, 4)

    @pytest.mark.parametrize('data', [
        [1, 2],
        {'kind': 'build', 'children': 'none'},
        {'kind': 'build', 'startTime': 7},
        {'kind': 5},
        {'kind': 'build', 'children': [{'kind': ['task']}]},
        {'type': True},
    ])
    def test_invalid_tree(self, data):
        with pytest.raises(TraceReadError):
            parse_json_tree(data)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'trace.json'
        path.write_text('{"kind": ')
        with pytest.raises(TraceReadError):
            read_trace(str(path))

    def test_too_deeply_nested(self, tmp_path):
        depth = 100000
        path = tmp_path / 'deep.json'
        path.write_text('{"children": [' * depth + '{}' + ']}' * depth)
        with pytest.raises(TraceReadError):
            read_trace(str(path))


class TestReadTrace:

    @pytest.mark.parametrize('name', ['build.binlog', 'build.txt', 'build'])
    def test_unsupported_format(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(b'\x1f\x8b')
        with pytest.raises(TraceReadError):
            read_trace(str(path))


class TestNodeKindParse:

    @pytest.mark.parametrize('value, kind', [
        ('Task', NodeKind.TASK),
        ('ItemGroup', NodeKind.ITEM_GROUP),
        ('  ', NodeKind.OTHER),
        (None, NodeKind.OTHER),
        (5, NodeKind.OTHER),
        (['task'], NodeKind.OTHER),
    ])
    def test_lenient(self, value, kind):
        assert NodeKind.parse(value) is kind
