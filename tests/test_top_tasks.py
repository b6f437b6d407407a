from parallelscope.scripts.TopTasks import top_longest

from conftest import interval


class TestTopLongest:

    def test_stable_descending(self):
        durations = [5, 5, 3, 5, 1]
        tasks = [interval(f't{n}', 0, d) for n, d in enumerate(durations)]
        ranked = top_longest(tasks, 5)
        assert [r.duration_seconds for r in ranked] == [5, 5, 5, 3, 1]
        assert [r.name for r in ranked] == ['t0', 't1', 't3', 't2', 't4']

    def test_truncates_to_k(self):
        tasks = [interval(f't{d}', 0, d) for d in range(1, 9)]
        ranked = top_longest(tasks)
        assert [r.name for r in ranked] == ['t8', 't7', 't6', 't5', 't4']

    def test_fewer_than_k(self):
        ranked = top_longest([interval('A', 0, 5), interval('B', 3, 8)], 5)
        assert [r.name for r in ranked] == ['A', 'B']
        assert [r.duration_seconds for r in ranked] == [5.0, 5.0]

    def test_empty_and_non_positive_k(self):
        assert top_longest([], 5) == []
        assert top_longest([interval('A', 0, 1)], 0) == []
