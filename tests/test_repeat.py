from __future__ import annotations

import pytest

from lazyseq import InvalidInputError, LazySeq, Log, for_each_tap, range_to, repeat, repeat_writer, repeated


def test_repeat_three_times():
    assert list(repeat([1, 2], 3)) == [1, 2, 1, 2, 1, 2]


@pytest.mark.parametrize("times", [0, -1, -100])
def test_non_positive_times_is_empty(times):
    assert list(repeat([1, 2], times)) == []


def test_empty_source_is_empty():
    assert list(repeat([], 5)) == []


def test_single_pass_equals_source():
    assert list(repeat("abc", 1)) == ["a", "b", "c"]


def test_each_pass_is_a_fresh_traversal(recorder):
    source = for_each_tap([1, 2], recorder)
    assert list(repeat(source, 2)) == [1, 2, 1, 2]
    assert recorder.calls == [1, 2, 1, 2]


def test_works_over_ranges():
    assert list(repeat(range_to(3, 1), 2)) == [3, 2, 1, 3, 2, 1]


def test_one_shot_source_repeats_once(one_shot):
    assert list(repeat(one_shot, 3)) == [1, 2]
    assert one_shot.traversals == 3


def test_lazy_and_abandonable(recorder):
    seq = repeat(for_each_tap([1, 2, 3], recorder), 1000)
    assert recorder.calls == []
    it = iter(seq)
    assert [next(it) for _ in range(4)] == [1, 2, 3, 1]
    assert recorder.calls == [1, 2, 3, 1]


def test_restartable():
    seq = repeat([1, 2], 2)
    assert isinstance(seq, LazySeq)
    assert seq.to_list() == seq.to_list() == [1, 2, 1, 2]


def test_none_source_rejected():
    with pytest.raises(InvalidInputError):
        repeat(None, 2)


def test_non_int_times_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        repeat([1], "2")
    assert exc_info.value.argument == "times"


def test_repeated_is_repeat():
    assert repeated is repeat


def test_writer_logs_each_started_pass():
    log: Log[str] = Log()
    assert list(repeat_writer(["a"], 3, log)) == ["a", "a", "a"]
    assert log == ["repeat: pass 1/3", "repeat: pass 2/3", "repeat: pass 3/3"]


def test_writer_logs_nothing_for_zero_times():
    log: Log[str] = Log()
    assert list(repeat_writer([1, 2], 0, log)) == []
    assert log == []


def test_separate_calls_do_not_share_a_cursor():
    items = [1, 2]
    first = iter(repeat(items, 2))
    second = iter(repeat(items, 2))
    assert [next(first) for _ in range(3)] == [1, 2, 1]
    assert next(second) == 1
    assert next(first) == 2
    assert list(second) == [2, 1, 2]
    assert list(first) == []
