from __future__ import annotations

import pytest

from lazyseq import InvalidInputError, LazySeq, Log, for_each_tap, for_each_tap_writer, with_each


def test_yields_elements_unchanged(recorder):
    assert list(for_each_tap([1, 2, 3], recorder)) == [1, 2, 3]
    assert recorder.calls == [1, 2, 3]


def test_action_runs_before_element_is_observed(recorder):
    for index, item in enumerate(for_each_tap(["a", "b", "c"], recorder)):
        assert recorder.calls == ["a", "b", "c"][: index + 1]
        assert recorder.calls[-1] == item


def test_none_action_is_noop():
    assert list(for_each_tap([1, 2, 3], None)) == [1, 2, 3]
    assert list(for_each_tap([1, 2, 3])) == [1, 2, 3]


def test_nothing_runs_until_pulled(recorder):
    seq = for_each_tap([1, 2, 3], recorder)
    assert recorder.calls == []
    assert isinstance(seq, LazySeq)


def test_abandoned_iteration_stops_actions(recorder):
    it = iter(for_each_tap([1, 2, 3, 4], recorder))
    assert next(it) == 1
    assert next(it) == 2
    del it
    assert recorder.calls == [1, 2]


def test_retraversal_runs_actions_again(recorder):
    seq = for_each_tap([1, 2], recorder)
    assert list(seq) == [1, 2]
    assert list(seq) == [1, 2]
    assert recorder.calls == [1, 2, 1, 2]


def test_none_source_rejected_at_call_time():
    with pytest.raises(InvalidInputError) as exc_info:
        for_each_tap(None, print)
    assert exc_info.value.argument == "source"


def test_action_exception_propagates_to_consumer():
    def boom(item: int) -> None:
        if item == 2:
            raise RuntimeError("boom")

    it = iter(for_each_tap([1, 2, 3], boom))
    assert next(it) == 1
    with pytest.raises(RuntimeError, match="boom"):
        next(it)


def test_with_each_is_for_each_tap():
    assert with_each is for_each_tap


def test_writer_logs_only_pulled_elements():
    log: Log[str] = Log()
    it = iter(for_each_tap_writer([1, None, 3], log))
    assert next(it) == 1
    assert next(it) is None
    assert log == ["1", "null"]


def test_writer_custom_entry():
    log: Log[str] = Log()
    assert list(for_each_tap_writer(["x", "y"], log, entry=lambda s: f"saw {s}")) == ["x", "y"]
    assert log == ["saw x", "saw y"]


def test_separate_calls_do_not_share_a_cursor(recorder):
    items = [1, 2, 3]
    first = iter(for_each_tap(items, recorder))
    second = iter(for_each_tap(items, recorder))
    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1
    assert next(first) == 3
    assert next(second) == 2
    assert recorder.calls == [1, 2, 1, 3, 2]
