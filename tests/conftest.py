from __future__ import annotations

from collections.abc import Iterator

import pytest


class Recorder:
    """Action that remembers every element it was called with."""

    def __init__(self) -> None:
        self.calls: list[object] = []

    def __call__(self, item: object) -> None:
        self.calls.append(item)


class OneShot:
    """Iterable that can only be traversed once, counting traversals."""

    def __init__(self, *items: object) -> None:
        self.items = items
        self.traversals = 0

    def __iter__(self) -> Iterator[object]:
        self.traversals += 1
        if self.traversals > 1:
            return iter(())
        return iter(self.items)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def one_shot() -> OneShot:
    return OneShot(1, 2)
