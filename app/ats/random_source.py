from __future__ import annotations

import random
from typing import Any, MutableSequence, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` the engine draws from."""

    def random(self) -> float: ...

    def randrange(self, start: int, stop: int | None = ..., step: int = ...) -> int: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def default_random_source() -> RandomSource:
    return random.Random()


def pick_from_head(rng: RandomSource, items: Sequence[T], head: int) -> T:
    """Pick uniformly among the first ``head`` items."""
    return items[rng.randrange(min(len(items), head))]
