"""Stub random sources for deterministic simulation tests."""

from typing import Any, Iterable, List, MutableSequence


class FixedRandom:
    """Random source that always returns the same draw.

    ``randrange`` maps the fixed value onto the index range and ``shuffle``
    leaves the order untouched, so every decision is predictable.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value

    def randrange(self, stop: int) -> int:
        return min(int(self.value * stop), stop - 1)

    def shuffle(self, x: MutableSequence[Any]) -> None:
        pass


class SequenceRandom(FixedRandom):
    """Random source that replays ``values`` in order, cycling forever."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = list(values)
        if not self.values:
            raise ValueError("SequenceRandom needs at least one value")
        super().__init__(self.values[0])

    def random(self) -> float:
        self.value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return self.value
