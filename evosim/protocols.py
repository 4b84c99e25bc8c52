"""Protocol-based abstractions for the simulation.

Systems depend on the capabilities they use rather than on concrete
classes. ``random.Random`` satisfies ``RandomSource`` structurally, so the
default is simply a (seeded or unseeded) ``random.Random`` instance, while
tests can inject stubs that return a fixed sequence.
"""

from typing import Any, MutableSequence, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Source of every probabilistic decision in the simulation.

    Examples:
        random.Random(42) - deterministic seeded runs
        random.Random() - fresh randomness per run
        tests/fakes FixedRandom - always returns the same draw
    """

    def random(self) -> float:
        """Return a uniform float in [0, 1)."""
        ...

    def randrange(self, stop: int) -> int:
        """Return a uniform index in [0, stop)."""
        ...

    def shuffle(self, x: MutableSequence[Any]) -> None:
        """Shuffle ``x`` in place."""
        ...
