# number_generator.py
# Sources of sampling indices for walks through a MarkovChain.
# A walk only ever asks for "the next int in [0, bound)", so the whole
# capability is one method. The replay form makes walks reproducible in tests.

from __future__ import annotations

import random
from collections import deque
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from markov_walker.core.errors import InvalidArgumentError, NoSuchElementError


@runtime_checkable
class NumberGenerator(Protocol):
    """Anything that can hand out the next sampling index."""

    def next_int(self, bound: int) -> int:
        """
        Return an int in [0, bound).
        Raises InvalidArgumentError for a non-positive bound.
        """
        ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise InvalidArgumentError(f"bound must be positive, got {bound}")


class ListNumberGenerator:
    """
    Replays a fixed list of ints front to back.

    Each call consumes one value. Fails with NoSuchElementError once the
    list is used up, and with InvalidArgumentError when the stored value
    does not fit the requested bound.
    """

    def __init__(self, values: Iterable[int]) -> None:
        if values is None:
            raise InvalidArgumentError("values cannot be None")
        items = list(values)
        for v in items:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidArgumentError(f"replay values must be ints, got {v!r}")
        self._values = deque(items)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        if not self._values:
            raise NoSuchElementError("replay list exhausted")
        value = self._values.popleft()
        if value < 0 or value >= bound:
            raise InvalidArgumentError(f"replayed value {value} does not fit bound {bound}")
        return value

    def remaining(self) -> List[int]:
        """Values not yet consumed (copy)."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ListNumberGenerator({list(self._values)!r})"


class RandomNumberGenerator:
    """Uniform ints in [0, bound). Pass a seed for repeatable runs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return f"RandomNumberGenerator(seed={self.seed!r})"
