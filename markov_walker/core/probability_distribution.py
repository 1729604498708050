# probability_distribution.py
# Frequency table with weighted sampling by index and the exact inverse lookup.
#
# Items are always walked in ascending key order. Each item owns the
# cumulative range [before, before + count) of the index space [0, total),
# so pick(i) and index(item) agree no matter how the counts were inserted.

from __future__ import annotations

from collections import Counter
from typing import Generic, Iterator, Mapping, Optional, Tuple, TypeVar, Union

from markov_walker.core.errors import (
    InvalidArgumentError,
    NoSuchElementError,
    OutOfRangeError,
)
from markov_walker.core.number_generator import NumberGenerator

T = TypeVar("T")
Record = Tuple[T, int]


class ProbabilityDistribution(Generic[T]):
    """
    Ordered frequency counter.

    record() is the only mutator. total always equals the number of
    record() calls, and every stored item has a count of at least 1.
    """

    __slots__ = ("_counts", "_total", "_sorted")

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._total: int = 0
        # sorted records, rebuilt lazily after a mutation
        self._sorted: Optional[Tuple[Record, ...]] = None

    @classmethod
    def from_counts(cls, counts: Mapping[T, int]) -> "ProbabilityDistribution[T]":
        """Rebuild a distribution from an item -> count mapping (used when loading)."""
        dist = cls()
        for item, count in counts.items():
            if item is None:
                raise InvalidArgumentError("item cannot be None")
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise InvalidArgumentError(f"count for {item!r} must be a positive int, got {count!r}")
            dist._counts[item] = count
            dist._total += count
        dist._sorted = None
        return dist

    # training -----------------------------------------------------------
    def record(self, item: T) -> None:
        """Add one observation of item."""
        if item is None:
            raise InvalidArgumentError("item cannot be None")
        self._counts[item] += 1
        self._total += 1
        self._sorted = None

    # sampling -----------------------------------------------------------
    def pick(self, source: Union[int, NumberGenerator]) -> T:
        """
        Choose an item.

        pick(index) returns the item whose cumulative range contains index.
        pick(generator) draws one index bounded by total and delegates.
        Raises NoSuchElementError on an empty distribution and
        OutOfRangeError for an index outside [0, total).
        """
        if not self._counts:
            raise NoSuchElementError("cannot pick from an empty distribution")
        if isinstance(source, int) and not isinstance(source, bool):
            return self._pick_index(source)
        if not isinstance(source, NumberGenerator):
            raise InvalidArgumentError(f"pick needs an index or a number generator, got {source!r}")
        return self._pick_index(source.next_int(self._total))

    def _pick_index(self, index: int) -> T:
        if index < 0 or index >= self._total:
            raise OutOfRangeError(f"index {index} outside [0, {self._total})")
        upper = 0
        for item, count in self.get_records():
            upper += count
            if index < upper:
                return item
        # unreachable while total matches the counts
        raise OutOfRangeError(f"index {index} outside [0, {self._total})")

    def index(self, item: T) -> int:
        """Smallest i with pick(i) == item: the counts of every item sorting before it."""
        if item not in self._counts:
            raise NoSuchElementError(f"{item!r} was never recorded")
        before = 0
        for key, count in self.get_records():
            if key == item:
                return before
            before += count
        raise NoSuchElementError(f"{item!r} was never recorded")

    # introspection ------------------------------------------------------
    def get_records(self) -> Tuple[Record, ...]:
        """Ordered (item, count) pairs. Read only."""
        if self._sorted is None:
            self._sorted = tuple(sorted(self._counts.items(), key=lambda kv: kv[0]))
        return self._sorted

    def count(self, item: T) -> int:
        return self._counts.get(item, 0)

    @property
    def total(self) -> int:
        return self._total

    def to_dict(self) -> dict:
        return dict(self.get_records())

    def __contains__(self, item: object) -> bool:
        return item in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[T]:
        return iter(item for item, _ in self.get_records())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProbabilityDistribution):
            return NotImplemented
        return self._counts == other._counts

    def __str__(self) -> str:
        if not self._counts:
            return "{ }"
        body = "  ".join(f'"{item}":{count}' for item, count in self.get_records())
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"ProbabilityDistribution({self.to_dict()!r})"
