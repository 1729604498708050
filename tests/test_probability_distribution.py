# tests/test_probability_distribution.py
# pick/index behaviour of ProbabilityDistribution

import pytest

from markov_walker.core.errors import (
    InvalidArgumentError,
    NoSuchElementError,
    OutOfRangeError,
)
from markov_walker.core.number_generator import ListNumberGenerator
from markov_walker.core.probability_distribution import ProbabilityDistribution


@pytest.fixture
def dist():
    d = ProbabilityDistribution()
    # insertion order differs from key order on purpose
    for w in ["table", "banana", "chair", "banana"]:
        d.record(w)
    return d


def test_record_counts_and_total(dist):
    assert dist.total == 4
    assert dist.count("banana") == 2
    assert dist.count("pear") == 0
    assert len(dist) == 3
    assert "chair" in dist and "pear" not in dist


def test_records_are_in_key_order(dist):
    assert dist.get_records() == (("banana", 2), ("chair", 1), ("table", 1))
    assert list(dist) == ["banana", "chair", "table"]


def test_record_none_rejected():
    d = ProbabilityDistribution()
    with pytest.raises(InvalidArgumentError):
        d.record(None)
    assert d.total == 0


def test_pick_by_cumulative_range(dist):
    assert [dist.pick(i) for i in range(4)] == ["banana", "banana", "chair", "table"]


@pytest.mark.parametrize("bad", [-1, 4, 100])
def test_pick_index_out_of_range(dist, bad):
    with pytest.raises(OutOfRangeError):
        dist.pick(bad)


def test_pick_empty_distribution():
    d = ProbabilityDistribution()
    with pytest.raises(NoSuchElementError):
        d.pick(0)


def test_pick_empty_does_not_consume_generator():
    d = ProbabilityDistribution()
    gen = ListNumberGenerator([0])
    with pytest.raises(NoSuchElementError):
        d.pick(gen)
    assert len(gen) == 1


def test_pick_with_generator(dist):
    gen = ListNumberGenerator([3, 1])
    assert dist.pick(gen) == "table"
    assert dist.pick(gen) == "banana"


def test_pick_generator_errors_propagate(dist):
    with pytest.raises(InvalidArgumentError):
        dist.pick(ListNumberGenerator([4]))  # does not fit bound 4
    with pytest.raises(NoSuchElementError):
        dist.pick(ListNumberGenerator([]))


def test_index_is_cumulative_count_before(dist):
    assert dist.index("banana") == 0
    assert dist.index("chair") == 2
    assert dist.index("table") == 3


def test_index_absent_item(dist):
    with pytest.raises(NoSuchElementError):
        dist.index("pear")


def test_pick_inverts_index(dist):
    for item in dist:
        assert dist.pick(dist.index(item)) == item


def test_ints_sort_numerically():
    d = ProbabilityDistribution()
    for n in [10, 2, 2, 1]:
        d.record(n)
    assert d.get_records() == ((1, 1), (2, 2), (10, 1))
    assert d.index(10) == 3


def test_rendering(dist):
    assert str(dist) == '{ "banana":2  "chair":1  "table":1 }'
    assert str(ProbabilityDistribution()) == "{ }"


def test_from_counts_roundtrip(dist):
    rebuilt = ProbabilityDistribution.from_counts(dist.to_dict())
    assert rebuilt == dist
    assert rebuilt.total == dist.total


@pytest.mark.parametrize("counts", [{"a": 0}, {"a": -1}, {"a": 1.5}, {"a": True}])
def test_from_counts_rejects_bad_counts(counts):
    with pytest.raises(InvalidArgumentError):
        ProbabilityDistribution.from_counts(counts)


@pytest.mark.parametrize("bad", [0.5, "1", None, object()])
def test_pick_rejects_non_index_non_generator(dist, bad):
    with pytest.raises(InvalidArgumentError):
        dist.pick(bad)


def test_records_refresh_after_record(dist):
    assert dist.index("table") == 3
    dist.record("apple")
    assert dist.get_records()[0] == ("apple", 1)
    assert dist.index("table") == 4
    assert dist.pick(0) == "apple"
    dist.record("apple")
    assert dist.count("apple") == 2
    assert dist.get_records()[0] == ("apple", 2)
