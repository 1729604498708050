"""markov_walker - bigram Markov chains over token sequences, with reproducible walks."""

from markov_walker.core import (
    END_TOKEN,
    InvalidArgumentError,
    ListNumberGenerator,
    MarkovChain,
    MarkovChainError,
    NoSuchElementError,
    NumberGenerator,
    OutOfRangeError,
    ProbabilityDistribution,
    RandomNumberGenerator,
    WalkIterator,
)

__all__ = [
    "END_TOKEN",
    "InvalidArgumentError",
    "ListNumberGenerator",
    "MarkovChain",
    "MarkovChainError",
    "NoSuchElementError",
    "NumberGenerator",
    "OutOfRangeError",
    "ProbabilityDistribution",
    "RandomNumberGenerator",
    "WalkIterator",
]

__version__ = "0.1.0"
