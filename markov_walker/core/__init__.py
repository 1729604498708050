"""
markov_walker.core

The chain and its building blocks:
 - ProbabilityDistribution: ordered frequency table with pick/index
 - MarkovChain and WalkIterator: training, querying and walking the chain
 - NumberGenerator implementations feeding the walk
 - the error types shared by all of the above
"""

from .errors import (
    MarkovChainError,
    InvalidArgumentError,
    NoSuchElementError,
    OutOfRangeError,
)
from .number_generator import NumberGenerator, ListNumberGenerator, RandomNumberGenerator
from .probability_distribution import ProbabilityDistribution
from .markov_chain import END_TOKEN, MarkovChain, WalkIterator

__all__ = [
    "MarkovChainError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "OutOfRangeError",
    "NumberGenerator",
    "ListNumberGenerator",
    "RandomNumberGenerator",
    "ProbabilityDistribution",
    "END_TOKEN",
    "MarkovChain",
    "WalkIterator",
]
