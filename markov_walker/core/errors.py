# errors.py - exception types raised by the chain, its distributions and number generators


class MarkovChainError(Exception):
    """Base class for every error raised by markov_walker."""


class InvalidArgumentError(MarkovChainError, ValueError):
    """A required input was None, a bound was non-positive, or a value did not fit."""


class NoSuchElementError(MarkovChainError, LookupError):
    """Nothing left to produce: empty distribution, finished walk, exhausted replay list."""


class OutOfRangeError(MarkovChainError, IndexError):
    """An explicit index fell outside [0, total) or a walk cannot be reconstructed."""
