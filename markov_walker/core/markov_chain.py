# markov_chain.py
# First-order Markov chain over string tokens: start distribution, one
# successor distribution per token, and the walk that samples from them.
#
# Illustrative chain, trained on
#   ["a", "table", "and", "a", "chair"]
#   ["a", "banana", "!", "and", "a", "banana", "?"]
#
#   startTokens: { "a":2 }
#   bigramFrequencies:
#   "!":      { "and":1 }
#   "?":      { "<END>":1 }
#   "a":      { "banana":2  "chair":1  "table":1 }
#   "and":    { "a":2 }
#   "banana": { "!":1  "?":1 }
#   "chair":  { "<END>":1 }
#   "table":  { "and":1 }
#
# The choices 0 2 0 walk "a" (start), "chair" (0-1 banana, 2 chair, 3 table),
# then <END>.

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from markov_walker.core.errors import (
    InvalidArgumentError,
    NoSuchElementError,
    OutOfRangeError,
)
from markov_walker.core.number_generator import NumberGenerator, RandomNumberGenerator
from markov_walker.core.probability_distribution import ProbabilityDistribution
from markov_walker.utils.logger_utils import Log

Token = str

# end of sequence marker, recorded after the last token of every sequence
END_TOKEN: Token = "<END>"


class MarkovChain:
    """
    Bigram model over token sequences.

    start_tokens counts how often each token begins a sequence;
    bigram_frequencies maps a token to the distribution of tokens that
    followed it (END_TOKEN included). Train first, then sample: walks
    never mutate the chain.
    """

    def __init__(self, corpus: Optional[Iterable[Iterable[Token]]] = None) -> None:
        self.start_tokens: ProbabilityDistribution[Token] = ProbabilityDistribution()
        self._bigrams: Dict[Token, ProbabilityDistribution[Token]] = {}
        if corpus is not None:
            self.train(corpus)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, corpus: Iterable[Iterable[Token]]) -> int:
        """Add every sequence of corpus in order. Returns the number of sequences seen."""
        if corpus is None:
            raise InvalidArgumentError("corpus cannot be None")
        n = 0
        with Log.time_block("MarkovChain.train"):
            for sequence in corpus:
                self.add_sequence(sequence)
                n += 1
        Log.write(f"[MarkovChain] trained on {n} sequences ({len(self._bigrams)} tokens)")
        return n

    def add_bigram(self, first: Token, second: Token) -> None:
        """Record that second followed first."""
        if first is None or second is None:
            raise InvalidArgumentError("bigram tokens cannot be None")
        dist = self._bigrams.get(first)
        if dist is None:
            dist = self._bigrams[first] = ProbabilityDistribution()
        dist.record(second)

    def add_sequence(self, sequence: Iterable[Token]) -> None:
        """
        Train on one sequence: its first token goes into start_tokens, every
        adjacent pair becomes a bigram and the last token is linked to
        END_TOKEN. The sequence is consumed once; an empty one is a no-op.
        """
        if sequence is None:
            raise InvalidArgumentError("sequence cannot be None")
        prev: Optional[Token] = None
        for token in iter(sequence):
            if token == END_TOKEN:
                Log.warning(f"[MarkovChain] training token collides with end marker {END_TOKEN!r}")
            if prev is None:
                self.start_tokens.record(token)
            else:
                self.add_bigram(prev, token)
            prev = token
        if prev is not None:
            self.add_bigram(prev, END_TOKEN)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, token: Token) -> Optional[ProbabilityDistribution[Token]]:
        """Successor distribution of token, or None if it was never followed by anything."""
        if token is None:
            raise InvalidArgumentError("token cannot be None")
        return self._bigrams.get(token)

    @property
    def bigram_frequencies(self) -> Dict[Token, ProbabilityDistribution[Token]]:
        """token -> successors, in ascending token order (a fresh dict)."""
        return {k: self._bigrams[k] for k in sorted(self._bigrams)}

    def tokens(self) -> List[Token]:
        return sorted(self._bigrams)

    def __contains__(self, token: object) -> bool:
        return token in self._bigrams

    def __len__(self) -> int:
        return len(self._bigrams)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def get_walk(self, generator: NumberGenerator) -> "WalkIterator":
        """Walk whose every choice comes from generator."""
        return WalkIterator(self, generator)

    def get_random_walk(self, seed: Optional[int] = None) -> "WalkIterator":
        return self.get_walk(RandomNumberGenerator(seed))

    def find_walk_choices(self, words: Sequence[Token]) -> List[int]:
        """
        Choices that make get_walk(ListNumberGenerator(choices)) produce
        exactly words and then stop. One choice per word plus one for
        END_TOKEN. words itself is left untouched.
        """
        if words is None or len(words) == 0:
            raise InvalidArgumentError("words cannot be None or empty")
        path = list(words) + [END_TOKEN]

        first = path[0]
        if first not in self.start_tokens:
            raise OutOfRangeError(f"{first!r} never starts a sequence")
        choices = [self.start_tokens.index(first)]

        for prev, nxt in zip(path, path[1:]):
            dist = self._bigrams.get(prev)
            if dist is None:
                raise OutOfRangeError(f"{prev!r} is not a token of the chain")
            if nxt not in dist:
                if nxt == END_TOKEN:
                    raise OutOfRangeError(f"{prev!r} never ends a sequence")
                raise OutOfRangeError(f"{prev!r} is never followed by {nxt!r}")
            choices.append(dist.index(nxt))
        return choices

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    def save_state(self) -> dict:
        return {
            "start_tokens": self.start_tokens.to_dict(),
            "bigrams": {k: v.to_dict() for k, v in self.bigram_frequencies.items()},
        }

    @classmethod
    def from_state(cls, data: dict) -> "MarkovChain":
        if not isinstance(data, dict):
            raise InvalidArgumentError("chain state must be a mapping")
        starts = data.get("start_tokens", {})
        bigrams = data.get("bigrams", {})
        if not isinstance(starts, dict) or not isinstance(bigrams, dict):
            raise InvalidArgumentError("'start_tokens' and 'bigrams' must be mappings")
        chain = cls()
        chain.start_tokens = ProbabilityDistribution.from_counts(starts)
        for token, counts in bigrams.items():
            if not isinstance(counts, dict):
                raise InvalidArgumentError(f"successors of {token!r} must be a mapping")
            chain._bigrams[token] = ProbabilityDistribution.from_counts(counts)
        chain._check_reachable()
        return chain

    def _check_reachable(self) -> None:
        """Every start token and every successor other than END_TOKEN needs its own table."""
        for token in self.start_tokens:
            if token not in self._bigrams:
                raise InvalidArgumentError(f"start token {token!r} has no successors")
        for prev, dist in self._bigrams.items():
            for token in dist:
                if token != END_TOKEN and token not in self._bigrams:
                    raise InvalidArgumentError(f"{token!r} follows {prev!r} but has no successors")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        lines = [f"startTokens: {self.start_tokens}", "bigramFrequencies:"]
        out = "\n".join(lines) + "\n"
        for token, dist in self.bigram_frequencies.items():
            out += f'"{token}":\t{dist}\n'
        return out

    def __repr__(self) -> str:
        return f"MarkovChain(tokens={len(self._bigrams)}, starts={self.start_tokens.total})"


class WalkIterator:
    """
    One walk through a MarkovChain, driven by a NumberGenerator.

    The first token is drawn on construction; if that fails (no start
    tokens, or any error from the generator) the walk is simply empty. After
    that, next() returns the pending token and draws its successor;
    errors from that draw propagate. The walk ends once END_TOKEN is
    pending. Not restartable.
    """

    def __init__(self, chain: MarkovChain, generator: NumberGenerator) -> None:
        if chain is None or generator is None:
            raise InvalidArgumentError("a walk needs a chain and a number generator")
        self._chain = chain
        self._generator = generator
        self._current: Optional[Token] = None
        if len(chain.start_tokens) == 0:
            return
        try:
            self._current = chain.start_tokens.pick(generator)
        except Exception as e:  # any failed first draw means an empty walk
            Log.debug(f"[WalkIterator] empty walk, first draw failed: {e}")
            self._current = None

    def has_next(self) -> bool:
        return self._current is not None and self._current != END_TOKEN

    def next(self) -> Token:
        if not self.has_next():
            raise NoSuchElementError("walk has reached its end")
        token = self._current
        dist = self._chain.get(token)
        if dist is None:
            raise NoSuchElementError(f"no transitions recorded after {token!r}")
        self._current = dist.pick(self._generator)
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if not self.has_next():
            raise StopIteration
        return self.next()
