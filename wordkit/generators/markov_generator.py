#!/usr/bin/env python3
"""
Markov Chain Word Model
=======================
Character-level Markov model with back-off, trained on a list of words.

For every order n in 1..K the model keeps a chain table mapping each
n-character context seen in training to a weight vector over the alphabet.
Entry i of a vector is the smoothing prior plus the number of times
``alphabet[i]`` followed that context.

Back-off:
---------
To pick the next character the model looks at the trailing K characters of
the current word. If that context was never seen it tries K-1 characters,
and so on down to 1. The first order with a match wins. Tables are built
independently per order; no probability mass is moved between orders.

The sentinel ``#`` pads the start of every word and marks its end.
"""

import logging
import random
from bisect import bisect_right
from collections import defaultdict, Counter
from dataclasses import dataclass, field
from itertools import accumulate
from math import isfinite
from numbers import Real
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Start padding and end-of-word marker
SENTINEL = '#'


# =============================================================================
# TRAINING
# =============================================================================

def build_alphabet(words: Iterable[str]) -> tuple[str, ...]:
    """Sorted, unique characters of the training words plus the sentinel."""
    symbols = {SENTINEL}
    for word in words:
        symbols.update(word)
    return tuple(sorted(symbols))


def build_chain_table(words: Iterable[str],
                      order: int,
                      alphabet: tuple[str, ...],
                      prior: float = 0.0) -> dict[str, list[float]]:
    """
    Build the chain table for a single order.

    Args:
        words: Training words
        order: Context length n
        alphabet: Symbols indexing the weight vectors
        prior: Value added to every weight

    Returns:
        Mapping of n-character context -> weight vector aligned with alphabet
    """
    padding = SENTINEL * order
    observations = defaultdict(Counter)

    for word in words:
        padded = padding + word + SENTINEL
        for i in range(len(padded) - order):
            context = padded[i:i + order]
            observations[context][padded[i + order]] += 1

    return {
        context: [prior + counts[symbol] for symbol in alphabet]
        for context, counts in observations.items()
    }


def select_index(weights: list[float], rng: random.Random) -> int:
    """
    Pick an index with probability proportional to its weight.

    Falls back to 0 when the weights sum to zero or rounding leaves the
    draw past the last bucket.
    """
    totals = list(accumulate(weights))
    if not totals or totals[-1] <= 0:
        return 0

    draw = rng.random() * totals[-1]
    index = bisect_right(totals, draw)
    return index if index < len(totals) else 0


# =============================================================================
# SNAPSHOT
# =============================================================================

class InconsistentSnapshotError(ValueError):
    """Raised when a snapshot cannot back a model."""


@dataclass
class ModelSnapshot:
    """Learned state of a model: alphabet plus one chain table per order."""
    alphabet: tuple = ()
    chains: list = field(default_factory=list)

    @property
    def order(self) -> int:
        return len(self.chains)

    def validate(self) -> None:
        """Check the snapshot can be sampled without indexing errors."""
        if not isinstance(self.alphabet, (list, tuple)):
            raise InconsistentSnapshotError(
                "inconsistent snapshot: alphabet must be a sequence of symbols"
            )
        alphabet = tuple(self.alphabet)
        if not alphabet and not self.chains:
            # Untrained model
            return
        if any(not isinstance(s, str) or len(s) != 1 for s in alphabet):
            raise InconsistentSnapshotError(
                "inconsistent snapshot: alphabet symbols must be single characters"
            )
        if list(alphabet) != sorted(set(alphabet)):
            raise InconsistentSnapshotError(
                "inconsistent snapshot: alphabet must be sorted and unique"
            )
        if SENTINEL not in alphabet:
            raise InconsistentSnapshotError(
                f"inconsistent snapshot: alphabet is missing sentinel {SENTINEL!r}"
            )

        if not isinstance(self.chains, (list, tuple)):
            raise InconsistentSnapshotError(
                "inconsistent snapshot: chains must be a list of tables"
            )

        size = len(alphabet)
        for order, table in enumerate(self.chains, 1):
            if not isinstance(table, dict):
                raise InconsistentSnapshotError(
                    f"inconsistent snapshot: order-{order} table is "
                    f"{type(table).__name__}, not a mapping"
                )
            for context, weights in table.items():
                if not isinstance(context, str) or len(context) != order:
                    raise InconsistentSnapshotError(
                        f"inconsistent snapshot: context {context!r} "
                        f"in order-{order} table"
                    )
                if not isinstance(weights, (list, tuple)):
                    raise InconsistentSnapshotError(
                        f"inconsistent snapshot: weights for {context!r} "
                        f"are {type(weights).__name__}, not a sequence"
                    )
                if len(weights) != size:
                    raise InconsistentSnapshotError(
                        f"inconsistent snapshot: context {context!r} has "
                        f"{len(weights)} weights, alphabet has {size} symbols"
                    )
                for w in weights:
                    # bool is an int but never a count
                    if isinstance(w, bool) or not isinstance(w, Real):
                        raise InconsistentSnapshotError(
                            f"inconsistent snapshot: weight {w!r} for {context!r} "
                            f"is not a number"
                        )
                    if not isfinite(w) or w < 0:
                        raise InconsistentSnapshotError(
                            f"inconsistent snapshot: weight {w!r} for {context!r} "
                            f"must be finite and non-negative"
                        )

    def copy(self) -> 'ModelSnapshot':
        return ModelSnapshot(
            alphabet=tuple(self.alphabet),
            chains=[
                {context: list(weights) for context, weights in table.items()}
                for table in self.chains
            ],
        )

    def to_dict(self) -> dict:
        """Convert to plain lists and dicts"""
        return {
            'alphabet': list(self.alphabet),
            'chains': [
                {context: list(weights) for context, weights in table.items()}
                for table in self.chains
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ModelSnapshot':
        """Build from the output of to_dict()"""
        try:
            return cls(
                alphabet=tuple(data['alphabet']),
                chains=[
                    {str(context): [float(w) for w in weights]
                     for context, weights in table.items()}
                    for table in data['chains']
                ],
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InconsistentSnapshotError(f"inconsistent snapshot: {e}") from e


# =============================================================================
# MODEL
# =============================================================================

class MarkovModel:
    """Order-K character model with sequential back-off"""

    def __init__(self,
                 words: Optional[Iterable[str]] = None,
                 order: int = 3,
                 prior: float = 0.0,
                 seed=None):
        """
        Initialize a model, training it when words are given.

        Args:
            words: Training words (None leaves the model untrained)
            order: Maximum context length K
            prior: Smoothing prior added to every weight
            seed: Seed for this model's random source (None = OS entropy)
        """
        self._order = 0
        self._prior: Optional[float] = prior
        self._alphabet: tuple[str, ...] = ()
        self._chains: list[dict[str, list[float]]] = []
        self._rng = random.Random(seed)

        if words is not None:
            self.train(words, order, prior)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def order(self) -> int:
        return self._order

    @property
    def prior(self) -> Optional[float]:
        """Prior used in training; None for models imported from a snapshot."""
        return self._prior

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    @property
    def is_trained(self) -> bool:
        return bool(self._chains)

    def chain_table(self, order: int) -> dict[str, list[float]]:
        """Copy of the chain table for one order (1..K)."""
        if not 1 <= order <= self._order:
            raise ValueError(f"order must be between 1 and {self._order}, got {order}")
        return {ctx: list(w) for ctx, w in self._chains[order - 1].items()}

    def table_sizes(self) -> list[int]:
        """Number of contexts in each table, lowest order first."""
        return [len(table) for table in self._chains]

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def train(self, words: Iterable[str], order: int = 3, prior: float = 0.0) -> None:
        """Rebuild the alphabet and every chain table from scratch."""
        if not isinstance(order, int) or order < 1:
            raise ValueError(f"order must be a positive integer, got {order!r}")
        if not isfinite(prior) or prior < 0:
            raise ValueError(f"prior must be finite and non-negative, got {prior!r}")

        words = list(words)
        self._order = order
        self._prior = prior
        self._alphabet = build_alphabet(words)
        self._chains = [
            build_chain_table(words, n, self._alphabet, prior)
            for n in range(1, order + 1)
        ]
        logger.debug(
            f"Trained order-{order} model on {len(words)} words: "
            f"{len(self._alphabet)} symbols, contexts per order {self.table_sizes()}"
        )

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def generate(self, context: str) -> str:
        """
        Sample the character following context.

        Returns the sentinel when the model is untrained or no trailing
        slice of context was seen in training.
        """
        if not self.is_trained:
            return SENTINEL

        for n in range(self._order, 0, -1):
            if len(context) < n:
                continue
            weights = self._chains[n - 1].get(context[-n:])
            if weights is not None:
                return self._alphabet[select_index(weights, self._rng)]

        return SENTINEL

    def reseed(self, seed=None) -> None:
        self._rng.seed(seed)

    # -------------------------------------------------------------------------
    # Export / import
    # -------------------------------------------------------------------------

    def export(self) -> ModelSnapshot:
        """Independent copy of the alphabet and chain tables."""
        return ModelSnapshot(alphabet=self._alphabet, chains=self._chains).copy()

    @classmethod
    def from_snapshot(cls, snapshot: ModelSnapshot, seed=None) -> 'MarkovModel':
        """
        Rebuild a model without retraining. The order is the number of tables.

        Raises:
            InconsistentSnapshotError: If the snapshot fails validation
        """
        snapshot.validate()
        state = snapshot.copy()

        model = cls(seed=seed)
        model._prior = None
        model._alphabet = state.alphabet
        model._chains = state.chains
        model._order = len(state.chains)
        logger.debug(
            f"Imported order-{model._order} model with {len(model._alphabet)} symbols"
        )
        return model

    def copy(self, seed=None) -> 'MarkovModel':
        """Deep copy with its own random source."""
        model = self.from_snapshot(self.export(), seed=seed)
        model._prior = self._prior
        return model

    def __repr__(self) -> str:
        return (f"MarkovModel(order={self._order}, prior={self._prior}, "
                f"alphabet_size={len(self._alphabet)})")
