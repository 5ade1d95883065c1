#!/usr/bin/env python3
"""
Word Generator
==============
Assembles whole words from a MarkovModel, one character at a time.

A word starts as K sentinels and grows until the model samples the
sentinel again. Words outside the requested length range are thrown away
and assembled again, up to a fixed number of attempts.
"""

import logging
from typing import Iterable, Optional

from ..settings import get_setting
from .markov_generator import SENTINEL, MarkovModel, ModelSnapshot

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORD_ATTEMPTS = 100
DEFAULT_MAX_BATCH_ATTEMPTS = 10000


class WordGenerator:
    """Generates words from a single trained MarkovModel"""

    def __init__(self,
                 words: Optional[Iterable[str]] = None,
                 order: int = 3,
                 prior: float = 0.0,
                 seed=None,
                 model: Optional[MarkovModel] = None,
                 max_word_attempts: Optional[int] = None):
        """
        Initialize generator.

        Args:
            words: Training words (None leaves the generator untrained)
            order: Maximum context length
            prior: Smoothing prior
            seed: Seed for the model's random source
            model: Use this model instead of training a new one
            max_word_attempts: Assembly attempts per word (default from config)
        """
        if model is None:
            model = MarkovModel(words, order=order, prior=prior, seed=seed)
        self.model = model

        if max_word_attempts is None:
            max_word_attempts = get_setting(
                "markov.max_word_attempts", DEFAULT_MAX_WORD_ATTEMPTS
            )
        if max_word_attempts is None:
            # Explicit null in config
            max_word_attempts = DEFAULT_MAX_WORD_ATTEMPTS
        self.max_word_attempts = max_word_attempts

    @classmethod
    def from_snapshot(cls, snapshot: ModelSnapshot, seed=None, **kwargs) -> 'WordGenerator':
        return cls(model=MarkovModel.from_snapshot(snapshot, seed=seed), **kwargs)

    @property
    def order(self) -> int:
        return self.model.order

    @property
    def is_trained(self) -> bool:
        return self.model.is_trained

    def train(self, words: Iterable[str], order: int = 3, prior: float = 0.0) -> None:
        self.model.train(words, order, prior)

    def export(self) -> ModelSnapshot:
        return self.model.export()

    def copy(self, seed=None) -> 'WordGenerator':
        return WordGenerator(
            model=self.model.copy(seed=seed),
            max_word_attempts=self.max_word_attempts,
        )

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def _assemble(self) -> str:
        word = SENTINEL * self.model.order
        letter = self.model.generate(word)
        while letter != SENTINEL:
            word += letter
            letter = self.model.generate(word)
        return word.replace(SENTINEL, '')

    def new_word(self, min_length: int, max_length: int) -> str:
        """
        Generate a single word.

        Args:
            min_length: Minimum word length
            max_length: Maximum word length

        Returns:
            A word within the bounds, or the last candidate if none of the
            attempts fit. Empty string if the model is untrained.
        """
        if min_length > max_length:
            raise ValueError(
                f"min_length ({min_length}) is greater than max_length ({max_length})"
            )
        if not self.is_trained:
            return ''

        word = ''
        for _ in range(max(1, self.max_word_attempts)):
            word = self._assemble()
            if min_length <= len(word) <= max_length:
                return word

        logger.debug(
            f"No word of length {min_length}-{max_length} after "
            f"{self.max_word_attempts} attempts, keeping {word!r}"
        )
        return word

    def new_words(self,
                  count: int,
                  min_length: int,
                  max_length: int,
                  allow_duplicates: bool = False,
                  max_attempts: Optional[int] = None,
                  exclude: Optional[Iterable[str]] = None) -> list[str]:
        """
        Generate multiple words.

        Args:
            count: Number of words to generate
            min_length: Minimum word length
            max_length: Maximum word length
            allow_duplicates: Keep words already in the batch
            max_attempts: Calls to new_word() before giving up (default from
                config, else DEFAULT_MAX_BATCH_ATTEMPTS; 0, or null in config,
                means no limit)
            exclude: Words never to return, e.g. the training corpus

        Returns:
            List of words. Shorter than count only when max_attempts ran out.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        words = []
        if not self.is_trained:
            return words

        if max_attempts is None:
            max_attempts = get_setting(
                "markov.max_batch_attempts", DEFAULT_MAX_BATCH_ATTEMPTS
            )

        seen = set()
        excluded = set(exclude) if exclude is not None else set()
        attempts = 0

        while len(words) < count:
            if max_attempts and attempts >= max_attempts:
                logger.warning(
                    f"Stopped after {attempts} attempts with {len(words)}/{count} "
                    f"words of length {min_length}-{max_length}"
                )
                break
            attempts += 1

            word = self.new_word(min_length, max_length)
            if word in excluded:
                continue
            if allow_duplicates or word not in seen:
                words.append(word)
                seen.add(word)

        return words

    def __repr__(self) -> str:
        return f"WordGenerator({self.model!r})"
