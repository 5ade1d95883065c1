#!/usr/bin/env python3
"""
wordkit - Markov Word Generator
===============================

Generates new words that look like the words of a training corpus, using a
character-level Markov model with back-off.

Quick Start
-----------
    from wordkit import WordKit

    kit = WordKit()                       # built-in corpus of English towns
    words = kit.generate(count=10, min_length=3, max_length=8)

    # Own corpus, reproducible output
    kit = WordKit(corpus=["ashby", "ashford", "ashton"], order=2, seed=42)

    # Lower level
    from wordkit import WordGenerator
    gen = WordGenerator(["ab", "ab", "ab"], order=1)
    gen.new_word(1, 5)                    # 'ab'

Modules
-------
    wordkit.generators - Markov model, snapshots and word generator
    wordkit.corpus     - Built-in corpus and word list loading
    wordkit.settings   - YAML configuration
    wordkit.ui         - Rich terminal output

CLI Usage
---------
    python -m wordkit generate -n 10
    python -m wordkit generate --corpus names.txt --order 2 --seed 7
    python -m wordkit stats
"""

__version__ = "0.1.0"

from typing import Iterable, Optional

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import corpus

from .generators import (
    SENTINEL,
    MarkovModel,
    ModelSnapshot,
    InconsistentSnapshotError,
    WordGenerator,
    build_alphabet,
    build_chain_table,
)
from .corpus import (
    TRAINING_CORPUS,
    DEFAULT_CORPUS,
    get_corpus,
    load_corpus,
)
from .settings import get_setting, load_app_config


# =============================================================================
# Main Interface
# =============================================================================

class WordKit:
    """
    Trains a word generator on a corpus and generates words from it.

    Settings not passed explicitly are read from the app config
    (``markov.*`` and ``generation.*``).

    Example:
        kit = WordKit(seed=1)
        kit.generate(count=5)
        kit.generate(count=5, novel_only=True)
    """

    def __init__(self,
                 corpus: Optional[Iterable[str]] = None,
                 order: Optional[int] = None,
                 prior: Optional[float] = None,
                 seed=None):
        self.corpus = list(corpus) if corpus is not None else list(DEFAULT_CORPUS)
        self.order = order if order is not None else get_setting("markov.order", 3)
        self.prior = prior if prior is not None else get_setting("markov.prior", 0.0)
        self.seed = seed

        # Training is cheap but not free; defer until first use
        self._generator: Optional[WordGenerator] = None

    @property
    def generator(self) -> WordGenerator:
        if self._generator is None:
            self._generator = WordGenerator(
                self.corpus, order=self.order, prior=self.prior, seed=self.seed
            )
        return self._generator

    @property
    def model(self) -> MarkovModel:
        return self.generator.model

    def generate(self,
                 count: Optional[int] = None,
                 min_length: Optional[int] = None,
                 max_length: Optional[int] = None,
                 allow_duplicates: Optional[bool] = None,
                 novel_only: bool = False,
                 max_attempts: Optional[int] = None) -> list[str]:
        """
        Generate words.

        Parameters
        ----------
        count : int
            Number of words (default: generation.count)
        min_length, max_length : int
            Length bounds (default: generation.min_length/max_length)
        allow_duplicates : bool
            Allow repeated words in the result (default: generation.allow_duplicates)
        novel_only : bool
            Drop words that appear verbatim in the corpus
        max_attempts : int
            Cap on word attempts (default: markov.max_batch_attempts)

        Returns
        -------
        list
            Generated words, possibly fewer than count if the cap was hit
        """
        if count is None:
            count = get_setting("generation.count", 10)
        if min_length is None:
            min_length = get_setting("generation.min_length", 3)
        if max_length is None:
            max_length = get_setting("generation.max_length", 8)
        if allow_duplicates is None:
            allow_duplicates = get_setting("generation.allow_duplicates", False)

        return self.generator.new_words(
            count,
            min_length,
            max_length,
            allow_duplicates=allow_duplicates,
            max_attempts=max_attempts,
            exclude=self.corpus if novel_only else None,
        )

    def is_novel(self, word: str) -> bool:
        """True if word is not a training word"""
        return word not in set(self.corpus)

    def export(self) -> ModelSnapshot:
        return self.generator.export()


# =============================================================================
# Convenience Functions
# =============================================================================

def generate(count: Optional[int] = None, **kwargs) -> list[str]:
    """
    Quick generation on the built-in corpus.

    Keyword arguments ``corpus``, ``order``, ``prior`` and ``seed`` go to
    WordKit; the rest go to WordKit.generate().
    """
    init_keys = ('corpus', 'order', 'prior', 'seed')
    init_kwargs = {k: kwargs.pop(k) for k in init_keys if k in kwargs}
    kit = WordKit(**init_kwargs)
    return kit.generate(count, **kwargs)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Version
    '__version__',
    # Main interface
    'WordKit',
    'generate',
    # Generators
    'SENTINEL',
    'MarkovModel',
    'ModelSnapshot',
    'InconsistentSnapshotError',
    'WordGenerator',
    'build_alphabet',
    'build_chain_table',
    # Corpus
    'TRAINING_CORPUS',
    'DEFAULT_CORPUS',
    'get_corpus',
    'load_corpus',
    # Settings
    'get_setting',
    'load_app_config',
]
