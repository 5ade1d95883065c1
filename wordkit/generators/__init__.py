#!/usr/bin/env python3
"""
Word Generators
===============
Provides the Markov back-off model and the word generator built on it.
"""

from .markov_generator import (
    SENTINEL,
    MarkovModel,
    ModelSnapshot,
    InconsistentSnapshotError,
    build_alphabet,
    build_chain_table,
    select_index,
)
from .word_generator import (
    WordGenerator,
    DEFAULT_MAX_WORD_ATTEMPTS,
    DEFAULT_MAX_BATCH_ATTEMPTS,
)

__all__ = [
    # Model
    'SENTINEL',
    'MarkovModel',
    'ModelSnapshot',
    'InconsistentSnapshotError',
    'build_alphabet',
    'build_chain_table',
    'select_index',
    # Words
    'WordGenerator',
    'DEFAULT_MAX_WORD_ATTEMPTS',
    'DEFAULT_MAX_BATCH_ATTEMPTS',
]
