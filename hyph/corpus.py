import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np

from .config import (
    BOUNDARY,
    DEFAULT_LEFT_MIN,
    DEFAULT_MIN_WORD_LENGTH,
    DEFAULT_RIGHT_MIN,
    HYPHEN,
)
from .trie import FrozenCorpusError, PatternError, WeightedTrie

logger = logging.getLogger(__name__)


def parse_exception(word):
    """Split 'ta-ble' into ('table', (2,)).

    Offsets are those of the hyphens in the hyphenated string, so 'ab-cd-ef'
    gives (2, 5) rather than (2, 4).
    """
    points = tuple(i for i, c in enumerate(word) if c == HYPHEN)
    chars = word.replace(HYPHEN, '')
    if not chars:
        raise PatternError(f'exception {word!r} has no letters')
    return chars, points


def _check_threshold(name, value):
    if value < 0:
        raise ValueError(f'{name} must be non-negative, got {value}')
    return value


@dataclass(frozen=True, eq=False)
class Corpus:
    """Read-only hyphenation dictionary produced by CorpusBuilder.build()."""

    trie: WeightedTrie
    exceptions: Mapping[str, Tuple[int, ...]]
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    left_min: int = DEFAULT_LEFT_MIN
    right_min: int = DEFAULT_RIGHT_MIN

    @property
    def pattern_count(self):
        return self.trie.count

    @property
    def exception_count(self):
        return len(self.exceptions)

    def with_thresholds(self, min_word_length=None, left_min=None, right_min=None):
        changes = {}
        for name, value in (('min_word_length', min_word_length),
                            ('left_min', left_min),
                            ('right_min', right_min)):
            if value is not None:
                changes[name] = _check_threshold(name, value)
        return replace(self, **changes)

    def get_hyphenation_indices(self, word):
        """Offsets into word before which a hyphen may be inserted."""
        n = len(word)
        if n < self.min_word_length or n <= self.left_min + self.right_min:
            return []

        if word in self.exceptions:
            return list(self.exceptions[word])

        points = self.trie.fetch(BOUNDARY + word + BOUNDARY)
        # points[k + 1] is the weight before word[k].  Never break at either
        # end of the word.
        first = max(self.left_min, 1)
        last = min(n - self.right_min, n - 1)
        if first > last:
            return []
        window = points[first + 1:last + 2]
        hits = np.flatnonzero((window > 0) & (window % 2 == 0))
        return [int(k) + first for k in hits]


class CorpusBuilder:
    """Collects patterns and exceptions until build() is called."""

    def __init__(self):
        self._trie = WeightedTrie()
        self._exceptions = {}
        self._min_word_length = DEFAULT_MIN_WORD_LENGTH
        self._left_min = DEFAULT_LEFT_MIN
        self._right_min = DEFAULT_RIGHT_MIN

    @property
    def built(self):
        return self._trie.frozen

    @property
    def pattern_count(self):
        return self._trie.count

    @property
    def exception_count(self):
        return len(self._exceptions)

    def _check_mutable(self):
        if self.built:
            raise FrozenCorpusError('corpus has already been built')

    def add_pattern(self, pattern):
        self._trie.insert(pattern)
        return self

    def add_exception(self, word):
        self._check_mutable()
        chars, points = parse_exception(word)
        self._exceptions[chars] = points
        return self

    def min_word_length(self, value):
        self._check_mutable()
        self._min_word_length = _check_threshold('min_word_length', value)
        return self

    def left_min(self, value):
        self._check_mutable()
        self._left_min = _check_threshold('left_min', value)
        return self

    def right_min(self, value):
        self._check_mutable()
        self._right_min = _check_threshold('right_min', value)
        return self

    def build(self):
        self._trie.freeze()
        logger.debug('Built corpus with %d patterns and %d exceptions',
                     self.pattern_count, self.exception_count)
        return Corpus(
            trie=self._trie,
            exceptions=MappingProxyType(dict(self._exceptions)),
            min_word_length=self._min_word_length,
            left_min=self._left_min,
            right_min=self._right_min,
        )
