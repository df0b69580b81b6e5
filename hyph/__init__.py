"""Hyphenation with Frank Liang's pattern algorithm, as used by TeX."""

from .config import SOFT_HYPHEN
from .corpus import Corpus, CorpusBuilder
from .hyphenate import (
    Hyphenator,
    hyphenate,
    hyphenate_word,
    mark,
    mark_word,
    possibilities,
    possibilities_for_word,
)
from .tex import from_string, load_tex, parse_tex
from .trie import FrozenCorpusError, PatternError, WeightedTrie

__version__ = '0.1.0'
