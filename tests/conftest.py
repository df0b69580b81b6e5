"""Shared corpora for the hyph test suite."""

import pytest

from hyph import from_string

# Thresholds that let the four letter test words of the classic examples
# be hyphenated anywhere inside the word.
NO_MARGINS = dict(min_word_length=1, left_min=0, right_min=0)


@pytest.fixture
def make_corpus():
    """Factory building a corpus from pattern and exception strings."""
    def _make(patterns='', exceptions='', **thresholds):
        options = dict(NO_MARGINS)
        options.update(thresholds)
        return from_string(patterns, exceptions, **options)
    return _make


@pytest.fixture
def asdf_corpus(make_corpus):
    return make_corpus('.as4d8f')


@pytest.fixture
def negation_corpus(make_corpus):
    return make_corpus('.as4df s9d asd4f')
