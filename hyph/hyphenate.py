"""Hyphenation of whole texts.

The text is split into runs at Unicode default word boundaries, every run is
looked up in the corpus, and the word-local break offsets are shifted to
offsets into the text.  A Hyphenator then cuts the text at those offsets.
"""

import regex

from .config import SOFT_HYPHEN

# The WORD flag switches \b to the Unicode default word boundaries.
WORD_BOUNDARY = regex.compile(r'\b', flags=regex.WORD)


def word_bounds(text):
    """Yield (start, run) for every word and non-word run of text."""
    bounds = {0, len(text)}
    bounds.update(m.start() for m in WORD_BOUNDARY.finditer(text))
    bounds = sorted(bounds)
    for start, end in zip(bounds, bounds[1:]):
        yield start, text[start:end]


def possibilities_for_word(word, corpus):
    return corpus.get_hyphenation_indices(word)


def possibilities(text, corpus):
    """Break offsets into text, in ascending order."""
    return [
        start + k
        for start, run in word_bounds(text)
        for k in possibilities_for_word(run, corpus)
    ]


class Hyphenator:
    """Iterates over the pieces of text between consecutive break offsets.

    Yields exactly len(offsets) + 1 pieces, the last one running to the end
    of the text.  Like any iterator it can only be consumed once.
    """

    def __init__(self, text, offsets):
        self.text = text
        self.offsets = offsets
        self.prior = 0
        self.current = 0

    def __iter__(self):
        return self

    def __next__(self):
        start = self.prior
        if self.current < len(self.offsets):
            pos = self.offsets[self.current]
            self.prior = pos
            self.current += 1
            return self.text[start:pos]
        if self.current == len(self.offsets):
            self.current += 1
            return self.text[start:]
        raise StopIteration

    def hyphenate(self, mark=SOFT_HYPHEN):
        return mark.join(self)


def mark_word(word, corpus):
    """A Hyphenator over a single word, without word segmentation."""
    return Hyphenator(word, possibilities_for_word(word, corpus))


def mark(text, corpus):
    return Hyphenator(text, possibilities(text, corpus))


def hyphenate(text, corpus, mark=SOFT_HYPHEN):
    """Insert mark at every permitted break of every word in text.

    With the single pattern '.as4d8f' and no margins, 'asdf foo asdf' becomes
    'as-d-f foo as-d-f' (soft hyphens shown as '-').
    """
    return Hyphenator(text, possibilities(text, corpus)).hyphenate(mark)


def hyphenate_word(word, corpus):
    """The pieces of word between its breaks, e.g. ['as', 'd', 'f'] for 'asdf'."""
    return list(mark_word(word, corpus))
