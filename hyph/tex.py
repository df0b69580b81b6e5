"""Loading of TeX hyphenation sources.

A source holds a \\patterns{...} block and optionally a \\hyphenation{...}
block of exception words, one or more whitespace separated entries per line:

    \\patterns{
    .ach4
    .ad4der
    }
    \\hyphenation{
    as-so-ciate
    }

Everything outside the two blocks is ignored, as are comment lines.
"""

import enum
import logging

from .corpus import CorpusBuilder
from .trie import PatternError

logger = logging.getLogger(__name__)

COMMENT_CHARS = ('%', '#')


class Mode(enum.Enum):
    NEUTRAL = 0
    PATTERNS = 1
    EXCEPTIONS = 2


COMMANDS = (
    ('\\patterns', Mode.PATTERNS),
    ('\\hyphenation', Mode.EXCEPTIONS),
)


def _strip_command(line):
    for command, mode in COMMANDS:
        if line.startswith(command):
            rest = line[len(command):].lstrip()
            if rest.startswith('{'):
                rest = rest[1:]
            return mode, rest
    return None, line


def parse_tex(lines, builder=None):
    """Feed the patterns and exceptions found in lines to builder."""
    if builder is None:
        builder = CorpusBuilder()
    mode = Mode.NEUTRAL
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if line.startswith(COMMENT_CHARS):
            continue
        line = line.split('%', 1)[0].rstrip()

        new_mode, line = _strip_command(line)
        if new_mode is not None:
            mode = new_mode
        elif line.startswith('}'):
            mode = Mode.NEUTRAL
            continue

        closes = line.endswith('}')
        if closes:
            line = line[:-1]

        if mode is Mode.PATTERNS:
            add = builder.add_pattern
        elif mode is Mode.EXCEPTIONS:
            add = builder.add_exception
        else:
            continue
        for entry in line.split():
            try:
                add(entry)
            except PatternError as e:
                raise PatternError(f'line {lineno}: {e}') from e

        if closes:
            mode = Mode.NEUTRAL
    return builder


def _with_thresholds(builder, min_word_length=None, left_min=None, right_min=None):
    if min_word_length is not None:
        builder.min_word_length(min_word_length)
    if left_min is not None:
        builder.left_min(left_min)
    if right_min is not None:
        builder.right_min(right_min)
    return builder


def load_tex(path, **thresholds):
    """Build a corpus from the TeX hyphenation file at path."""
    with open(path, 'r', encoding='utf-8') as f:
        builder = parse_tex(f)
    logger.info('Loaded %d patterns and %d exceptions from %s',
                builder.pattern_count, builder.exception_count, path)
    return _with_thresholds(builder, **thresholds).build()


def from_string(patterns, exceptions='', **thresholds):
    """Build a corpus from whitespace separated patterns and exceptions."""
    builder = CorpusBuilder()
    for pattern in patterns.split():
        builder.add_pattern(pattern)
    for word in exceptions.split():
        builder.add_exception(word)
    return _with_thresholds(builder, **thresholds).build()
