# Defaults shared by the corpus, the text hyphenator and the command line.

import logging

# Words shorter than this are never hyphenated.
DEFAULT_MIN_WORD_LENGTH = 5
# Minimum number of characters kept before the first / after the last break.
DEFAULT_LEFT_MIN = 2
DEFAULT_RIGHT_MIN = 2

# Marks the start and the end of a word in patterns like '.ach4'.
BOUNDARY = '.'
# Separates the pieces of an exception word like 'ta-ble'.
HYPHEN = '-'
SOFT_HYPHEN = '\u00ad'

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
