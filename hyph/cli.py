import argparse
import logging
import sys

from .config import (
    DEFAULT_LEFT_MIN,
    DEFAULT_MIN_WORD_LENGTH,
    DEFAULT_RIGHT_MIN,
    HYPHEN,
    setup_logging,
)
from .hyphenate import hyphenate
from .tex import load_tex

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='hyph',
        description='Hyphenate text files with TeX hyphenation patterns.',
    )
    parser.add_argument('patterns', type=str, help='TeX patterns file (\\patterns and \\hyphenation blocks)')
    parser.add_argument('texts', type=str, nargs='*', help='text files to hyphenate, stdin if none')
    parser.add_argument('--mark', type=str, default=HYPHEN, help='string inserted at each break')
    parser.add_argument('--min-word-length', type=int, default=DEFAULT_MIN_WORD_LENGTH,
                        help='do not hyphenate shorter words')
    parser.add_argument('--left-min', type=int, default=DEFAULT_LEFT_MIN,
                        help='characters kept before the first break')
    parser.add_argument('--right-min', type=int, default=DEFAULT_RIGHT_MIN,
                        help='characters kept after the last break')
    parser.add_argument('-v', '--verbose', action='store_true', help='verbose')
    return parser


def hyphenate_lines(lines, corpus, mark, out):
    for line in lines:
        out.write(hyphenate(line, corpus, mark))


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        corpus = load_tex(
            args.patterns,
            min_word_length=args.min_word_length,
            left_min=args.left_min,
            right_min=args.right_min,
        )
    except (OSError, ValueError) as e:
        logger.error('Cannot load patterns from %s: %s', args.patterns, e)
        return 1

    if not args.texts:
        hyphenate_lines(sys.stdin, corpus, args.mark, sys.stdout)
        return 0
    for text_file in args.texts:
        try:
            with open(text_file, 'r', encoding='utf-8') as f:
                hyphenate_lines(f, corpus, args.mark, sys.stdout)
        except OSError as e:
            logger.error('Cannot read %s: %s', text_file, e)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
