"""Tests for the hyph command line."""

import io
import logging

from hyph.cli import build_parser, main

PATTERNS = '\\patterns{\n.as4d8f\n}\n'
NO_MARGINS = ['--min-word-length', '1', '--left-min', '0', '--right-min', '0']


def write(path, text):
    path.write_text(text, encoding='utf-8')
    return str(path)


class TestMain:

    def test_hyphenates_text_files(self, tmp_path, capsys):
        patterns = write(tmp_path / 'p.tex', PATTERNS)
        text = write(tmp_path / 'in.txt', 'asdf foo asdf\nasdf\n')
        assert main([patterns, text] + NO_MARGINS) == 0
        assert capsys.readouterr().out == 'as-d-f foo as-d-f\nas-d-f\n'

    def test_custom_mark(self, tmp_path, capsys):
        patterns = write(tmp_path / 'p.tex', PATTERNS)
        text = write(tmp_path / 'in.txt', 'asdf\n')
        assert main([patterns, text, '--mark', '='] + NO_MARGINS) == 0
        assert capsys.readouterr().out == 'as=d=f\n'

    def test_reads_stdin_without_text_files(self, tmp_path, capsys, monkeypatch):
        patterns = write(tmp_path / 'p.tex', PATTERNS)
        monkeypatch.setattr('sys.stdin', io.StringIO('asdf\n'))
        assert main([patterns] + NO_MARGINS) == 0
        assert capsys.readouterr().out == 'as-d-f\n'

    def test_default_thresholds_leave_short_words(self, tmp_path, capsys):
        patterns = write(tmp_path / 'p.tex', PATTERNS)
        text = write(tmp_path / 'in.txt', 'asdf\n')
        assert main([patterns, text]) == 0
        assert capsys.readouterr().out == 'asdf\n'

    def test_missing_pattern_file(self, tmp_path):
        assert main([str(tmp_path / 'missing.tex')]) == 1

    def test_invalid_pattern_file(self, tmp_path, caplog):
        patterns = write(tmp_path / 'p.tex', '\\patterns{\n4as\n}\n')
        assert main([patterns]) == 1
        errors = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(errors) == 1
        assert 'line 2' in errors[0].getMessage()

    def test_missing_text_file(self, tmp_path):
        patterns = write(tmp_path / 'p.tex', PATTERNS)
        assert main([patterns, str(tmp_path / 'missing.txt')]) == 1


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args(['p.tex'])
        assert args.texts == []
        assert args.mark == '-'
        assert (args.min_word_length, args.left_min, args.right_min) == (5, 2, 2)
        assert not args.verbose
