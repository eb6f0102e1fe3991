"""Test the abalone-moves command line interface."""

import os
import unittest
from unittest.mock import patch

from click.testing import CliRunner

from abalone_engine.cli.config import CLIConfig, set_config
from abalone_engine.cli.main import cli
from abalone_engine.game.loaders import load_board
from abalone_engine.game.moves import MoveGenerator
from abalone_engine.game.writers import format_board_lines
from abalone_engine.utils.compare import normalize_board_line


BOARD_TEXT = "b\nC5b,D5b,E5b,F5w,G5w,A1w\n"


class CLITestCase(unittest.TestCase):
    def setUp(self):
        # Commands mutate the shared configuration
        set_config(CLIConfig())
        self.runner = CliRunner()

    def _write(self, name, text):
        with open(name, 'w', encoding='utf-8') as f:
            f.write(text)
        return name


class TestGenerateCommand(CLITestCase):
    def test_generate_writes_move_and_board_files(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            result = self.runner.invoke(cli, ['generate', 'Test1.input'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Generated", result.output)

            with open('Test1.move', encoding='utf-8') as f:
                moves = f.read().splitlines()
            with open('Test1.board', encoding='utf-8') as f:
                boards = f.read().splitlines()

            board = load_board('Test1.input')
            expected = format_board_lines(MoveGenerator.generate_successors(board, board.next_to_move))
            self.assertEqual(len(moves), len(boards))
            self.assertEqual(boards, expected)
            self.assertTrue(all(line.startswith("(b, ") for line in moves))

    def test_output_dir(self):
        with self.runner.isolated_filesystem():
            self._write('Test2.input', "w\nI9w\n")
            result = self.runner.invoke(cli, ['-q', 'generate', 'Test2.input', '-o', 'out'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(os.path.exists(os.path.join('out', 'Test2.move')))
            with open(os.path.join('out', 'Test2.board'), encoding='utf-8') as f:
                self.assertEqual(sorted(f.read().splitlines()), ["H8w", "H9w", "I8w"])

    def test_unreadable_board_fails(self):
        with self.runner.isolated_filesystem():
            self._write('bad.input', "x\nE5b\n")
            result = self.runner.invoke(cli, ['generate', 'bad.input'])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("could not be read", result.output)
            self.assertFalse(os.path.exists('bad.move'))

    def test_verbose_reports_move_counts(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            self._write('Test2.input', "w\nI9w\n")
            result = self.runner.invoke(cli, ['-v', 'generate', 'Test1.input', 'Test2.input'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Test2.input: 3 moves for white", result.output)

    def test_missing_input(self):
        result = self.runner.invoke(cli, ['generate', 'does-not-exist.input'])
        self.assertEqual(result.exit_code, 2)


class TestCompareCommand(CLITestCase):
    def test_missing_board_files_fail(self):
        with self.runner.isolated_filesystem():
            self._write('expected.board', "A1w\n")
            for args in (['nope.board', 'expected.board'], ['expected.board', 'nope.board'],
                         ['nope.board', 'also-nope.board']):
                result = self.runner.invoke(cli, ['compare'] + args)
                self.assertEqual(result.exit_code, 2, args)
                self.assertNotIn("Boards match", result.output)

    def test_missing_move_file_is_tolerated(self):
        with self.runner.isolated_filesystem():
            self._write('expected.board', "A1w\n")
            self._write('actual.board', "A1w\n")
            result = self.runner.invoke(cli, ['compare', 'expected.board', 'actual.board', 'nope.move'])
            self.assertEqual(result.exit_code, 0, result.output)

    def test_matching_files(self):
        with self.runner.isolated_filesystem():
            self._write('expected.board', "E5b,A1w\nC3b\n")
            self._write('actual.board', "C3b\nA1w,E5b\n")
            result = self.runner.invoke(cli, ['--no-color', 'compare', 'expected.board', 'actual.board'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("✓ Boards match: 2 legal, 0 missing, 0 illegal", result.output)

    def test_mismatch_reports_lines_and_exits_1(self):
        with self.runner.isolated_filesystem():
            self._write('expected.board', "E5b,A1w\nC3b\n")
            self._write('actual.board', "A1w,E5b\nI9w\n")
            self._write('actual.move', "(b, E4) s → E\n(w, I8) s → E\n")
            result = self.runner.invoke(
                cli, ['--no-color', 'compare', 'expected.board', 'actual.board', 'actual.move'])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("Line 2 illegal board: I9w", result.output)
            self.assertIn("Corresponding move: (w, I8) s → E", result.output)
            self.assertIn("✗ Boards differ: 1 legal, 1 missing, 1 illegal", result.output)

    def test_generated_boards_match_themselves(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            self.runner.invoke(cli, ['generate', 'Test1.input'])
            with open('Test1.board', encoding='utf-8') as f:
                shuffled = [normalize_board_line(line) for line in reversed(f.read().splitlines())]
            self._write('Test1.board.expected', "\n".join(shuffled) + "\n")
            result = self.runner.invoke(
                cli, ['compare', '--summary', 'Test1.board.expected', 'Test1.board', 'Test1.move'])
            self.assertEqual(result.exit_code, 0, result.output)


class TestShowCommand(CLITestCase):
    def test_show_layout(self):
        result = self.runner.invoke(cli, ['show', '--layout', 'standard'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Next to move: BLACK", result.output)
        self.assertIn("A1b,A2b,A3b", result.output)

    def test_show_moves(self):
        result = self.runner.invoke(cli, ['show', '-l', 'standard', '--moves'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("44 legal moves for black", result.output)

    def test_show_file(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            result = self.runner.invoke(cli, ['show', 'Test1.input'])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("A1w,C5b,D5b,E5b,F5w,G5w", result.output)

    def test_unreadable_file_is_reported(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            with patch('abalone_engine.cli.commands.show.load_board',
                       side_effect=PermissionError("Permission denied: 'Test1.input'")):
                result = self.runner.invoke(cli, ['show', 'Test1.input'])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("Permission denied", result.output)
            self.assertNotIsInstance(result.exception, PermissionError)

    def test_file_and_layout_conflict(self):
        with self.runner.isolated_filesystem():
            self._write('Test1.input', BOARD_TEXT)
            result = self.runner.invoke(cli, ['show', 'Test1.input', '--layout', 'standard'])
            self.assertEqual(result.exit_code, 2)


class TestMainGroup(CLITestCase):
    def test_help_without_command(self):
        result = self.runner.invoke(cli, [])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("generate", result.output)

    def test_version(self):
        result = self.runner.invoke(cli, ['--version'])
        self.assertIn("0.1.0", result.output)

    def test_config_command(self):
        result = self.runner.invoke(cli, ['config'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Current configuration:", result.output)
        self.assertIn("move_suffix", result.output)

    def test_flags_override_configuration(self):
        result = self.runner.invoke(cli, ['--no-color', '-q', 'config'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertRegex(result.output, r"color_output\s*: False")
        self.assertRegex(result.output, r"quiet\s*: True")


if __name__ == '__main__':
    unittest.main()
