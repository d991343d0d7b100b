import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from checkers_core.cli import main


class TestCli(unittest.TestCase):
    def _run(self, argv, inputs=None):
        out = io.StringIO()
        with redirect_stdout(out), patch('builtins.input', side_effect=inputs or []):
            main(argv)
        return out.getvalue()

    def test_given_no_args_when_run_then_prints_start_and_moves(self):
        text = self._run([])
        self.assertIn('Black to move.', text)
        self.assertIn('5,0-4,1', text)

    def test_given_perft_flag_when_run_then_prints_count(self):
        text = self._run(['--perft', '2'])
        self.assertIn('perft(2) = 49', text)

    def test_given_custom_rows_when_playing_then_forced_capture_and_win(self):
        inputs = ['nonsense', '0,1-1,0', '0,1x2,3']
        text = self._run(['--rows', '.w../..b.', '--turn', 'w', '--play'], inputs)
        self.assertIn('Capture chains: 0,1x2,3', text)
        self.assertIn('Could not parse. Try again.', text)
        self.assertIn('Illegal move. Try again.', text)
        self.assertIn('White wins!', text)

    def test_given_open_chain_when_playing_then_prompts_to_keep_jumping(self):
        inputs = ['0,1x2,3', '2,3x4,1']
        text = self._run(['--rows', '.w../..b./..../..b./....', '--turn', 'w', '--play'], inputs)
        self.assertIn('White must keep jumping from (2, 3).', text)
        self.assertIn('White wins!', text)

    def test_given_two_capturing_pieces_when_playing_then_chains_listed_for_both(self):
        inputs = ['0,1x2,3', EOFError()]
        text = self._run(['--rows', '.w...w/..b...b', '--turn', 'w', '--play'], inputs)
        self.assertIn('Capture chains: 0,1x2,3, 0,5x2,7', text)
        self.assertIn('Black to move.', text)

    def test_given_input_closed_when_playing_then_exits_quietly(self):
        text = self._run(['--play'], [EOFError()])
        self.assertIn('Black to move.', text)

    def test_given_bad_rows_when_run_then_exits_with_usage_error(self):
        with self.assertRaises(SystemExit):
            with patch('sys.stderr', new_callable=io.StringIO):
                self._run(['--rows', '..q'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
