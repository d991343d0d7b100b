import unittest

from game import (
    Checkers,
    Move,
    capture_sequences,
    turn_sequences,
    play_sequence,
    sequence_to_text,
    perft,
    perft_divide,
)


class TestCaptureSequences(unittest.TestCase):
    def test_given_double_jump_when_enumerating_then_one_full_chain(self):
        g = Checkers.from_rows([".w..", "..b.", "....", "..b.", "...."], 'w')
        before = g.to_text()
        chains = capture_sequences(g, 0, 1)
        self.assertEqual(chains, [[
            Move((0, 1), (2, 3), (1, 2)),
            Move((2, 3), (4, 1), (3, 2)),
        ]])
        self.assertEqual(sequence_to_text(chains[0]), "0,1x2,3x4,1")
        # Lookahead runs on scratch copies only
        self.assertEqual(g.to_text(), before)
        self.assertEqual(g.get_turn(), 'w')
        self.assertIsNone(g.jumper)

    def test_given_branching_king_when_enumerating_then_every_chain_listed(self):
        g = Checkers.from_rows(["", "", "", "...W", "..b.b", "", "..b.b"], 'w')
        chains = capture_sequences(g, 3, 3)
        texts = sorted(sequence_to_text(c) for c in chains)
        # The king circles the four men and lands back on its start square
        self.assertEqual(texts, ["3,3x5,1x7,3x5,5x3,3", "3,3x5,5x7,3x5,1x3,3"])
        for chain in chains:
            scratch = g.copy()
            play_sequence(scratch, chain)
            self.assertEqual(scratch.get_turn(), 'b')
            self.assertEqual(scratch.piece_count('b'), 0)

    def test_given_quiet_piece_when_enumerating_then_no_chains(self):
        g = Checkers.new()
        self.assertEqual(capture_sequences(g, 5, 0), [])

    def test_given_start_when_listing_turns_then_simple_steps(self):
        turns = turn_sequences(Checkers.new())
        self.assertEqual(len(turns), 7)
        self.assertTrue(all(len(t) == 1 and not t[0].is_capture for t in turns))
        self.assertEqual(sequence_to_text(turns[0]), "5,0-4,1")
        self.assertEqual(sequence_to_text([]), "")


class TestPerft(unittest.TestCase):
    def test_startpos(self):
        g = Checkers.new()
        self.assertEqual(perft(g, 0), 1)
        self.assertEqual(perft(g, 1), 7)
        self.assertEqual(perft(g, 2), 49)
        self.assertEqual(perft(g, 3), 302)
        self.assertEqual(g.to_text(), Checkers.new().to_text())

    def test_divide_sums_to_perft(self):
        g = Checkers.new()
        div = perft_divide(g, 2)
        self.assertEqual(len(div), 7)
        self.assertEqual(sum(div.values()), 49)
        self.assertEqual(div["5,0-4,1"], 7)


if __name__ == '__main__':
    unittest.main(verbosity=2)
