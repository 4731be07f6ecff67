import json
import unittest

from game import (
    Board,
    Game,
    Player,
    Status,
    board_from_json,
    board_to_json,
    canonical_board,
    game_to_json,
    json_to_game,
    new_game,
)


class TestSnapshotJson(unittest.TestCase):
    def test_given_board_when_roundtrip_json_then_equal(self):
        board = new_game(seed=11).board
        bj = board_to_json(board)
        self.assertEqual(bj["width"], 10)
        self.assertEqual(bj["height"], 10)
        self.assertEqual(len(bj["grid"]), 100)
        back = board_from_json(json.loads(json.dumps(bj)))
        self.assertEqual(back, board)

        # Accepts numeric strings and coerces to int
        as_text = dict(bj, grid=[str(t) for t in bj["grid"]])
        self.assertEqual(board_from_json(as_text), board)

    def test_given_midgame_when_roundtrip_json_then_same_state(self):
        game = Game()
        game.play(0, 0, 5, 0)
        game.play(0, 1, 1, 1)
        sj = game_to_json(game)
        self.assertEqual(sj["status"], "right_to_play")
        self.assertEqual(sj["turn"], "right")
        self.assertEqual(sj["discovered"], [[0, 0], [5, 0]])
        self.assertEqual(sj["undiscovered"], 98)
        self.assertEqual(sj["movesPlayed"], 2)

        back = json_to_game(json.loads(json.dumps(sj)))
        self.assertEqual(back.board, game.board)
        self.assertEqual(back.status, Status.RIGHT_TO_PLAY)
        self.assertEqual(back.turn, Player.RIGHT)
        self.assertEqual(back.undiscovered(), 98)
        self.assertEqual(back.moves_played, 2)
        self.assertTrue(back.is_discovered(5, 0))
        back.check_invariants()

        # The restored game keeps playing by the same rules
        result = back.play(0, 0, 5, 0)
        self.assertFalse(result.accepted)
        self.assertEqual(back.status, Status.ILLEGAL_MOVE)

    def test_given_illegal_status_when_roundtrip_json_then_turn_preserved(self):
        game = Game()
        game.play(0, 0, 1, 1)
        game.play(4, 4, 4, 4)
        back = json_to_game(game_to_json(game))
        self.assertEqual(back.status, Status.ILLEGAL_MOVE)
        self.assertEqual(back.turn, Player.RIGHT)

    def test_given_won_game_when_roundtrip_json_then_still_over(self):
        game = Game()
        for row in range(5):
            for col in range(10):
                game.play(row, col, row + 5, col)
        back = json_to_game(game_to_json(game))
        self.assertEqual(back.status, Status.LEFT_WINS)
        self.assertEqual(back.winner, Player.LEFT)

    def test_given_inconsistent_snapshots_when_loading_then_value_error(self):
        base = game_to_json(Game())

        half_pair = dict(base, discovered=[[0, 0]], undiscovered=99)
        with self.assertRaises(ValueError):
            json_to_game(half_pair)

        early_win = dict(base, discovered=[[0, 0], [5, 0]], undiscovered=98, status="left_wins")
        with self.assertRaises(ValueError):
            json_to_game(early_win)

        wrong_turn = dict(base, status="right_to_play", turn="left")
        with self.assertRaises(ValueError):
            json_to_game(wrong_turn)

        bad_grid = dict(base, board={"width": 10, "height": 10, "grid": [0] * 100})
        with self.assertRaises(ValueError):
            json_to_game(bad_grid)

        bad_count = dict(base, undiscovered=96)
        with self.assertRaises(ValueError):
            json_to_game(bad_count)

        with self.assertRaises(ValueError):
            json_to_game(dict(base, status="somebody_wins"))

        with self.assertRaises(ValueError):
            json_to_game({"status": "left_to_play", "turn": "left"})

    def test_given_direct_snapshot_when_pair_incomplete_then_rejected(self):
        board = canonical_board()
        with self.assertRaises(ValueError):
            Game.from_snapshot(board, [(0, 0)], turn=Player.LEFT, status=Status.LEFT_TO_PLAY)
        all_but_last = [coord for coord in board.coords() if coord not in ((4, 9), (9, 9))]
        game = Game.from_snapshot(board, all_but_last, turn=Player.RIGHT, status=Status.RIGHT_TO_PLAY)
        self.assertEqual(game.undiscovered(), 2)
        self.assertEqual(game.undiscovered_coords(), [(4, 9), (9, 9)])
        self.assertEqual(game.moves_played, 49)
        result = game.play(4, 9, 9, 9)
        self.assertEqual(result.winner, Player.RIGHT)
        self.assertEqual(game.status, Status.RIGHT_WINS)

    def test_given_board_of_wrong_size_when_loading_then_value_error(self):
        base = game_to_json(Game())
        grid = base["board"]["grid"]
        for width, height in [(-10, -10), (20, 5), (5, 20), (0, 0)]:
            with self.assertRaises(ValueError):
                json_to_game(dict(base, board={"width": width, "height": height, "grid": grid}))
        with self.assertRaises(ValueError):
            board_from_json({"width": 2, "height": 1, "grid": [0, 0]})
        small = Board(width=2, height=2, grid=(0, 1, 1, 0))
        with self.assertRaises(ValueError):
            Game.from_snapshot(small, [], turn=Player.LEFT, status=Status.LEFT_TO_PLAY)

    def test_given_non_integer_counts_when_loading_then_value_error(self):
        base = game_to_json(Game())
        for bad in [dict(base, undiscovered=None), dict(base, movesPlayed=[]), dict(base, movesPlayed={})]:
            with self.assertRaises(ValueError):
                json_to_game(bad)
        with self.assertRaises(ValueError):
            Game.from_snapshot(canonical_board(), [], turn=Player.LEFT, status=Status.LEFT_TO_PLAY,
                               moves_played=[])


if __name__ == '__main__':
    unittest.main(verbosity=2)
