from unittest import TestCase, main

from numpy import array

from board2048.core.direction import Direction
from board2048.core.gameboard import slide_and_merge
from board2048.core.gamemove import can_shift, illegal_directions, legal_directions


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_directions(board)
        self.assertEqual(set(illegal), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.DOWN, Direction.RIGHT})

    def test_locked_board(self):
        """
        Test that no direction is legal on a locked board.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])

    def test_legality_matches_shift(self):
        """
        Test that a direction is legal exactly when its shift changes the board.
        """
        boards = [
            array([[2, 4, 8, 16], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
            array([[2, 2, 4, 0], [0, 0, 0, 0], [4, 0, 0, 4], [0, 8, 0, 0]]),
            array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]]),
        ]
        for board in boards:
            for direction in Direction:
                _, shifted = slide_and_merge(board, direction)
                changed = not (shifted == board).all()
                self.assertEqual(can_shift(board, direction), changed, msg=f'{direction} on {board.tolist()}')

    def test_column_pairs_on_full_board(self):
        """
        Test that a full board with pairs only in a column moves vertically.
        """
        board = array([[2, 4, 8, 16], [2, 8, 16, 32], [4, 16, 32, 64], [8, 32, 64, 128]])
        self.assertEqual(legal_directions(board), [Direction.UP, Direction.DOWN])

        # ##>: The chained column collapses in one shift.
        gained, shifted = slide_and_merge(board, Direction.UP)
        self.assertEqual(shifted[:, 0].tolist(), [16, 0, 0, 0])
        self.assertEqual(gained, 28)
        self.assertEqual(illegal_directions(board), [Direction.LEFT, Direction.RIGHT])

    def test_can_shift_accepts_names(self):
        """
        Test that direction names are accepted.
        """
        board = array([[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(can_shift(board, 'left'))
        self.assertFalse(can_shift(board, 'RIGHT'))


if __name__ == '__main__':
    main()
