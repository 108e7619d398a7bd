from ataxx.core.board import Board, BLUE, RED


class Evaluator:
    """Material-difference evaluation for Ataxx positions."""

    def evaluate(self, board: Board, winning_value: int) -> int:
        """
        Return +winning_value if RED has won, -winning_value if BLUE has won
        and 0 for a drawn finished game.

        Undecided positions score the piece-count difference from the point
        of view of the side to move at BOARD, not of a fixed colour.
        """
        winner = board.winner()
        if winner is not None:
            if winner is RED:
                return winning_value
            if winner is BLUE:
                return -winning_value
            return 0
        mover = board.color_to_move()
        return board.piece_count(mover) - board.piece_count(mover.opposite())
