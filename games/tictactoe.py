"""Pure Python TicTacToe implementation."""

import numpy as np
from typing import Iterable, List, Optional

from games.base import Environment


class TicTacToeGame(Environment[int, int]):
    """3×3 TicTacToe game environment.

    Board representation:
        0 = empty
        1 = player 1 (X)
        2 = player 2 (O)

    Move encoding:
        - Integers 0-8: board positions (row * 3 + col)

    Rules:
        - Standard TicTacToe rules, X moves first
        - First player to get 3-in-a-row wins (horizontal, vertical, diagonal)
        - Game ends in draw if board is full with no winner
    """

    BOARD_SIZE = 3
    EMPTY = 0
    PLAYER_1 = 1  # X
    PLAYER_2 = 2  # O

    SYMBOLS = {EMPTY: '.', PLAYER_1: 'X', PLAYER_2: 'O'}

    def __init__(self):
        """Initialize an empty board with X to move."""
        self.board = np.zeros((self.BOARD_SIZE, self.BOARD_SIZE), dtype=np.int8)
        self.current_player = self.PLAYER_1

    @classmethod
    def initial_state(cls) -> "TicTacToeGame":
        return cls()

    @classmethod
    def from_moves(cls, moves: Iterable[int]) -> "TicTacToeGame":
        """Build a position by playing moves from the empty board.

        Raises:
            ValueError: If any move is illegal at the point it is played
        """
        game = cls()
        for move in moves:
            game.update(move)
        return game

    def copy(self) -> "TicTacToeGame":
        """Return an independent copy of this state."""
        other = TicTacToeGame.__new__(TicTacToeGame)
        other.board = self.board.copy()
        other.current_player = self.current_player
        return other

    def _opponent(self) -> int:
        return self.PLAYER_2 if self.current_player == self.PLAYER_1 else self.PLAYER_1

    def _lines(self) -> List[np.ndarray]:
        b = self.board
        return [*b, *b.T, b.diagonal(), np.fliplr(b).diagonal()]

    def _check_winner(self) -> Optional[int]:
        """Return the player owning a complete line, None otherwise."""
        for line in self._lines():
            if line[0] != self.EMPTY and (line == line[0]).all():
                return int(line[0])
        return None

    def valid_actions(self) -> List[int]:
        """Return empty board positions in ascending order.

        Returns:
            List of move indices, empty if the game is over
        """
        if self.is_terminal():
            return []
        return [int(i) for i in np.flatnonzero(self.board == self.EMPTY)]

    def is_valid(self, action: int) -> bool:
        if not isinstance(action, (int, np.integer)) or not 0 <= action < self.BOARD_SIZE ** 2:
            return False
        if self.board.flat[action] != self.EMPTY:
            return False
        return not self.is_terminal()

    def update(self, action: int) -> bool:
        """Place the current player's mark and pass the turn.

        Args:
            action: Move index (0-8 for board positions)

        Returns:
            True, a legal move always changes the board

        Raises:
            ValueError: If move is not legal
        """
        if not self.is_valid(action):
            raise ValueError(f"Illegal move: {action}. Legal moves: {self.valid_actions()}")

        self.board.flat[action] = self.current_player
        self.current_player = self._opponent()
        return True

    def what_if(self, action: int) -> "TicTacToeGame":
        child = self.copy()
        child.update(action)
        return child

    def is_terminal(self) -> bool:
        """Check if game has ended.

        Game ends when:
        - A player has 3-in-a-row
        - Board is full (draw)
        """
        if self._check_winner() is not None:
            return True
        return not (self.board == self.EMPTY).any()

    def turn(self) -> int:
        return self.current_player

    def winner(self) -> Optional[int]:
        return self._check_winner()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeGame):
            return NotImplemented
        return (self.current_player == other.current_player
                and np.array_equal(self.board, other.board))

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.current_player))

    def render(self) -> str:
        """Return the board as three rows of X, O and '.'."""
        return "\n".join(" ".join(self.SYMBOLS[int(cell)] for cell in row) for row in self.board)

    def __repr__(self) -> str:
        """String representation of the board."""
        lines = ["  " + " ".join(str(i) for i in range(self.BOARD_SIZE))]
        for i, row in enumerate(self.board):
            lines.append(f"{i} " + " ".join(self.SYMBOLS[int(cell)] for cell in row))
        lines.append(f"Current player: {self.SYMBOLS[self.current_player]}")
        return "\n".join(lines)
