"""Game environments searchable by the minimax engine."""

from games.base import Environment
from games.tictactoe import TicTacToeGame

__all__ = ["Environment", "TicTacToeGame"]
