"""Unit tests for TicTacToe game environment."""

import pytest
import numpy as np
from games.tictactoe import TicTacToeGame


def test_tictactoe_init():
    """Test TicTacToe initialization."""
    game = TicTacToeGame.initial_state()

    # Check initial board is empty
    expected_board = np.zeros((3, 3), dtype=np.int8)
    assert np.array_equal(game.board, expected_board)

    # X moves first
    assert game.turn() == TicTacToeGame.PLAYER_1

    # All squares legal, in ascending order
    assert game.valid_actions() == list(range(9))
    assert not game.is_terminal()
    assert game.winner() is None


def test_tictactoe_valid_actions():
    """Test valid actions are the empty squares."""
    game = TicTacToeGame()

    game.update(0)
    assert game.valid_actions() == list(range(1, 9))

    game.update(4)
    legal = game.valid_actions()
    assert len(legal) == 7
    assert 0 not in legal
    assert 4 not in legal


def test_tictactoe_update():
    """Test valid moves update board and switch players."""
    game = TicTacToeGame()

    assert game.update(0) is True
    assert game.board[0, 0] == TicTacToeGame.PLAYER_1
    assert game.turn() == TicTacToeGame.PLAYER_2

    game.update(4)
    assert game.board[1, 1] == TicTacToeGame.PLAYER_2
    assert game.turn() == TicTacToeGame.PLAYER_1


def test_tictactoe_invalid_move():
    """Test that invalid moves raise ValueError."""
    game = TicTacToeGame()
    game.update(0)

    # Occupied square
    with pytest.raises(ValueError):
        game.update(0)

    # Off the board
    with pytest.raises(ValueError):
        game.update(10)
    with pytest.raises(ValueError):
        game.update(-1)


def test_tictactoe_no_moves_after_game_over():
    """Test that a won game accepts no further moves."""
    # X X X
    # O O .
    # . . .
    game = TicTacToeGame.from_moves([0, 3, 1, 4, 2])

    assert game.is_terminal()
    assert game.valid_actions() == []
    assert not game.is_valid(5)
    with pytest.raises(ValueError):
        game.update(5)


def test_tictactoe_is_valid():
    game = TicTacToeGame.from_moves([4])
    assert game.is_valid(0)
    assert not game.is_valid(4)
    assert not game.is_valid(9)
    assert not game.is_valid("a")


def test_tictactoe_what_if_does_not_mutate():
    """what_if returns a new state and leaves the original alone."""
    game = TicTacToeGame.from_moves([0])
    before = game.copy()

    child = game.what_if(4)

    assert game == before
    assert child is not game
    assert child.board[1, 1] == TicTacToeGame.PLAYER_2
    assert child.turn() == TicTacToeGame.PLAYER_1


def test_tictactoe_copy_is_independent():
    game = TicTacToeGame.from_moves([0, 4])
    other = game.copy()
    other.update(8)

    assert game.board[2, 2] == TicTacToeGame.EMPTY
    assert game != other


def test_tictactoe_transpositions_are_equal():
    """Different move orders reaching the same position compare and hash equal."""
    a = TicTacToeGame.from_moves([0, 4, 8])
    b = TicTacToeGame.from_moves([8, 4, 0])

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_tictactoe_side_to_move_distinguishes_states():
    a = TicTacToeGame()
    b = TicTacToeGame()
    b.current_player = TicTacToeGame.PLAYER_2

    assert a != b


def test_tictactoe_terminal_win_horizontal():
    """Test horizontal win detection."""
    game = TicTacToeGame()
    game.board[0, :] = TicTacToeGame.PLAYER_1

    assert game.is_terminal()
    assert game.winner() == TicTacToeGame.PLAYER_1


def test_tictactoe_terminal_win_vertical():
    """Test vertical win detection."""
    game = TicTacToeGame()
    game.board[:, 0] = TicTacToeGame.PLAYER_2

    assert game.is_terminal()
    assert game.winner() == TicTacToeGame.PLAYER_2


def test_tictactoe_terminal_win_diagonal():
    """Test diagonal win detection."""
    game = TicTacToeGame()
    game.board[0, 0] = TicTacToeGame.PLAYER_1
    game.board[1, 1] = TicTacToeGame.PLAYER_1
    game.board[2, 2] = TicTacToeGame.PLAYER_1

    assert game.is_terminal()
    assert game.winner() == TicTacToeGame.PLAYER_1


def test_tictactoe_terminal_win_anti_diagonal():
    """Test anti-diagonal win detection."""
    game = TicTacToeGame()
    game.board[0, 2] = TicTacToeGame.PLAYER_2
    game.board[1, 1] = TicTacToeGame.PLAYER_2
    game.board[2, 0] = TicTacToeGame.PLAYER_2

    assert game.is_terminal()
    assert game.winner() == TicTacToeGame.PLAYER_2


def test_tictactoe_terminal_draw():
    """Test draw when board is full with no winner."""
    game = TicTacToeGame()

    # X O X
    # X O O
    # O X X
    game.board = np.array([
        [1, 2, 1],
        [1, 2, 2],
        [2, 1, 1]
    ], dtype=np.int8)

    assert game.is_terminal()
    assert game.winner() is None


def test_tictactoe_not_terminal():
    """Test that incomplete game is not terminal."""
    game = TicTacToeGame.from_moves([0, 1])

    assert not game.is_terminal()
    assert game.winner() is None


def test_tictactoe_winner_is_plain_int():
    game = TicTacToeGame.from_moves([0, 3, 1, 4, 2])
    assert type(game.winner()) is int


def test_tictactoe_full_game_sequence():
    """Play a game to an X win along the diagonal."""
    game = TicTacToeGame()

    for move in [0, 1, 4, 2]:
        game.update(move)
        assert not game.is_terminal()

    game.update(8)
    assert game.is_terminal()
    assert game.winner() == TicTacToeGame.PLAYER_1


def test_tictactoe_render():
    game = TicTacToeGame.from_moves([0, 4])
    assert game.render() == "X . .\n. O .\n. . ."

    text = repr(game)
    assert "Current player: X" in text
