"""Reward functions for win/draw/loss games."""

from games.base import Environment
from search.minimax import fold_best


def outcome_reward(state: Environment, agent_id) -> float:
    """Score a terminal state for agent_id.

    Returns:
        1.0 if agent_id won
        0.0 if draw, or if the state is not terminal (depth cutoff
            heuristic: assume a draw)
        -1.0 if another agent won
    """
    if not state.is_terminal():
        return 0.0
    winner = state.winner()
    if winner is None:
        return 0.0
    return 1.0 if winner == agent_id else -1.0


def solved_reward(state: Environment, agent_id) -> float:
    """Game-theoretic outcome of state for agent_id under perfect play.

    Expands the full game tree down to terminal states with no depth limit
    and no memoization, folding like minimax on outcome_reward. Only
    tractable for small games; for anything larger search with
    ``search.minimax`` and use outcome_reward as the leaf reward.
    """
    if state.is_terminal():
        return outcome_reward(state, agent_id)

    maximizing = state.turn() == agent_id
    candidates = (
        (action, solved_reward(state.what_if(action), agent_id))
        for action in state.valid_actions()
    )
    value, _ = fold_best(candidates, maximizing)
    return value
