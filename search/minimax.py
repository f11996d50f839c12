"""Depth-limited minimax search with a transposition cache.

Every agent is assumed to play on the same reward function, evaluated from
the perspective of one agent: that agent maximizes it, everybody else
minimizes it. Works for any game implementing ``games.base.Environment``.
"""

import copy
import logging
import math
from typing import Callable, Iterable, Optional, Tuple, TypeVar

from games.base import Environment
from search.cache import EXACT_DEPTH, SearchCache

logger = logging.getLogger(__name__)

Action = TypeVar("Action")
AgentId = TypeVar("AgentId")

RewardFn = Callable[[Environment, AgentId], float]
SearchResult = Tuple[float, Optional[Action]]


def fold_best(candidates: Iterable[Tuple[Action, float]], maximizing: bool) -> SearchResult:
    """Pick the best (action, value) pair.

    A candidate replaces the incumbent only if its value is strictly better,
    so among equal values the first one wins. With no candidates the result
    is (-inf, None) when maximizing and (+inf, None) when minimizing.

    Returns:
        (best_value, best_action)
    """
    best_value = -math.inf if maximizing else math.inf
    best_action = None
    for action, value in candidates:
        if (value > best_value) if maximizing else (value < best_value):
            best_value = value
            best_action = action
    return best_value, best_action


def minimax(
    state: Environment,
    agent_id,
    reward: RewardFn,
    depth: int,
    cache: Optional[SearchCache] = None,
) -> SearchResult:
    """Return the value of state for agent_id and the action achieving it.

    Args:
        state: Position to search from (not modified)
        agent_id: Perspective agent, the one maximizing reward
        reward: Function (state, agent_id) -> float. Called on terminal
            states and on non-terminal states where depth runs out.
        depth: Maximum number of plies to look ahead (>= 0)
        cache: Transposition cache. Pass the same instance across calls to
            reuse work; a fresh one is used if None. Only share a cache
            between calls with the same agent_id and reward.

    Returns:
        (value, best_action). best_action is None at terminal states and at
        depth 0. A non-terminal state without valid actions yields
        (-inf or +inf, None), which signals a broken environment rather
        than a move recommendation.

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"Search depth must be non-negative, got {depth}")
    if cache is None:
        cache = SearchCache()

    # Cache keys must never be mutated; the caller may keep updating state.
    root = copy.deepcopy(state)
    value, action = _search(root, agent_id, reward, depth, cache)

    if action is None and depth > 0 and not root.is_terminal():
        logger.warning(f"No valid actions in non-terminal state {root!r}; search result is a sentinel")

    logger.debug(
        f"minimax(depth={depth}): value={value}, action={action}, "
        f"cache entries={len(cache)}, hits={cache.hits}"
    )
    return value, action


def _search(state, agent_id, reward, depth, cache) -> SearchResult:
    entry = cache.lookup(state, depth)
    if entry is not None:
        return entry.value, entry.action

    if state.is_terminal():
        value = reward(state, agent_id)
        cache.store(state, value, None, EXACT_DEPTH)
        return value, None

    if depth == 0:
        # Heuristic cutoff
        value = reward(state, agent_id)
        cache.store(state, value, None, 0)
        return value, None

    maximizing = state.turn() == agent_id
    candidates = (
        (action, _search(state.what_if(action), agent_id, reward, depth - 1, cache)[0])
        for action in state.valid_actions()
    )
    value, action = fold_best(candidates, maximizing)

    cache.store(state, value, action, depth)
    return value, action
