"""Agent that picks moves with memoized minimax search."""

import logging
from typing import Optional

from agents.base import Agent
from games.base import Environment
from search.cache import SearchCache
from search.minimax import RewardFn, minimax
from search.rewards import outcome_reward

logger = logging.getLogger(__name__)


class MinimaxAgent(Agent):
    """Runs one depth-limited minimax search per turn.

    With a depth at least the game's remaining ply count and the default
    outcome_reward this plays perfectly.
    """

    def __init__(
        self,
        agent_id,
        depth: int,
        reward: RewardFn = outcome_reward,
        persist_cache: bool = False,
    ):
        """Initialize minimax agent.

        Args:
            agent_id: Agent whose reward is maximized
            depth: Plies searched per move
            reward: Leaf evaluation (state, agent_id) -> float
            persist_cache: Keep the transposition cache between moves
                instead of starting every search fresh
        """
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        super().__init__(agent_id)
        self.depth = depth
        self.reward = reward
        self.persist_cache = persist_cache
        self.cache = SearchCache()
        self.last_value: Optional[float] = None

    def clear_cache(self):
        """Clear transposition cache between games."""
        self.cache.clear()
        self.last_value = None

    def act(self, state: Environment):
        """Return the best action for the current position.

        Raises:
            RuntimeError: If the search finds no action, i.e. the state is
                terminal or the search depth is 0, or the environment
                reported no valid actions for a non-terminal state
        """
        if not self.persist_cache:
            self.cache.clear()

        value, action = minimax(state, self.agent_id, self.reward, self.depth, self.cache)
        self.last_value = value
        if action is None:
            raise RuntimeError(
                f"{self!r} found no move (value={value}, depth={self.depth}, "
                f"terminal={state.is_terminal()})"
            )

        logger.debug(f"{self!r} plays {action} (value={value}, cache entries={len(self.cache)})")
        return action
