"""Turn-alternation loop between two agents."""

import logging
from typing import List, Optional, Tuple

from agents.base import Agent
from games.base import Environment

logger = logging.getLogger(__name__)


def play(
    env: Environment,
    first: Agent,
    second: Agent,
    max_plies: Optional[int] = None,
) -> List[Tuple[object, object]]:
    """Play env to the end, mutating it in place.

    The agent to move is whichever one env.turn() names, so the order of
    first and second does not decide who starts.

    Args:
        env: Live game state, updated with every move
        first: One participant
        second: The other participant
        max_plies: Stop after this many moves even if the game is not over

    Returns:
        Move log as (agent_id, action) pairs

    Raises:
        ValueError: If env.turn() names neither agent, or an agent picks an
            invalid action
    """
    agents = {first.agent_id: first, second.agent_id: second}
    log = []

    while not env.is_terminal():
        if max_plies is not None and len(log) >= max_plies:
            break

        agent_id = env.turn()
        if agent_id not in agents:
            raise ValueError(f"No agent for {agent_id!r}; playing {list(agents)}")

        action = agents[agent_id].act(env)
        if not env.is_valid(action):
            raise ValueError(f"Agent {agent_id!r} chose invalid action {action!r}")

        env.update(action)
        log.append((agent_id, action))
        logger.debug(f"Ply {len(log)}: {agent_id!r} -> {action!r}")

    if env.is_terminal():
        winner = env.winner()
        logger.info(f"Game over after {len(log)} plies, winner: {winner if winner is not None else 'draw'}")
    return log
