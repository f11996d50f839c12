"""Uniformly random agent, a baseline opponent."""

import random
from typing import Optional

from agents.base import Agent
from games.base import Environment


class RandomAgent(Agent):
    """Plays a uniformly random valid action."""

    def __init__(self, agent_id, seed: Optional[int] = None):
        super().__init__(agent_id)
        self.rng = random.Random(seed)

    def act(self, state: Environment):
        actions = state.valid_actions()
        if not actions:
            raise RuntimeError(f"{self!r} has no valid action to play")
        return self.rng.choice(actions)
