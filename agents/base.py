"""Abstract base class for game-playing agents."""

from abc import ABC, abstractmethod

from games.base import Environment


class Agent(ABC):
    """A participant that picks one action per turn.

    Attributes:
        agent_id: Identifier matching what the environment's turn() returns
    """

    def __init__(self, agent_id):
        self.agent_id = agent_id

    @abstractmethod
    def act(self, state: Environment):
        """Return an action from state.valid_actions(). state is not modified."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.agent_id!r})"
