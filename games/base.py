"""Abstract base class for searchable game environments."""

import copy
from abc import ABC, abstractmethod
from typing import Generic, Hashable, List, Optional, TypeVar

Action = TypeVar("Action")
AgentId = TypeVar("AgentId", bound=Hashable)

E = TypeVar("E", bound="Environment")


class Environment(ABC, Generic[Action, AgentId]):
    """Abstract interface for all game environments.

    An instance is one game state. Any game implementing this interface can
    be searched by ``search.minimax``; the search itself is game-agnostic.

    Equal states must hash equally and have identical futures (same valid
    actions, same terminal status, same turn). The search cache relies on
    this to reuse results across move orders that reach the same position.
    """

    @classmethod
    @abstractmethod
    def initial_state(cls: "type[E]") -> E:
        """Return the canonical starting configuration."""
        pass

    @abstractmethod
    def update(self, action: Action) -> bool:
        """Apply an action in place.

        Args:
            action: Action drawn from valid_actions()

        Returns:
            True if the state changed
        """
        pass

    def what_if(self: E, action: Action) -> E:
        """Return the state that would result from action, leaving self untouched."""
        child = copy.deepcopy(self)
        child.update(action)
        return child

    @abstractmethod
    def valid_actions(self) -> List[Action]:
        """Return every legal action for the agent whose turn it is.

        The order must be deterministic: the search breaks ties in favour
        of the earliest action.
        """
        pass

    def is_valid(self, action: Action) -> bool:
        """Check whether action is currently legal."""
        return action in self.valid_actions()

    @abstractmethod
    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        pass

    @abstractmethod
    def turn(self) -> AgentId:
        """Return the agent whose action is pending."""
        pass

    @abstractmethod
    def winner(self) -> Optional[AgentId]:
        """Return the winning agent of a terminal state, None on a draw.

        Should only be relied on when is_terminal() is True.
        """
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass
