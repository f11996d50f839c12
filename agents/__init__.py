"""Agents built on top of the search engine, and the play loop."""

from agents.base import Agent
from agents.minimax_agent import MinimaxAgent
from agents.play import play
from agents.random_agent import RandomAgent

__all__ = ["Agent", "MinimaxAgent", "RandomAgent", "play"]
