"""Memoized minimax search over game environments."""

from search.cache import EXACT_DEPTH, CacheEntry, SearchCache
from search.minimax import fold_best, minimax
from search.rewards import outcome_reward, solved_reward

__all__ = [
    "EXACT_DEPTH",
    "CacheEntry",
    "SearchCache",
    "fold_best",
    "minimax",
    "outcome_reward",
    "solved_reward",
]
