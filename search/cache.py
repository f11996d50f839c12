"""Transposition cache for memoized minimax search."""

from typing import Any, Dict, Hashable, NamedTuple, Optional

# Depth recorded for terminal states: their value holds for any query depth.
EXACT_DEPTH = float('inf')


class CacheEntry(NamedTuple):
    """Result of searching one state.

    Attributes:
        value: Backed-up value from the searching agent's perspective
        action: Best action found, None at terminal or cutoff states
        depth: Plies searched below the state, EXACT_DEPTH if terminal
    """

    value: float
    action: Optional[Any]
    depth: float


class SearchCache:
    """Mapping from states to their search results, keyed on search depth.

    An entry answers a query only if it was computed at least as deep as the
    query asks. The cache is owned by the caller: reset it per search for
    isolation, or keep it across searches (e.g. across the turns of one
    game) to reuse repeated subtrees. Entries are only valid for a single
    perspective agent and reward function.

    Not safe to share between concurrent searches.
    """

    def __init__(self):
        self._entries: Dict[Hashable, CacheEntry] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def lookup(self, state: Hashable, depth: int) -> Optional[CacheEntry]:
        """Return the entry for state if it was searched at least depth plies."""
        entry = self._entries.get(state)
        if entry is not None and entry.depth >= depth:
            self.hits += 1
            return entry
        self.misses += 1
        return None

    def store(self, state: Hashable, value: float, action: Optional[Any], depth: float) -> None:
        """Record a search result, overwriting any shallower entry."""
        self._entries[state] = CacheEntry(value, action, depth)
        self.stores += 1

    def get(self, state: Hashable) -> Optional[CacheEntry]:
        """Return the stored entry for state regardless of depth."""
        return self._entries.get(state)

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __contains__(self, state: Hashable) -> bool:
        return state in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"SearchCache(entries={len(self)}, hits={self.hits}, "
                f"misses={self.misses}, stores={self.stores})")
