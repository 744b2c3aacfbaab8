"""
In-memory name history and search frequency store.

Owns two process-wide tables:
- history per category key: ordered, unique by lowercased name, capped at HISTORY_LIMIT
- search frequency per category key: monotonically increasing hit count

Every read-modify-write runs under a lock for that category key so concurrent
requests for the same category never lose an update.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from name_parser import NameCandidate, dedupe_candidates

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 30


def category_key(category: str) -> str:
    # trimmed too, so " Tea" and "tea" share one history and one hit count
    return category.strip().lower()


class NameHistoryStore:
    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self.history_limit = history_limit
        self._history: Dict[str, List[NameCandidate]] = {}
        self._frequency: Dict[str, int] = {}
        self._locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def _lock(self, key: str) -> asyncio.Lock:
        return self._locks[key]

    async def record_search(self, key: str) -> int:
        async with self._lock(key):
            count = self._frequency.get(key, 0) + 1
            self._frequency[key] = count
            self._history.setdefault(key, [])
        return count

    async def filter_fresh(self, key: str, candidates: Iterable[NameCandidate]) -> List[NameCandidate]:
        """Return candidates not yet in the category history. Does not mutate history."""
        async with self._lock(key):
            known = {c.key for c in self._history.get(key, [])}
        return [c for c in candidates if c.key not in known]

    async def merge(self, key: str, fresh: Iterable[NameCandidate]) -> List[NameCandidate]:
        """
        Append fresh names to the history, keep the earliest copy of any repeated
        name and truncate to the most recent history_limit entries.
        """
        async with self._lock(key):
            combined = dedupe_candidates(self._history.get(key, []) + list(fresh))
            merged = combined[-self.history_limit:]
            self._history[key] = merged
        logger.debug(f"History for '{key}' now holds {len(merged)} names")
        return list(merged)

    def history(self, key: str) -> List[NameCandidate]:
        return list(self._history.get(key, []))

    def frequencies(self) -> Dict[str, int]:
        return dict(self._frequency)
