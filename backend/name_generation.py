"""
Name Generation Engine
======================

Drives the model in a bounded retry loop until enough fresh names exist:
1. Ask the model for a batch of names for the category
2. Parse "Name - Meaning" lines, dedupe within the batch
3. Drop names already returned for this category (history) or earlier in this request
4. Repeat until TARGET_COUNT names are collected or MAX_ATTEMPTS is used up
5. Remember the new names, rank the first TARGET_COUNT and attach trademark flags
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from errors import GenerationFailed, InvalidInput, UpstreamUnavailable
from name_parser import NameCandidate, dedupe_candidates, parse_names
from name_store import NameHistoryStore, category_key
from prompts import build_generation_prompt
from trademark_check import TrademarkChecker

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
TARGET_COUNT = 10


class ModelClient(Protocol):
    async def complete(self, prompt: str) -> str: ...


@dataclass
class RankedName:
    rank: int
    name: str
    meaning: str
    trademark: Dict[str, bool] = field(default_factory=dict)


class NameGenerator:
    def __init__(
        self,
        model_client: ModelClient,
        store: NameHistoryStore,
        trademark_checker: TrademarkChecker,
        max_attempts: int = MAX_ATTEMPTS,
        target_count: int = TARGET_COUNT,
    ):
        self.model_client = model_client
        self.store = store
        self.trademark_checker = trademark_checker
        self.max_attempts = max_attempts
        self.target_count = target_count

    async def _collect_fresh(self, category: str, key: str, is_regenerate: bool) -> List[NameCandidate]:
        accumulated: List[NameCandidate] = []
        seen = set()
        last_batch: Optional[List[NameCandidate]] = None
        failures = 0

        for attempt in range(1, self.max_attempts + 1):
            if len(accumulated) >= self.target_count:
                break

            prompt = build_generation_prompt(category)
            try:
                raw_text = await self.model_client.complete(prompt)
            except UpstreamUnavailable as e:
                failures += 1
                logger.warning(f"Generation attempt {attempt}/{self.max_attempts} for '{key}' failed: {e}")
                continue

            batch = dedupe_candidates(parse_names(raw_text))
            last_batch = batch
            fresh = await self.store.filter_fresh(key, batch)
            fresh = [c for c in fresh if c.key not in seen]
            seen.update(c.key for c in fresh)
            accumulated.extend(fresh)
            logger.info(
                f"Attempt {attempt}/{self.max_attempts} for '{key}': "
                f"{len(batch)} parsed, {len(fresh)} fresh, {len(accumulated)} total"
            )

        if accumulated:
            return accumulated

        if is_regenerate and last_batch:
            logger.info(f"No fresh names for '{key}', falling back to {len(last_batch)} repeated names")
            return last_batch

        if failures == self.max_attempts:
            logger.error(f"All {self.max_attempts} generation attempts failed for '{key}'")
            raise GenerationFailed()

        return accumulated

    async def generate(self, category: str, is_regenerate: bool = False) -> List[RankedName]:
        if not category or not category.strip():
            raise InvalidInput("Category is required")

        key = category_key(category)
        await self.store.record_search(key)

        candidates = await self._collect_fresh(category, key, is_regenerate)
        await self.store.merge(key, candidates)

        selected = candidates[:self.target_count]
        trademarks = await self.trademark_checker.check_many([c.name for c in selected])

        return [
            RankedName(rank=i, name=c.name, meaning=c.meaning, trademark=tm)
            for i, (c, tm) in enumerate(zip(selected, trademarks), start=1)
        ]
