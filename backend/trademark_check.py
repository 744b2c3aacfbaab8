"""
Trademark Aggregator
====================
Checks each generated name against the configured trademark registries.

Result per name is a {jurisdiction: bool} mapping where True means a mark
already exists (name unavailable). A failed or timed out lookup is reported as
False: a registry outage should not hide a usable name, and it must never fail
the generation request. Results are not cached.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional

import httpx
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

logger = logging.getLogger(__name__)

USPTO_SEARCH_URL = os.environ.get(
    'USPTO_SEARCH_URL',
    'https://developer.uspto.gov/ibd-api/v1/application/publications',
)
TRADEMARK_TIMEOUT_SECONDS = float(os.environ.get('TRADEMARK_TIMEOUT_SECONDS', '10'))
DEFAULT_JURISDICTIONS = [
    j.strip() for j in os.environ.get('TRADEMARK_JURISDICTIONS', 'us,india').split(',') if j.strip()
]

RegistryLookup = Callable[[str], Awaitable[bool]]


class UsptoRegistry:
    """USPTO publication search, a mark exists when numFound > 0"""

    def __init__(self, search_url: str = USPTO_SEARCH_URL, timeout: float = TRADEMARK_TIMEOUT_SECONDS,
                 transport: httpx.AsyncBaseTransport = None):
        self.search_url = search_url
        self.timeout = timeout
        self.transport = transport

    async def __call__(self, name: str) -> bool:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.get(self.search_url, params={"searchText": name, "rows": 1})
            response.raise_for_status()
            data = response.json()
        found = (data.get("response") or {}).get("numFound") or 0
        return found > 0


async def india_registry(name: str) -> bool:
    # IP India has no public search API; simulated as always available
    logger.debug(f"Simulated India trademark check for '{name}'")
    return False


def default_registries(jurisdictions: Optional[List[str]] = None) -> Dict[str, RegistryLookup]:
    known = {
        "us": UsptoRegistry(),
        "india": india_registry,
    }
    selected = {}
    for jurisdiction in jurisdictions or DEFAULT_JURISDICTIONS:
        if jurisdiction not in known:
            logger.warning(f"Unknown trademark jurisdiction '{jurisdiction}' ignored")
            continue
        selected[jurisdiction] = known[jurisdiction]
    return selected


class TrademarkChecker:
    def __init__(self, registries: Dict[str, RegistryLookup] = None, timeout: float = TRADEMARK_TIMEOUT_SECONDS):
        self.registries = registries if registries is not None else default_registries()
        self.timeout = timeout

    async def _lookup(self, jurisdiction: str, lookup: RegistryLookup, name: str) -> bool:
        try:
            return bool(await asyncio.wait_for(lookup(name), timeout=self.timeout))
        except asyncio.TimeoutError:
            logger.warning(f"{jurisdiction} trademark lookup timed out for '{name}'")
        except Exception as e:
            logger.warning(f"{jurisdiction} trademark lookup failed for '{name}': {e}")
        return False

    async def check_availability(self, name: str) -> Dict[str, bool]:
        jurisdictions = list(self.registries)
        results = await asyncio.gather(*[
            self._lookup(jurisdiction, self.registries[jurisdiction], name)
            for jurisdiction in jurisdictions
        ])
        return dict(zip(jurisdictions, results))

    async def check_many(self, names: List[str]) -> List[Dict[str, bool]]:
        """Check several names concurrently, results line up with the input order"""
        return list(await asyncio.gather(*[self.check_availability(name) for name in names]))
