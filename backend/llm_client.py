"""
Model Client
============
Sends a prompt to an Ollama-compatible text generation backend and returns the
raw completion text. Every failure mode (connection error, timeout, bad status,
unexpected payload) is raised as UpstreamUnavailable so the caller can treat it
as one failed attempt.
"""

import asyncio
import logging
import os
from pathlib import Path

import httpx
from dotenv import load_dotenv

from errors import UpstreamUnavailable

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

logger = logging.getLogger(__name__)

OLLAMA_URL = os.environ.get('OLLAMA_URL', 'http://localhost:11434')
OLLAMA_MODEL = os.environ.get('OLLAMA_MODEL', 'phi3')
LLM_TIMEOUT_SECONDS = float(os.environ.get('LLM_TIMEOUT_SECONDS', '60'))


class OllamaClient:
    def __init__(
        self,
        base_url: str = OLLAMA_URL,
        model: str = OLLAMA_MODEL,
        timeout: float = LLM_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def complete(self, prompt: str) -> str:
        try:
            # wait_for bounds the whole exchange, the httpx timeout only covers each socket op
            return await asyncio.wait_for(self._post(prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Model call timed out after {self.timeout}s ({self.model})")
            raise UpstreamUnavailable(f"model call timed out after {self.timeout}s")
        except httpx.HTTPError as e:
            logger.warning(f"Model call failed ({self.model}): {e}")
            raise UpstreamUnavailable(str(e)) from e

    async def _post(self, prompt: str) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(
                f"{self.base_url}/api/generate",
                json={"model": self.model, "prompt": prompt, "stream": False},
            )

        if response.status_code != 200:
            raise UpstreamUnavailable(f"model backend returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailable("model backend returned invalid JSON") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise UpstreamUnavailable("model backend response has no text")
        return text
