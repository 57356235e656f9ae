from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from tenacity import retry, stop_after_attempt, RetryCallState
import asyncio
import httpx
import logging


class Fortune(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str = Field(min_length=1)


FALLBACK_FORTUNE = Fortune(id=42, text="Your future is unclear.")


def with_fallback(value):
    """Run the wrapped coroutine once; on any exception log it and return ``value``."""

    def fallback(retry_state: RetryCallState):
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        logging.warning("%s failed, using fallback: %r", retry_state.fn.__name__, exc)
        return value

    return retry(stop=stop_after_attempt(1), retry_error_callback=fallback)


class FortuneClient:
    def __init__(self, base_url: str, timeout: float = 2.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _get_random(self) -> Fortune:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            r = await client.get(f"{self.base_url}/random")
            r.raise_for_status()
            return Fortune.model_validate(r.json())

    @with_fallback(FALLBACK_FORTUNE)
    async def fetch_random_fortune(self) -> Fortune:
        # httpx times each phase separately; bound the whole round-trip too
        return await asyncio.wait_for(self._get_random(), timeout=self.timeout)
