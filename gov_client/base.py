"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

import settings

# Default settings
API_BASE_URL = settings.API_BASE_URL
API_KEY = settings.API_KEY
API_TIMEOUT = settings.API_TIMEOUT


def set_api_config(base_url: str, timeout: int, api_key: str | None = None) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT, API_KEY
    API_BASE_URL = base_url.rstrip("/")
    API_TIMEOUT = timeout
    API_KEY = api_key


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _headers() -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if API_KEY:
        headers["X-API-Key"] = API_KEY
    return headers


class BaseClient:
    """Base async HTTP client with bounded concurrency and exponential backoff."""

    def __init__(self, max_concurrent: int = settings.MAX_CONCURRENT, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=API_BASE_URL,
            headers=_headers(),
            timeout=API_TIMEOUT,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _get(self, path: str) -> dict | list:
        """GET request with retry logic."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside 'async with'")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(f"/{path.lstrip('/')}")
            if resp.is_error:
                logger.warning("API error ({}) for {}: {}", resp.status_code, path, resp.text or resp.reason_phrase)
            resp.raise_for_status()
            return resp.json()


async def safe_request(coro, default=None):
    """Await coro; log and return default on HTTP or decoding failure."""
    try:
        return await coro
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Request failed: {}", e)
        return default
