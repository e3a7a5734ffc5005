"""Resilient HTTP client for the text-generation backend.

Talks to an OpenAI-compatible ``/chat/completions`` endpoint with connection
pooling, retry with exponential backoff, a circuit breaker and structured
errors.
"""

import asyncio
import logging
import time
from typing import Any

import httpx

logger = logging.getLogger("clarify.ai.http")

# Retry configuration
MAX_RETRIES = 3
RETRY_BASE_DELAY = 1.0  # seconds; doubles each retry
RETRYABLE_STATUS_CODES = {502, 503, 504, 429}

# Circuit breaker configuration
CIRCUIT_FAILURE_THRESHOLD = 5
CIRCUIT_RECOVERY_TIMEOUT = 30.0  # seconds

COMPLETIONS_PATH = "/chat/completions"


class CompletionAPIError(Exception):
    """Structured error from the text-generation backend."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        status_code: int = 0,
        body: str = "",
    ) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class CircuitOpenError(CompletionAPIError):
    """Raised when the circuit breaker is open and calls are short-circuited."""

    def __init__(self, recovery_at: float) -> None:
        remaining = max(0, recovery_at - time.monotonic())
        super().__init__(
            f"Circuit breaker open. Backend calls paused for {remaining:.0f}s.",
            endpoint="(circuit breaker)",
            status_code=0,
        )


class CompletionClient:
    """Pooled, resilient client for chat completions."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        max_retries: int = MAX_RETRIES,
        circuit_threshold: int = CIRCUIT_FAILURE_THRESHOLD,
        circuit_timeout: float = CIRCUIT_RECOVERY_TIMEOUT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._max_retries = max_retries
        self._circuit_threshold = circuit_threshold
        self._circuit_timeout = circuit_timeout

        self._client: httpx.AsyncClient | None = None
        self._consecutive_failures = 0
        self._circuit_open_until: float | None = None

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers(),
                timeout=httpx.Timeout(connect=5.0, read=60.0, write=10.0, pool=5.0),
            )
        return self._client

    def _check_circuit(self) -> None:
        if self._circuit_open_until is not None:
            if time.monotonic() < self._circuit_open_until:
                raise CircuitOpenError(self._circuit_open_until)
            # Recovery window passed, allow one probe
            self._circuit_open_until = None
            self._consecutive_failures = 0
            logger.info("Circuit breaker half-open, allowing probe request")

    def _record_success(self) -> None:
        self._consecutive_failures = 0
        self._circuit_open_until = None

    def _record_failure(self) -> None:
        self._consecutive_failures += 1
        if self._consecutive_failures >= self._circuit_threshold:
            self._circuit_open_until = time.monotonic() + self._circuit_timeout
            logger.warning(
                "Circuit breaker opened after %d consecutive failures. "
                "Will retry in %.0fs.",
                self._consecutive_failures,
                self._circuit_timeout,
            )

    async def _backoff(self, attempt: int, reason: str) -> None:
        delay = RETRY_BASE_DELAY * (2 ** attempt)
        logger.warning(
            "%s on POST %s (attempt %d/%d, backoff %.1fs)",
            reason, COMPLETIONS_PATH, attempt + 1, self._max_retries + 1, delay,
        )
        await asyncio.sleep(delay)

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST JSON with retry and circuit breaker."""
        self._check_circuit()
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            try:
                client = await self._get_client()
                resp = await client.post(path, json=payload)
                resp.raise_for_status()
                self._record_success()
                return resp.json()

            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                self._record_failure()

                if status in RETRYABLE_STATUS_CODES and attempt < self._max_retries:
                    last_error = exc
                    await self._backoff(attempt, f"Retryable {status}")
                    continue

                raise CompletionAPIError(
                    f"POST {path} failed with {status}",
                    endpoint=f"POST {path}",
                    status_code=status,
                    body=exc.response.text[:500],
                ) from exc

            except (httpx.ConnectError, httpx.ConnectTimeout) as exc:
                self._record_failure()
                if attempt < self._max_retries:
                    last_error = exc
                    await self._backoff(attempt, "Connection error")
                    continue
                raise CompletionAPIError(
                    f"Cannot connect to completion backend at {self._base_url}",
                    endpoint=f"POST {path}",
                    body=str(exc),
                ) from exc

            except httpx.TimeoutException as exc:
                self._record_failure()
                if attempt < self._max_retries:
                    last_error = exc
                    await self._backoff(attempt, "Timeout")
                    continue
                raise CompletionAPIError(
                    f"Timeout on POST {path} after {self._max_retries + 1} attempts",
                    endpoint=f"POST {path}",
                    body="Request timed out",
                ) from exc

        raise CompletionAPIError(
            f"Request failed after {self._max_retries + 1} attempts",
            endpoint=f"POST {path}",
            body=str(last_error),
        )

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float = 0.6,
    ) -> str:
        """Send a single user prompt and return the assistant's text.

        Returns an empty string when the backend answers without content.
        """
        data = await self._post(
            COMPLETIONS_PATH,
            {
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": temperature,
            },
        )
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return (content or "").strip()

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
