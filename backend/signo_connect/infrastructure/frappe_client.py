"""Resilient Frappe Client — wraps httpx.AsyncClient with retry, backoff, and error mapping.

Invariants:
    - Every request carries "Authorization: token <api token>" and "x-key"
    - Transient errors (transport failures, 5xx): retried up to max_retries with
      exponential backoff
    - Client errors (4xx): immediate failure, no retry
    - A 2xx body containing an "exception" key is a failure (Frappe reports server
      exceptions that way)
    - All failures mapped to FrappeAPIError (core/errors.py)

Design Decisions:
    - Server-side proxy for signodrive.com: the API token never reaches browsers
    - Wrapper over raw client: isolates retry logic from routes
    - ±25% jitter on backoff: prevents synchronized retries from many workers
    - transport injectable: tests use httpx.MockTransport instead of patching
"""

import asyncio
import json
import logging
import random

import httpx

from signo_connect.core.errors import FrappeAPIError

logger = logging.getLogger(__name__)

_METHOD_PREFIX = "/api/method/signo_connect.apis"
_RESOURCE_PREFIX = "/api/method/signo_connect.api.proxy"


class FrappeClient:
    """Typed calls to the SIGNO Frappe backend."""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        x_key: str,
        timeout_seconds: float = 30,
        max_retries: int = 2,
        base_delay_ms: int = 500,
        max_delay_ms: int = 10_000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"token {api_token}",
                "x-key": x_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout_seconds,
            transport=transport,
        )
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    async def aclose(self) -> None:
        await self.client.aclose()

    # ─── Drivers & jobs (read-only proxies) ─────────────────────

    async def list_drivers(
        self, limit_start: int = 0, limit_page_length: int = 100,
    ) -> list[dict]:
        body = await self._request("GET", f"{_RESOURCE_PREFIX}/Drivers", params={
            "filters": json.dumps([["is_active", "in", [0, 1]]]),
            "fields": json.dumps(["*"]),
            "limit_page_length": limit_page_length,
            "limit_start": limit_start,
        })
        return _as_list(body.get("data"))

    async def list_jobs(self, limit_page_length: int = 100) -> list[dict]:
        body = await self._request("GET", f"{_RESOURCE_PREFIX}/Job", params={
            "fields": json.dumps(["*"]),
            "limit_page_length": limit_page_length,
        })
        return _as_list(body.get("data"))

    # ─── Transporter job feed ───────────────────────────────────

    async def get_posted_jobs(self, transporter: str) -> list[dict]:
        body = await self._request(
            "GET", f"{_METHOD_PREFIX}.transporter.get_posted_jobs",
            params={"transporter": transporter},
        )
        return _as_list(body.get("data") or body.get("message"))

    async def post_job(self, payload: dict) -> dict:
        return await self._request(
            "POST", f"{_METHOD_PREFIX}.transporter.post_job", json_body=payload,
        )

    async def update_job(self, payload: dict) -> dict:
        return await self._request(
            "POST", f"{_METHOD_PREFIX}.transporter.update_job", json_body=payload,
        )

    async def update_job_status(self, job: str, feed_id: str, status: str) -> dict:
        return await self.update_job({"job": job, "feed_id": feed_id, "status": status})

    async def delete_job(self, job: str) -> dict:
        return await self._request(
            "POST", f"{_METHOD_PREFIX}.transporter.delete_job", json_body={"job": job},
        )

    # ─── Trips ──────────────────────────────────────────────────

    async def get_trips(self, transporter_id: str) -> list[dict]:
        body = await self._request(
            "GET", f"{_METHOD_PREFIX}.trip.get_trips",
            params={"transporter_id": transporter_id},
        )
        return _as_list(body.get("data") or body.get("message") or body.get("trips"))

    # ─── Transporter profile ────────────────────────────────────

    async def get_transporter_profile(self, phone_number: str) -> dict | None:
        body = await self._request(
            "GET", f"{_METHOD_PREFIX}.transporter.get_transporter_profile",
            params={"phone_number": phone_number},
        )
        return body.get("doc")

    async def create_transporter(self, payload: dict) -> dict:
        body = await self._request(
            "POST", f"{_RESOURCE_PREFIX}/Transporters", json_body=payload,
        )
        return body.get("data") or body

    async def update_transporter(self, transporter_id: str, payload: dict) -> dict:
        body = await self._request(
            "PUT", f"{_RESOURCE_PREFIX}/Transporters/{transporter_id}",
            json_body=payload,
        )
        return body.get("data") or body

    # ─── Transport ──────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json_body: dict | None = None,
    ) -> dict:
        """Send with retry on transient failures; return the decoded JSON body."""
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.request(
                    method, path, params=params, json=json_body,
                )
            except httpx.TimeoutException as e:
                await self._handle_transient_error(e, attempt, "timeout")
                continue
            except httpx.TransportError as e:
                await self._handle_transient_error(e, attempt, "connection_error")
                continue

            if response.status_code >= 500:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}", attempt, "server_error",
                    status_code=response.status_code,
                )
                continue
            if response.status_code >= 400:
                raise FrappeAPIError(
                    _error_message(response), "client_error",
                    status_code=response.status_code,
                )

            body = _decode(response)
            if "exception" in body:
                raise FrappeAPIError(
                    str(body["exception"]), "frappe_exception",
                    status_code=response.status_code,
                )
            logger.info(
                f"Frappe {method} {path} ok",
                extra={"attempt": attempt + 1, "status_code": response.status_code},
            )
            return body
        raise FrappeAPIError("Retries exhausted", "connection_error")

    async def _handle_transient_error(
        self,
        e: object,
        attempt: int,
        error_type: str,
        status_code: int | None = None,
    ) -> None:
        """Sleep before the next attempt, or raise when retries are used up."""
        if attempt >= self.max_retries:
            raise FrappeAPIError(
                f"Transient failure after {self.max_retries} retries: {e}",
                error_type,
                status_code=status_code,
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"Frappe transient error, retry after {delay}ms: {e}",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311


def _decode(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        raise FrappeAPIError("Response is not JSON", "invalid_response",
                             status_code=response.status_code)
    if isinstance(body, list):
        return {"data": body}
    if not isinstance(body, dict):
        raise FrappeAPIError("Unexpected response shape", "invalid_response",
                             status_code=response.status_code)
    return body


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(
            body.get("exception") or body.get("message")
            or body.get("_server_messages") or f"HTTP {response.status_code}"
        )
    return f"HTTP {response.status_code}"


def _as_list(value: object) -> list[dict]:
    return value if isinstance(value, list) else []


# Singleton (initialized on startup)
frappe_client: FrappeClient | None = None


def init_frappe_client(**kwargs) -> FrappeClient:
    global frappe_client
    frappe_client = FrappeClient(**kwargs)
    return frappe_client


async def close_frappe_client() -> None:
    global frappe_client
    if frappe_client is not None:
        await frappe_client.aclose()
        frappe_client = None
