"""Async and sync HTTP clients for the Miro REST API.

Both clients share request construction, rate-limit bookkeeping and status
classification through :class:`_BaseMiroClient`; they differ only in how
they dispatch (``httpx.AsyncClient`` vs ``httpx.Client``).
"""

from __future__ import annotations

import json
import logging
import re
import threading
from collections.abc import Collection, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

import httpx
from pydantic import BaseModel

from miro.decoding import MiroModel, decode_response
from miro.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    RateLimitHeaderError,
    ValidationError,
)
from miro.models import RateLimit
from miro.schemas import ErrorPayload
from miro.services import (
    AsyncAuditLogsService,
    AsyncAuthorizationService,
    AsyncBoardsService,
    AsyncBoardUserConnectionsService,
    AsyncPicturesService,
    AsyncTeamsService,
    AsyncTeamUserConnectionsService,
    AsyncUsersService,
    AuditLogsService,
    AuthorizationService,
    BoardsService,
    BoardUserConnectionsService,
    PicturesService,
    TeamsService,
    TeamUserConnectionsService,
    UsersService,
)

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.miro.com/"
API_VERSION = "v1"

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Maps HTTP status codes to exception classes.
_STATUS_MAP: dict[int, type[APIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def _build_exception(
    status_code: int,
    payload: ErrorPayload,
    rate_limit: RateLimit,
) -> APIError:
    """Construct the appropriate exception for *status_code*."""
    exc_cls = _STATUS_MAP.get(status_code, APIError)
    kwargs: dict[str, Any] = {
        "code": payload.code,
        "error_type": payload.type,
        "context": payload.context,
    }
    if exc_cls is RateLimitError:
        kwargs["rate_limit"] = rate_limit
    return exc_cls(status_code, payload.message, **kwargs)


def _encode_body(body: BaseModel | Mapping[str, Any] | list[Any]) -> bytes:
    """Serialize a request payload as UTF-8 JSON without escaping ``<>&`` or non-ASCII."""
    if isinstance(body, BaseModel):
        payload: Any = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = body
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def _parse_header(response: httpx.Response, header: str) -> int | None:
    # Repeated header lines: only the first one counts.
    values = response.headers.get_list(header)
    if not values or values[0] == "":
        return None
    raw = values[0]
    if not _INTEGER.fullmatch(raw):
        logger.warning("Ignoring response: malformed %s header %r", header, raw)
        raise RateLimitHeaderError(header, raw, response)
    return int(raw)


class _BaseMiroClient:
    """Request building, rate-limit tracking and status handling."""

    _client: httpx.Client | httpx.AsyncClient

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str,
        api_version: str,
        user_agent: str,
        rate_limit: RateLimit | None,
    ) -> None:
        self._access_token = access_token
        self.base_url = f"{base_url.rstrip('/')}/{api_version.strip('/')}/"
        self.user_agent = user_agent
        self._rate_limit = replace(rate_limit) if rate_limit is not None else RateLimit()
        self._lock = threading.Lock()

    # -- rate limit ----------------------------------------------------------

    @property
    def rate_limit(self) -> RateLimit:
        """A copy of the most recent rate-limit counters."""
        with self._lock:
            return replace(self._rate_limit)

    def _record_rate_limit(self, response: httpx.Response) -> None:
        # Fields are updated one at a time; concurrent responses may interleave.
        limit = _parse_header(response, RATE_LIMIT_LIMIT_HEADER)
        if limit is not None:
            with self._lock:
                self._rate_limit.limit = limit

        remaining = _parse_header(response, RATE_LIMIT_REMAINING_HEADER)
        if remaining is not None:
            with self._lock:
                self._rate_limit.remaining = remaining

        reset = _parse_header(response, RATE_LIMIT_RESET_HEADER)
        if reset is not None:
            try:
                reset_at = datetime.fromtimestamp(reset, tz=timezone.utc)
            except (OverflowError, OSError, ValueError) as exc:
                raise RateLimitHeaderError(
                    RATE_LIMIT_RESET_HEADER, str(reset), response,
                ) from exc
            with self._lock:
                self._rate_limit.reset = reset_at

    # -- request / response --------------------------------------------------

    def build(
        self,
        method: str,
        path: str,
        body: BaseModel | Mapping[str, Any] | list[Any] | None = None,
        *,
        params: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Create an authenticated request for *path* relative to the versioned API root."""
        headers = {"Authorization": f"Bearer {self._access_token}"}
        content = None
        if body is not None:
            content = _encode_body(body)
            headers["Content-Type"] = "application/json"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        request = self._client.build_request(
            method,
            path.lstrip("/"),
            content=content,
            params=params,
            files=files,
            headers=headers,
        )
        if not self.user_agent:
            # httpx adds its own default; an empty user agent means no header.
            request.headers.pop("User-Agent", None)
        return request

    def _handle_response(self, request: httpx.Request, response: httpx.Response) -> None:
        self._record_rate_limit(response)
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "%s %s -> %d",
            request.method,
            request.url,
            response.status_code,
            extra={
                "status_code": response.status_code,
                "rate_limit_remaining": self.rate_limit.remaining,
            },
        )

    def _check_status(self, response: httpx.Response, expected: Collection[int]) -> None:
        if response.status_code in expected:
            return
        payload = decode_response(ErrorPayload, response)
        logger.warning(
            "%s %s returned %d (expected %s): %s",
            response.request.method,
            response.request.url,
            response.status_code,
            "/".join(str(code) for code in expected),
            payload.message,
        )
        raise _build_exception(response.status_code, payload, self.rate_limit)

    @staticmethod
    def _decode_result(
        response: httpx.Response,
        model: type[MiroModel] | None,
        many: bool,
    ) -> Any:
        if model is None:
            return None
        return decode_response(model, response, many=many)

    @staticmethod
    def _apply_timeout(request: httpx.Request, timeout: float | None) -> None:
        if timeout is not None:
            request.extensions["timeout"] = httpx.Timeout(timeout).as_dict()


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncMiroClient(_BaseMiroClient):
    """Async client for the Miro API (backed by ``httpx.AsyncClient``).

    Calls can be cancelled with the usual asyncio tools
    (``asyncio.timeout``, ``asyncio.wait_for``, task cancellation); the
    in-flight request is aborted and the cancellation propagates unchanged.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = API_BASE_URL,
        api_version: str = API_VERSION,
        user_agent: str = "",
        timeout: float = 30.0,
        rate_limit: RateLimit | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            access_token,
            base_url=base_url,
            api_version=api_version,
            user_agent=user_agent,
            rate_limit=rate_limit,
        )
        kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "timeout": timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.AsyncClient(**kwargs)

        self.audit_logs = AsyncAuditLogsService(self)
        self.authorization = AsyncAuthorizationService(self)
        self.boards = AsyncBoardsService(self)
        self.board_user_connections = AsyncBoardUserConnectionsService(self)
        self.pictures = AsyncPicturesService(self)
        self.teams = AsyncTeamsService(self)
        self.team_user_connections = AsyncTeamUserConnectionsService(self)
        self.users = AsyncUsersService(self)

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncMiroClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # -- transport -----------------------------------------------------------

    async def send(self, request: httpx.Request, *, timeout: float | None = None) -> httpx.Response:
        """Dispatch *request* and record the rate-limit headers of the response."""
        self._apply_timeout(request, timeout)
        response = await self._client.send(request)
        self._handle_response(request, response)
        return response

    async def call(
        self,
        method: str,
        path: str,
        *,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        expected: Collection[int] = (200,),
        model: type[MiroModel] | None = None,
        many: bool = False,
        timeout: float | None = None,
    ) -> Any:
        """Build, send, check the status and decode the body into *model*."""
        request = self.build(method, path, body, params=params, files=files)
        response = await self.send(request, timeout=timeout)
        self._check_status(response, expected)
        return self._decode_result(response, model, many)


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class MiroClient(_BaseMiroClient):
    """Synchronous client for the Miro API (backed by ``httpx.Client``)."""

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = API_BASE_URL,
        api_version: str = API_VERSION,
        user_agent: str = "",
        timeout: float = 30.0,
        rate_limit: RateLimit | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            access_token,
            base_url=base_url,
            api_version=api_version,
            user_agent=user_agent,
            rate_limit=rate_limit,
        )
        kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "timeout": timeout,
        }
        if _transport is not None:
            kwargs["transport"] = _transport
        self._client = httpx.Client(**kwargs)

        self.audit_logs = AuditLogsService(self)
        self.authorization = AuthorizationService(self)
        self.boards = BoardsService(self)
        self.board_user_connections = BoardUserConnectionsService(self)
        self.pictures = PicturesService(self)
        self.teams = TeamsService(self)
        self.team_user_connections = TeamUserConnectionsService(self)
        self.users = UsersService(self)

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> MiroClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # -- transport -----------------------------------------------------------

    def send(self, request: httpx.Request, *, timeout: float | None = None) -> httpx.Response:
        """Dispatch *request* and record the rate-limit headers of the response."""
        self._apply_timeout(request, timeout)
        response = self._client.send(request)
        self._handle_response(request, response)
        return response

    def call(
        self,
        method: str,
        path: str,
        *,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        expected: Collection[int] = (200,),
        model: type[MiroModel] | None = None,
        many: bool = False,
        timeout: float | None = None,
    ) -> Any:
        """Build, send, check the status and decode the body into *model*."""
        request = self.build(method, path, body, params=params, files=files)
        response = self.send(request, timeout=timeout)
        self._check_status(response, expected)
        return self._decode_result(response, model, many)
