"""Authorization info API (the current OAuth token).

API doc: https://developers.miro.com/reference#authorization-object
"""

from __future__ import annotations

from miro.schemas import AuthorizationInfo
from miro.services.base import AsyncService, Service

AUTHORIZATION_INFO_PATH = "oauth-token"


class AsyncAuthorizationService(AsyncService):
    async def get(self, *, timeout: float | None = None) -> AuthorizationInfo:
        return await self._client.call(
            "GET", AUTHORIZATION_INFO_PATH, model=AuthorizationInfo, timeout=timeout,
        )


class AuthorizationService(Service):
    def get(self, *, timeout: float | None = None) -> AuthorizationInfo:
        return self._client.call(
            "GET", AUTHORIZATION_INFO_PATH, model=AuthorizationInfo, timeout=timeout,
        )
