"""Board and team user connection APIs.

API doc: https://developers.miro.com/reference#board-user-connection-object
"""

from __future__ import annotations

from miro.schemas import (
    BoardUserConnection,
    TeamUserConnection,
    UpdateBoardUserConnectionRequest,
)
from miro.services.base import AsyncService, Service

BOARD_USER_CONNECTIONS_PATH = "board-user-connections"
TEAM_USER_CONNECTIONS_PATH = "team-user-connections"

# Deleting a connection answers 200 or 204.
_DELETE_STATUSES = (200, 204)


class AsyncBoardUserConnectionsService(AsyncService):
    async def get(
        self, connection_id: str, *, timeout: float | None = None,
    ) -> BoardUserConnection:
        return await self._client.call(
            "GET", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}",
            model=BoardUserConnection, timeout=timeout,
        )

    async def update(
        self,
        connection_id: str,
        request: UpdateBoardUserConnectionRequest,
        *,
        timeout: float | None = None,
    ) -> BoardUserConnection:
        return await self._client.call(
            "PATCH", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}", body=request,
            model=BoardUserConnection, timeout=timeout,
        )

    async def delete(self, connection_id: str, *, timeout: float | None = None) -> None:
        await self._client.call(
            "DELETE", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}",
            expected=_DELETE_STATUSES, timeout=timeout,
        )


class BoardUserConnectionsService(Service):
    def get(self, connection_id: str, *, timeout: float | None = None) -> BoardUserConnection:
        return self._client.call(
            "GET", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}",
            model=BoardUserConnection, timeout=timeout,
        )

    def update(
        self,
        connection_id: str,
        request: UpdateBoardUserConnectionRequest,
        *,
        timeout: float | None = None,
    ) -> BoardUserConnection:
        return self._client.call(
            "PATCH", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}", body=request,
            model=BoardUserConnection, timeout=timeout,
        )

    def delete(self, connection_id: str, *, timeout: float | None = None) -> None:
        self._client.call(
            "DELETE", f"{BOARD_USER_CONNECTIONS_PATH}/{connection_id}",
            expected=_DELETE_STATUSES, timeout=timeout,
        )


class AsyncTeamUserConnectionsService(AsyncService):
    async def get(
        self, connection_id: str, *, timeout: float | None = None,
    ) -> TeamUserConnection:
        return await self._client.call(
            "GET", f"{TEAM_USER_CONNECTIONS_PATH}/{connection_id}",
            model=TeamUserConnection, timeout=timeout,
        )


class TeamUserConnectionsService(Service):
    def get(self, connection_id: str, *, timeout: float | None = None) -> TeamUserConnection:
        return self._client.call(
            "GET", f"{TEAM_USER_CONNECTIONS_PATH}/{connection_id}",
            model=TeamUserConnection, timeout=timeout,
        )
