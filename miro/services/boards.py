"""Boards API.

API doc: https://developers.miro.com/reference#board-object
"""

from __future__ import annotations

from miro.schemas import (
    Board,
    BoardUserConnection,
    CreateBoardRequest,
    Page,
    ShareBoardRequest,
    UpdateBoardRequest,
)
from miro.services.base import AsyncService, Service

BOARDS_PATH = "boards"


class AsyncBoardsService(AsyncService):
    async def get(self, board_id: str, *, timeout: float | None = None) -> Board:
        return await self._client.call(
            "GET", f"{BOARDS_PATH}/{board_id}", model=Board, timeout=timeout,
        )

    async def create(
        self, request: CreateBoardRequest, *, timeout: float | None = None,
    ) -> Board:
        return await self._client.call(
            "POST", BOARDS_PATH, body=request, expected=(201,), model=Board,
            timeout=timeout,
        )

    async def update(
        self, board_id: str, request: UpdateBoardRequest, *, timeout: float | None = None,
    ) -> Board:
        return await self._client.call(
            "PATCH", f"{BOARDS_PATH}/{board_id}", body=request, model=Board,
            timeout=timeout,
        )

    async def delete(self, board_id: str, *, timeout: float | None = None) -> None:
        await self._client.call(
            "DELETE", f"{BOARDS_PATH}/{board_id}", expected=(204,), timeout=timeout,
        )

    async def share(
        self, board_id: str, request: ShareBoardRequest, *, timeout: float | None = None,
    ) -> Page[BoardUserConnection]:
        """Invite users by email; returns the resulting board user connections."""
        return await self._client.call(
            "POST", f"{BOARDS_PATH}/{board_id}/share", body=request,
            model=Page[BoardUserConnection], timeout=timeout,
        )


class BoardsService(Service):
    def get(self, board_id: str, *, timeout: float | None = None) -> Board:
        return self._client.call(
            "GET", f"{BOARDS_PATH}/{board_id}", model=Board, timeout=timeout,
        )

    def create(self, request: CreateBoardRequest, *, timeout: float | None = None) -> Board:
        return self._client.call(
            "POST", BOARDS_PATH, body=request, expected=(201,), model=Board,
            timeout=timeout,
        )

    def update(
        self, board_id: str, request: UpdateBoardRequest, *, timeout: float | None = None,
    ) -> Board:
        return self._client.call(
            "PATCH", f"{BOARDS_PATH}/{board_id}", body=request, model=Board,
            timeout=timeout,
        )

    def delete(self, board_id: str, *, timeout: float | None = None) -> None:
        self._client.call(
            "DELETE", f"{BOARDS_PATH}/{board_id}", expected=(204,), timeout=timeout,
        )

    def share(
        self, board_id: str, request: ShareBoardRequest, *, timeout: float | None = None,
    ) -> Page[BoardUserConnection]:
        """Invite users by email; returns the resulting board user connections."""
        return self._client.call(
            "POST", f"{BOARDS_PATH}/{board_id}/share", body=request,
            model=Page[BoardUserConnection], timeout=timeout,
        )
