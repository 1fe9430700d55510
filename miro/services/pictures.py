"""Pictures API (board, team and user pictures).

API doc: https://developers.miro.com/reference#picture-object
"""

from __future__ import annotations

from typing import IO, Literal

from miro.schemas import Picture
from miro.services.base import AsyncService, Service

PICTURE_PATH = "picture"
PICTURE_KINDS = ("boards", "teams", "users")

PictureKind = Literal["boards", "teams", "users"]


def _picture_path(kind: str, owner_id: str) -> str:
    if kind not in PICTURE_KINDS:
        raise ValueError(
            f"picture kind must be one of {', '.join(PICTURE_KINDS)}, got {kind!r}"
        )
    return f"{kind}/{owner_id}/{PICTURE_PATH}"


def _upload(image: bytes | IO[bytes], filename: str) -> dict[str, tuple[str, bytes | IO[bytes]]]:
    return {"picture": (filename, image)}


class AsyncPicturesService(AsyncService):
    async def get(
        self, kind: PictureKind, owner_id: str, *, timeout: float | None = None,
    ) -> Picture:
        return await self._client.call(
            "GET", _picture_path(kind, owner_id), model=Picture, timeout=timeout,
        )

    async def upsert(
        self,
        kind: PictureKind,
        owner_id: str,
        image: bytes | IO[bytes],
        *,
        filename: str = "picture.png",
        timeout: float | None = None,
    ) -> Picture:
        """Create or replace the picture with a multipart upload."""
        return await self._client.call(
            "POST", _picture_path(kind, owner_id), files=_upload(image, filename),
            model=Picture, timeout=timeout,
        )

    async def delete(
        self, kind: PictureKind, owner_id: str, *, timeout: float | None = None,
    ) -> None:
        await self._client.call(
            "DELETE", _picture_path(kind, owner_id), expected=(204,), timeout=timeout,
        )


class PicturesService(Service):
    def get(
        self, kind: PictureKind, owner_id: str, *, timeout: float | None = None,
    ) -> Picture:
        return self._client.call(
            "GET", _picture_path(kind, owner_id), model=Picture, timeout=timeout,
        )

    def upsert(
        self,
        kind: PictureKind,
        owner_id: str,
        image: bytes | IO[bytes],
        *,
        filename: str = "picture.png",
        timeout: float | None = None,
    ) -> Picture:
        """Create or replace the picture with a multipart upload."""
        return self._client.call(
            "POST", _picture_path(kind, owner_id), files=_upload(image, filename),
            model=Picture, timeout=timeout,
        )

    def delete(
        self, kind: PictureKind, owner_id: str, *, timeout: float | None = None,
    ) -> None:
        self._client.call(
            "DELETE", _picture_path(kind, owner_id), expected=(204,), timeout=timeout,
        )
