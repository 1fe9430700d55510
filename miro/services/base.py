"""Shared plumbing for resource services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from miro.client import AsyncMiroClient, MiroClient


class AsyncService:
    """Resource method group bound to an :class:`~miro.client.AsyncMiroClient`.

    The service only references the client; the client owns the transport.
    """

    def __init__(self, client: AsyncMiroClient) -> None:
        self._client = client


class Service:
    """Resource method group bound to a :class:`~miro.client.MiroClient`."""

    def __init__(self, client: MiroClient) -> None:
        self._client = client
