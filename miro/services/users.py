"""Users API.

API doc: https://developers.miro.com/reference#user-object
"""

from __future__ import annotations

from miro.schemas import User
from miro.services.base import AsyncService, Service

USERS_PATH = "users"


class AsyncUsersService(AsyncService):
    async def get(self, user_id: str, *, timeout: float | None = None) -> User:
        return await self._client.call(
            "GET", f"{USERS_PATH}/{user_id}", model=User, timeout=timeout,
        )

    async def get_current_user(self, *, timeout: float | None = None) -> User:
        """The user the access token belongs to."""
        return await self._client.call(
            "GET", f"{USERS_PATH}/me", model=User, timeout=timeout,
        )


class UsersService(Service):
    def get(self, user_id: str, *, timeout: float | None = None) -> User:
        return self._client.call(
            "GET", f"{USERS_PATH}/{user_id}", model=User, timeout=timeout,
        )

    def get_current_user(self, *, timeout: float | None = None) -> User:
        """The user the access token belongs to."""
        return self._client.call(
            "GET", f"{USERS_PATH}/me", model=User, timeout=timeout,
        )
