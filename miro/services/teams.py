"""Teams API.

API doc: https://developers.miro.com/reference#team-object
"""

from __future__ import annotations

from miro.schemas import Page, Team, TeamUserConnection, UpdateTeamRequest
from miro.services.base import AsyncService, Service

TEAMS_PATH = "teams"
USER_CONNECTIONS_PATH = "user-connections"
TEAM_INVITE_PATH = "invite"


def _connections_path(team_id: str) -> str:
    return f"{TEAMS_PATH}/{team_id}/{USER_CONNECTIONS_PATH}"


class AsyncTeamsService(AsyncService):
    async def get(self, team_id: str, *, timeout: float | None = None) -> Team:
        return await self._client.call(
            "GET", f"{TEAMS_PATH}/{team_id}", model=Team, timeout=timeout,
        )

    async def update(
        self, team_id: str, request: UpdateTeamRequest, *, timeout: float | None = None,
    ) -> Team:
        return await self._client.call(
            "PATCH", f"{TEAMS_PATH}/{team_id}", body=request, model=Team,
            timeout=timeout,
        )

    async def list_members(
        self, team_id: str, *, timeout: float | None = None,
    ) -> Page[TeamUserConnection]:
        return await self._client.call(
            "GET", _connections_path(team_id),
            model=Page[TeamUserConnection], timeout=timeout,
        )

    async def get_current_user_connection(
        self, team_id: str, *, timeout: float | None = None,
    ) -> TeamUserConnection:
        return await self._client.call(
            "GET", f"{_connections_path(team_id)}/me",
            model=TeamUserConnection, timeout=timeout,
        )

    async def invite(
        self, team_id: str, email: str, *, timeout: float | None = None,
    ) -> list[TeamUserConnection]:
        """Invite *email* to the team; Miro answers with a bare JSON array."""
        return await self._client.call(
            "POST", f"{_connections_path(team_id)}/{TEAM_INVITE_PATH}",
            params={"email": email}, model=TeamUserConnection, many=True,
            timeout=timeout,
        )


class TeamsService(Service):
    def get(self, team_id: str, *, timeout: float | None = None) -> Team:
        return self._client.call(
            "GET", f"{TEAMS_PATH}/{team_id}", model=Team, timeout=timeout,
        )

    def update(
        self, team_id: str, request: UpdateTeamRequest, *, timeout: float | None = None,
    ) -> Team:
        return self._client.call(
            "PATCH", f"{TEAMS_PATH}/{team_id}", body=request, model=Team,
            timeout=timeout,
        )

    def list_members(
        self, team_id: str, *, timeout: float | None = None,
    ) -> Page[TeamUserConnection]:
        return self._client.call(
            "GET", _connections_path(team_id),
            model=Page[TeamUserConnection], timeout=timeout,
        )

    def get_current_user_connection(
        self, team_id: str, *, timeout: float | None = None,
    ) -> TeamUserConnection:
        return self._client.call(
            "GET", f"{_connections_path(team_id)}/me",
            model=TeamUserConnection, timeout=timeout,
        )

    def invite(
        self, team_id: str, email: str, *, timeout: float | None = None,
    ) -> list[TeamUserConnection]:
        """Invite *email* to the team; Miro answers with a bare JSON array."""
        return self._client.call(
            "POST", f"{_connections_path(team_id)}/{TEAM_INVITE_PATH}",
            params={"email": email}, model=TeamUserConnection, many=True,
            timeout=timeout,
        )
