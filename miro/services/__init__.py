"""Resource-scoped method groups sharing one client transport."""

from __future__ import annotations

from miro.services.audit_logs import AsyncAuditLogsService, AuditLogsService
from miro.services.authorization import AsyncAuthorizationService, AuthorizationService
from miro.services.boards import AsyncBoardsService, BoardsService
from miro.services.connections import (
    AsyncBoardUserConnectionsService,
    AsyncTeamUserConnectionsService,
    BoardUserConnectionsService,
    TeamUserConnectionsService,
)
from miro.services.pictures import AsyncPicturesService, PicturesService
from miro.services.teams import AsyncTeamsService, TeamsService
from miro.services.users import AsyncUsersService, UsersService

__all__ = [
    "AsyncAuditLogsService",
    "AsyncAuthorizationService",
    "AsyncBoardsService",
    "AsyncBoardUserConnectionsService",
    "AsyncPicturesService",
    "AsyncTeamsService",
    "AsyncTeamUserConnectionsService",
    "AsyncUsersService",
    "AuditLogsService",
    "AuthorizationService",
    "BoardsService",
    "BoardUserConnectionsService",
    "PicturesService",
    "TeamsService",
    "TeamUserConnectionsService",
    "UsersService",
]
