"""Typed Python client for the Miro REST API."""

from __future__ import annotations

from miro.client import AsyncMiroClient, MiroClient
from miro.decoding import MiroModel, decode, decode_list
from miro.exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    MiroError,
    NotFoundError,
    RateLimitError,
    RateLimitHeaderError,
    ValidationError,
)
from miro.models import RateLimit
from miro.schemas import (
    AuditLog,
    AuditLogContext,
    AuditLogDetails,
    AuditLogEntry,
    AuthorizationInfo,
    Board,
    BoardUserConnection,
    CreateBoardRequest,
    ErrorPayload,
    MiniPicture,
    MiniTeam,
    MiniUser,
    Organization,
    Page,
    Picture,
    ShareBoardRequest,
    SharingPolicy,
    Team,
    TeamUserConnection,
    UpdateBoardRequest,
    UpdateBoardUserConnectionRequest,
    UpdateTeamRequest,
    User,
)

__all__ = [
    "AsyncMiroClient",
    "MiroClient",
    "MiroModel",
    "decode",
    "decode_list",
    "MiroError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    "DecodeError",
    "RateLimitHeaderError",
    "RateLimit",
    "AuditLog",
    "AuditLogContext",
    "AuditLogDetails",
    "AuditLogEntry",
    "AuthorizationInfo",
    "Board",
    "BoardUserConnection",
    "ErrorPayload",
    "MiniPicture",
    "MiniTeam",
    "MiniUser",
    "Organization",
    "Page",
    "Picture",
    "SharingPolicy",
    "Team",
    "TeamUserConnection",
    "User",
    "CreateBoardRequest",
    "ShareBoardRequest",
    "UpdateBoardRequest",
    "UpdateBoardUserConnectionRequest",
    "UpdateTeamRequest",
]
