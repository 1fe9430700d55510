"""Pydantic models for Miro entities and request payloads.

All models derive from :class:`~miro.decoding.MiroModel`, so keys are matched
case-insensitively and ``null`` sub-objects decode to ``None``.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field, StrictInt, StrictStr

from miro.decoding import MiroModel, Timestamp

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Embedded value types
# ---------------------------------------------------------------------------


class MiniUser(MiroModel):
    """Abbreviated user embedded in other entities."""

    id: StrictStr = ""
    name: StrictStr = ""


class MiniTeam(MiroModel):
    """Abbreviated team embedded in other entities."""

    id: StrictStr = ""
    name: StrictStr = ""


class MiniPicture(MiroModel):
    id: StrictStr = ""
    image_url: StrictStr = Field("", alias="imageURL")


class SharingPolicy(MiroModel):
    """Board access policy: ``private``, ``view``, ``comment`` or ``edit``."""

    access: StrictStr | None = None
    team_access: StrictStr | None = None


class Organization(MiroModel):
    id: StrictStr = ""
    name: StrictStr = ""


# ---------------------------------------------------------------------------
# Users, teams, pictures
# ---------------------------------------------------------------------------


class Picture(MiroModel):
    """Picture of a board, team or user."""

    id: StrictStr = ""
    image_url: StrictStr = Field("", alias="imageURL")


class User(MiroModel):
    id: StrictStr = ""
    name: StrictStr = ""
    company: StrictStr = ""
    role: StrictStr = ""
    industry: StrictStr = ""
    email: StrictStr = ""
    state: StrictStr = ""
    created_at: Timestamp | None = None
    picture: MiniPicture | None = None


class Team(MiroModel):
    id: StrictStr = ""
    name: StrictStr = ""
    created_at: Timestamp | None = None
    modified_at: Timestamp | None = None
    created_by: MiniUser | None = None
    modified_by: MiniUser | None = None
    picture: MiniPicture | None = None


# ---------------------------------------------------------------------------
# Connections
# ---------------------------------------------------------------------------


class TeamUserConnection(MiroModel):
    """Membership of a user in a team, with the user's team role."""

    id: StrictStr = ""
    user: MiniUser | None = None
    team: MiniTeam | None = None
    role: StrictStr = ""
    name: StrictStr = ""
    created_at: Timestamp | None = None
    modified_at: Timestamp | None = None
    created_by: MiniUser | None = None
    modified_by: MiniUser | None = None


class BoardUserConnection(MiroModel):
    """Access of a user to a board (``viewer``, ``commenter``, ``editor``, ``owner``)."""

    id: StrictStr = ""
    user: MiniUser | None = None
    role: StrictStr = ""
    created_at: Timestamp | None = None
    modified_at: Timestamp | None = None
    created_by: MiniUser | None = None
    modified_by: MiniUser | None = None


# ---------------------------------------------------------------------------
# Boards
# ---------------------------------------------------------------------------


class Board(MiroModel):
    """A Miro board.

    ``picture`` and the user references are ``None`` when Miro sends
    ``null`` or omits them, which keeps "no picture" distinct from a picture
    with an empty id.
    """

    id: StrictStr = ""
    name: StrictStr = ""
    description: StrictStr = ""
    image_url: StrictStr = Field("", alias="imageURL")
    view_link: StrictStr = ""
    created_at: Timestamp | None = None
    modified_at: Timestamp | None = None
    created_by: MiniUser | None = None
    modified_by: MiniUser | None = None
    owner: MiniUser | None = None
    picture: MiniPicture | None = None
    sharing_policy: SharingPolicy | None = None
    current_user_connection: TeamUserConnection | None = None


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------


class AuthorizationInfo(MiroModel):
    """Details of the access token the client is using."""

    id: StrictStr = ""
    scopes: list[StrictStr] = Field(default_factory=list)
    user: MiniUser | None = None
    team: MiniTeam | None = None
    created_at: Timestamp | None = None
    created_by: MiniUser | None = None


# ---------------------------------------------------------------------------
# Audit logs
# ---------------------------------------------------------------------------


class AuditLogDetails(MiroModel):
    role: StrictStr = ""


class AuditLogContext(MiroModel):
    """Where an audited event happened."""

    organization: Organization | None = None
    team: MiniTeam | None = None
    ip: StrictStr = ""


class AuditLogEntry(MiroModel):
    id: StrictStr = ""
    event: StrictStr = ""
    details: AuditLogDetails | None = None
    created_at: Timestamp | None = None
    created_by: MiniUser | None = None
    context: AuditLogContext | None = None


class AuditLog(MiroModel):
    """One page of organization audit events."""

    limit: StrictInt = 0
    offset: StrictInt = 0
    size: StrictInt = 0
    next_link: StrictStr = ""
    prev_link: StrictStr = ""
    data: list[AuditLogEntry] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Collections and errors
# ---------------------------------------------------------------------------


class Page(MiroModel, Generic[T]):
    """List response envelope (``{"type": "list", "data": [...]}``)."""

    limit: StrictInt = 0
    offset: StrictInt = 0
    size: StrictInt = 0
    next_link: StrictStr = ""
    prev_link: StrictStr = ""
    data: list[T] = Field(default_factory=list)


class ErrorPayload(MiroModel):
    """Structured body of every non-2xx response."""

    status: StrictInt = 0
    code: StrictStr = ""
    message: StrictStr = ""
    type: StrictStr = ""
    context: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateBoardRequest(MiroModel):
    name: StrictStr
    description: StrictStr | None = None
    sharing_policy: SharingPolicy | None = None


class UpdateBoardRequest(MiroModel):
    name: StrictStr | None = None
    description: StrictStr | None = None
    sharing_policy: SharingPolicy | None = None


class ShareBoardRequest(MiroModel):
    emails: list[StrictStr]


class UpdateBoardUserConnectionRequest(MiroModel):
    role: StrictStr


class UpdateTeamRequest(MiroModel):
    name: StrictStr
