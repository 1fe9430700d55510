"""Audit logs API.

API doc: https://developers.miro.com/reference#log-object
"""

from __future__ import annotations

from miro.schemas import AuditLog
from miro.services.base import AsyncService, Service

AUDIT_LOGS_PATH = "audit/logs"


class AsyncAuditLogsService(AsyncService):
    async def get(self, *, timeout: float | None = None) -> AuditLog:
        return await self._client.call(
            "GET", AUDIT_LOGS_PATH, model=AuditLog, timeout=timeout,
        )


class AuditLogsService(Service):
    def get(self, *, timeout: float | None = None) -> AuditLog:
        return self._client.call("GET", AUDIT_LOGS_PATH, model=AuditLog, timeout=timeout)
