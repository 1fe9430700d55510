"""Exception hierarchy for the Miro client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from miro.models import RateLimit

if TYPE_CHECKING:
    import httpx


class MiroError(Exception):
    """Base exception for all Miro client errors."""


class APIError(MiroError):
    """The API answered with a status code the operation does not expect.

    Carries the decoded error payload; ``message`` is the human-readable
    text reported by Miro.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        code: str = "",
        error_type: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.error_type = error_type
        self.context = context
        super().__init__(
            f"status code not expected, got:{status_code}, message:{message}"
        )


class AuthenticationError(APIError):
    """Raised on 401 or 403 responses."""


class NotFoundError(APIError):
    """Raised on 404 responses."""


class ValidationError(APIError):
    """Raised on 400 or 422 responses."""


class RateLimitError(APIError):
    """Raised on 429 responses."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        rate_limit: RateLimit | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(status_code, message, **kwargs)
        self.rate_limit = rate_limit


class DecodeError(MiroError):
    """A JSON payload could not be turned into the expected entity."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class RateLimitHeaderError(DecodeError):
    """An ``X-RateLimit-*`` header was present but not an integer.

    The response is kept on the exception; its body has not been consumed
    by the client.
    """

    def __init__(
        self,
        header: str,
        value: str,
        response: httpx.Response | None = None,
    ) -> None:
        self.header = header
        self.value = value
        self.response = response
        super().__init__(f"invalid {header} header: {value!r}", field=header)
