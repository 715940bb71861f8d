# app/clients/exceptions.py

from typing import List, Optional


class OhanaError(Exception):
    """Base exception for Ohana API failures."""

    def __init__(
        self,
        message: str = "",
        status_code: Optional[int] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.errors = errors or []
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        parts = []
        if self.method and self.url:
            parts.append(f"{self.method} {self.url}:")
        if self.status_code is not None:
            parts.append(f"{self.status_code} -")
        parts.append(self.message)
        if self.errors:
            parts.append("(" + "; ".join(self.errors) + ")")
        return " ".join(p for p in parts if p)


class ConnectionFailed(OhanaError):
    """Raised when the Ohana API cannot be reached or times out."""
    pass


class ClientError(OhanaError):
    """Raised for 4xx responses without a more specific class."""
    pass


class BadRequest(ClientError):
    """Raised on 400: missing search parameters, invalid location or radius."""

    @property
    def missing_parameters(self) -> bool:
        # Ohana reports no structured code here, only wording such as
        # "Either keyword, location, or language is missing."
        # The request url is left out so a keyword can't trip the check.
        return any("missing" in text for text in [self.message, *self.errors])


class Unauthorized(ClientError):
    pass


class Forbidden(ClientError):
    pass


class NotFound(ClientError):
    """Raised on 404, e.g. an unknown location id."""
    pass


class UnprocessableEntity(ClientError):
    pass


class ServerError(OhanaError):
    """Raised for 5xx responses."""
    pass


STATUS_ERRORS = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    422: UnprocessableEntity,
}


def error_for_status(status_code: int):
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return None
