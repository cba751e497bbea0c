"""Exception hierarchy for the Scryfall client."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScryfallToolsError(Exception):
    """Base class for every error raised by this package."""


class TransportError(ScryfallToolsError):
    """The request never produced a response (DNS, timeout, reset, ...)."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Error fetching {url}: {reason}" if reason else url)


class ErrorBody(BaseModel):
    """Scryfall error object, as returned with a 4xx/5xx status."""

    model_config = {"populate_by_name": True}

    details: str = Field(default="", description="Human-readable explanation.")
    warnings: list[str] = Field(default_factory=list)
    status: int | None = None
    code: str | None = None
    type: str | None = Field(default=None, description="Computer-readable subtype.")


class ScryfallError(ScryfallToolsError):
    """Scryfall answered, but with an error object.

    Attributes:
        details: Human-readable message from the API.
        warnings: Non-fatal warnings the request also generated.
        status: HTTP status code.
        code: Scryfall error code (e.g. ``"not_found"``).
        error_type: Optional error subtype (e.g. ``"ambiguous"``).
    """

    def __init__(
        self,
        details: str,
        *,
        warnings: list[str] | None = None,
        status: int | None = None,
        code: str | None = None,
        error_type: str | None = None,
    ) -> None:
        self.details = details
        self.warnings = warnings or []
        self.status = status
        self.code = code
        self.error_type = error_type
        message = f"Scryfall error ({status}): {details}" if status else details
        if self.warnings:
            message += f" [warnings: {'; '.join(self.warnings)}]"
        super().__init__(message)

    @classmethod
    def from_body(cls, body: ErrorBody, status: int) -> ScryfallError:
        return cls(
            body.details,
            warnings=body.warnings,
            status=body.status or status,
            code=body.code,
            error_type=body.type,
        )


class DecodeError(ScryfallToolsError):
    """A response body or bulk stream was not the expected JSON shape."""


class TruncatedStreamError(DecodeError):
    """A bulk stream ended before its top-level array was closed."""


class ConsistencyError(ScryfallToolsError):
    """A list page contradicted itself (``has_more`` vs. ``next_page``)."""
