"""SDK error types."""

from __future__ import annotations

from dataclasses import dataclass


class NamecheapSDKError(RuntimeError):
    """Base SDK error."""


class SSLValidationError(NamecheapSDKError, ValueError):
    """Request parameters were rejected before anything was sent."""


class InvalidReturnTypeError(SSLValidationError):
    """getInfo was asked to return a certificate in an unknown format."""

    def __init__(self, value: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"invalid return-type: {value}, parameter takes "
            f"\"{allowed[0]}\" (for X.509 format) or \"{allowed[1]}\" values"
        )
        self.value = value
        self.allowed = allowed


class ApiUnavailableError(NamecheapSDKError):
    """API endpoint could not be reached."""


class ApiRequestError(ApiUnavailableError):
    """API endpoint answered with an HTTP error status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class ApiErrorDetail:
    number: str
    message: str


class ApiError(NamecheapSDKError):
    """API answered with Status="ERROR"."""

    def __init__(self, command: str | None, errors: list[ApiErrorDetail]) -> None:
        if errors:
            summary = "; ".join(f"{item.number}: {item.message}" for item in errors)
        else:
            summary = "no error details returned"
        super().__init__(f"{command or 'request'} failed: {summary}")
        self.command = command
        self.errors = errors


class ResponseDecodeError(NamecheapSDKError):
    """Response body was not a well-formed API envelope."""
