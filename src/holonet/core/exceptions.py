"""Custom exception hierarchy for holonet."""

from typing import Any


class HolonetError(Exception):
    """Base exception for all holonet errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(HolonetError):
    """Input validation failed."""

    pass


class InvalidResourceKind(ValidationError):
    """The requested resource kind is not one of the catalog's kinds."""

    def __init__(self, value: Any, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Invalid resource kind: {value!r}", details)
        self.value = value


class ResolutionError(HolonetError):
    """Failed to resolve a resource from the upstream catalog."""

    pass


class UpstreamLookupFailed(ResolutionError):
    """Upstream returned a non-success status or did not answer in time."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class ConnectivityFailure(ResolutionError):
    """Transport-level failure talking to the upstream catalog."""

    def __init__(
        self,
        message: str,
        url: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url

