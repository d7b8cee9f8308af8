"""Telemetry Unavailable Error"""

from libs.shared.src.errors.domain_error import DomainError


class TelemetryUnavailableError(DomainError):
    """Telemetry unavailable error

    Raised when an upstream SWPC feed cannot be retrieved or decoded
    (network error, timeout, non-2xx status, malformed JSON)
    """

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"Unable to retrieve telemetry from {url}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="TELEMETRY_UNAVAILABLE")
        self.url = url
        self.reason = reason
