"""Watcher Error Base Class"""


class DomainError(Exception):
    """Base class of watcher errors

    `code` is a stable identifier (e.g. TELEMETRY_UNAVAILABLE) for log filtering
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
