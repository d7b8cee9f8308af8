"""Configuration Error"""

from libs.shared.src.errors.domain_error import DomainError


class ConfigurationError(DomainError):
    """Static configuration could not be parsed or validated

    The only fatal error of the watcher, raised once at startup
    """

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {key}={value!r}: {reason}", code="INVALID_CONFIG")
        self.key = key
        self.value = value
        self.reason = reason
