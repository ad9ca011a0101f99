from __future__ import annotations


class GatewayError(Exception):
    """Base for failures surfaced to the caller as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GatewayError):
    """A required input was missing or unusable. Always the caller's fault."""

    status_code = 400


class ConfigurationError(GatewayError):
    """A server-side setting the operation needs is absent or malformed."""

    status_code = 500


class ServiceError(GatewayError):
    """Vault rejected the call or could not be reached."""

    status_code = 500


class StorageError(GatewayError):
    """The transit record store failed to read or write."""

    status_code = 500


def require(value: str, field: str) -> str:
    if not value:
        raise ValidationError(f"{field} required")
    return value


__all__ = [
    "GatewayError",
    "ValidationError",
    "ConfigurationError",
    "ServiceError",
    "StorageError",
    "require",
]
