"""Custom exceptions for Synaptic Embeddings."""

from typing import Any, Dict, Optional


class SynapticError(Exception):
    """Base exception for all Synaptic Embeddings errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(SynapticError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class EmbeddingError(SynapticError):
    """Raised when there's an embedding generation issue."""

    def __init__(
        self,
        message: str,
        error_code: str = "EMBEDDING_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, error_code, details)


class ProviderNotRegisteredError(EmbeddingError):
    """Raised when a requested embedding provider has no registry entry."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            f'Provider "{provider}" is not registered',
            "PROVIDER_NOT_REGISTERED",
            {"provider": provider},
        )
        self.provider = provider


class EmbeddingTransportError(EmbeddingError):
    """Raised when an embedding endpoint could not be reached."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        error_code: str = "TRANSPORT_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details or {})
        if endpoint:
            details["endpoint"] = endpoint
        super().__init__(message, error_code, details)
        self.endpoint = endpoint


class EmbeddingAPIStatusError(EmbeddingTransportError):
    """Raised when an embedding endpoint answers with an error status."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        super().__init__(
            message,
            endpoint,
            "API_STATUS_ERROR",
            {"status_code": status_code, "response_body": response_body},
        )
        self.status_code = status_code
        self.response_body = response_body


class InvalidEmbeddingResponseError(EmbeddingError):
    """Raised when an endpoint answers but the payload holds no usable vector."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message, "INVALID_RESPONSE", {"reason": reason})
        self.reason = reason
