"""
Exceptions for the provider search service

Every error the search core detects maps to one of these, and each one
renders as an explicit error payload: {"error": message, "kind": error_code}.
"""

from fastapi import status
from typing import Optional, Dict, Any, List


class ProviderSearchException(Exception):
    """Base exception for all provider search errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "InternalError",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        payload = {"error": self.message, "kind": self.error_code}
        if self.details:
            payload["details"] = self.details
        return payload


class ConfigurationMissing(ProviderSearchException):
    """Raised at startup when a required setting is absent"""

    def __init__(self, fields: List[str]):
        super().__init__(
            message=f"Missing required configuration: {', '.join(fields)}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="ConfigurationMissing",
            details={"fields": fields}
        )


class EmbeddingUnavailable(ProviderSearchException):
    """Raised when the embedding provider fails, times out or returns a malformed payload"""

    def __init__(self, message: str):
        super().__init__(
            message=f"Embedding generation failed: {message}",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="EmbeddingUnavailable"
        )


class RetrievalFailure(ProviderSearchException):
    """Raised when the provider corpus returns an error or times out"""

    def __init__(self, message: str):
        super().__init__(
            message=f"Provider retrieval failed: {message}",
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="RetrievalFailure"
        )


class MalformedRequest(ProviderSearchException):
    """Raised when the query or filters fail shape validation"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="MalformedRequest",
            details=details
        )
