"""Exceptions raised by the documentation adapter."""

from typing import Any, Dict


class DocAdapterError(Exception):
    """Base class for adapter errors."""


class ConfigurationError(DocAdapterError):
    """The wrapped OpenAPI document is missing or malformed."""

    def __init__(
        self,
        error: str = "Swagger configuration is not available",
        message: str = "Please check if the OpenAPI document was properly passed to DocAdapter",
    ):
        super().__init__(f"{error}: {message}")
        self.error = error
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Structured body sent back with the 500 response."""
        return {"error": self.error, "message": self.message}


class DocumentLoadError(DocAdapterError):
    """An OpenAPI document file could not be read or parsed."""
