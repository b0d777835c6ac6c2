"""Exceptions raised by the prompt flows."""


class FlowError(Exception):
    """Base exception for all flow errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class FlowValidationError(FlowError):
    """Raised when a flow input or output does not match its schema."""

    status_code = 422


class ProviderError(FlowError):
    """Raised when the model provider call fails."""

    status_code = 502


class KnowledgeBaseError(FlowError):
    """Raised when the knowledge file cannot be read."""

    status_code = 500
