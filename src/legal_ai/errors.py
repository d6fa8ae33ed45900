"""
Legal AI error types.

Collaborator failures are absorbed by the components that own them; only the
precondition and validation errors below reach the caller.
"""

from typing import Any, Optional


class LegalAIError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class AuthError(LegalAIError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class SubscriptionRequiredError(LegalAIError):
    def __init__(self, message: str = "An active subscription is required"):
        super().__init__("subscription_required", message)


class DocumentNotReadyError(LegalAIError):
    def __init__(self, message: str = "Document is not ready"):
        super().__init__("document_not_ready", message)


class TemplateNotFoundError(LegalAIError):
    def __init__(self, template_id: str):
        super().__init__("template_not_found", f"Template not found: {template_id}", {"template_id": template_id})


class ValidationError(LegalAIError):
    """details maps field name -> error message."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None, code: str = "validation_error"):
        super().__init__(code, message, details)


class EmptyMessageError(ValidationError):
    def __init__(self, message: str = "Message must not be empty"):
        super().__init__(message, code="empty_message")


class AlreadyProcessingError(LegalAIError):
    def __init__(self, message: str = "Another request is already in progress"):
        super().__init__("already_processing", message)


class GenerationError(LegalAIError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("generation_error", message, details)


class CheckoutError(LegalAIError):
    def __init__(self, message: str):
        super().__init__("checkout_error", message)
