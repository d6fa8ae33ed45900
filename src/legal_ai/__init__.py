"""
legal-ai: AI legal document assistant SDK for Python.

Chat with the assistant to settle on a document type, fill a template and
generate the document. Works offline with a scripted assistant and sample
templates when no backend is configured.
"""

from legal_ai.client import LegalAI, AsyncLegalAI
from legal_ai.chat import Conversation
from legal_ai.config import Settings
from legal_ai.templates import TemplateStore, fill_template
from legal_ai.errors import (
    LegalAIError,
    AuthError,
    SubscriptionRequiredError,
    DocumentNotReadyError,
    TemplateNotFoundError,
    ValidationError,
    EmptyMessageError,
    AlreadyProcessingError,
    GenerationError,
    CheckoutError,
)
from legal_ai.models.document import ChatMode, DocumentStatus, DocumentType

__version__ = "0.1.0"
__all__ = [
    "LegalAI",
    "AsyncLegalAI",
    "Conversation",
    "Settings",
    "TemplateStore",
    "fill_template",
    "LegalAIError",
    "AuthError",
    "SubscriptionRequiredError",
    "DocumentNotReadyError",
    "TemplateNotFoundError",
    "ValidationError",
    "EmptyMessageError",
    "AlreadyProcessingError",
    "GenerationError",
    "CheckoutError",
    "ChatMode",
    "DocumentStatus",
    "DocumentType",
]
