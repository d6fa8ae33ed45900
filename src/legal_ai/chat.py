"""
Conversation: the chat-driven document pipeline.

One Conversation owns one transcript. Every user message goes through:
- transcript append
- completion (remote service or scripted fallback)
- document type merge (first detection is kept) and readiness update
and generation is only allowed once the conversation reached `ready`.

Calls are serialized by the `processing` flag: a second request while one is
in flight is rejected with AlreadyProcessingError instead of being queued.
"""

import logging
from typing import Optional

from legal_ai.auth import Auth
from legal_ai.billing import BillingAPI
from legal_ai.completion import FallbackCompleter
from legal_ai.detection import DEFAULT_READINESS_THRESHOLD, detect_document_type, infer_status, last_user_message
from legal_ai.documents import DocumentGenerator
from legal_ai.errors import (
    AlreadyProcessingError,
    DocumentNotReadyError,
    EmptyMessageError,
    SubscriptionRequiredError,
    TemplateNotFoundError,
)
from legal_ai.i18n import translate
from legal_ai.knowledge import find_references
from legal_ai.models.completion import CompletionRequest, CompletionResponse, Reference, WireMessage
from legal_ai.models.document import ChatMode, DocumentStatus, DocumentType
from legal_ai.models.message import Message, Role
from legal_ai.models.template import TemplateFormData
from legal_ai.templates import TemplateStore, require_valid_form

logger = logging.getLogger(__name__)


class Conversation:
    def __init__(
        self,
        completer: FallbackCompleter,
        generator: DocumentGenerator,
        templates: TemplateStore,
        auth: Auth,
        billing: Optional[BillingAPI] = None,
        *,
        mode: ChatMode = ChatMode.DOCUMENT,
        locale: str = "ru",
        readiness_threshold: int = DEFAULT_READINESS_THRESHOLD,
        require_subscription: bool = False,
    ):
        self._completer = completer
        self._generator = generator
        self._templates = templates
        self._auth = auth
        self._billing = billing
        self.mode = ChatMode(mode)
        self.locale = locale
        self.readiness_threshold = readiness_threshold
        self.require_subscription = require_subscription

        self._messages: list[Message] = []
        self.document_type: Optional[DocumentType] = None
        self.document_status = DocumentStatus.NOT_STARTED
        self.references: list[Reference] = []
        self.processing = False
        self.reset()

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    def reset(self) -> None:
        """Back to a single greeting, no document type, not_started."""
        greeting_key = "consultationWelcomeMessage" if self.mode == ChatMode.CONSULTATION else "welcomeMessage"
        self._messages = [Message(role=Role.ASSISTANT, content=translate(self.locale, greeting_key))]
        self.document_type = None
        self.document_status = DocumentStatus.NOT_STARTED
        self.references = []

    async def send_message(self, content: str) -> Message:
        """Append a user message, get the assistant reply and return it."""
        if not content or not content.strip():
            raise EmptyMessageError()
        self._ensure_idle()

        self.processing = True
        try:
            self._messages.append(Message(role=Role.USER, content=content))
            try:
                response = await self._completer.complete(self._build_request())
            except Exception:
                logger.exception("Error in send_message")
                return self._append_assistant(translate(self.locale, "errorMessage"))

            reply = self._append_assistant(response.response)
            if self.mode == ChatMode.DOCUMENT:
                self._update_document_state(response)
            else:
                self.references = response.references if response.references is not None else find_references(content)
            return reply
        finally:
            self.processing = False

    async def generate_document(self) -> str:
        """Materialize the detected document. Requires sign-in and status ready."""
        self._ensure_idle()
        self.processing = True
        try:
            await self._check_entitlement()
            if self.document_type is None or self.document_status != DocumentStatus.READY:
                raise DocumentNotReadyError(translate(self.locale, "documentNotReady"))
            url = await self._generator.generate(self.document_type)
        finally:
            self.processing = False
        self._advance_status(DocumentStatus.COMPLETED)
        return url

    async def generate_from_template(self, template_id: str, form_data: TemplateFormData) -> str:
        """Fill a template and materialize it. Requires sign-in and all required fields."""
        self._ensure_idle()
        self.processing = True
        try:
            await self._check_entitlement()
            template = await self._templates.get_by_id(template_id)
            if template is None:
                raise TemplateNotFoundError(template_id)
            fields = await self._templates.list_fields(template_id)
            require_valid_form(fields, form_data, self.locale)
            url = await self._generator.generate_from_template(template_id, form_data)
        finally:
            self.processing = False

        self._append_assistant(translate(self.locale, "templateDocumentGenerated"))
        self._advance_status(DocumentStatus.COMPLETED)
        return url

    def _build_request(self) -> CompletionRequest:
        return CompletionRequest(
            messages=[WireMessage(**m.to_wire()) for m in self._messages],
            document_type=self.document_type,
            mode=self.mode,
        )

    def _update_document_state(self, response: CompletionResponse) -> None:
        if self.document_type is None:
            detected = response.document_type
            if detected is None:
                last = last_user_message(self._messages)
                detected = detect_document_type(last.content) if last else None
            if detected is not None:
                self.document_type = detected
                logger.debug("Detected document type %s", detected.value)
        self._advance_status(infer_status(len(self._messages), self.document_type, self.readiness_threshold))

    def _advance_status(self, status: DocumentStatus) -> None:
        if status.rank > self.document_status.rank:
            logger.debug("Document status %s -> %s", self.document_status.value, status.value)
            self.document_status = status

    def _append_assistant(self, content: str) -> Message:
        message = Message(role=Role.ASSISTANT, content=content)
        self._messages.append(message)
        return message

    def _ensure_idle(self) -> None:
        if self.processing:
            raise AlreadyProcessingError()

    async def _check_entitlement(self) -> None:
        self._auth.require_identity()
        if self.require_subscription:
            if self._billing is None or not await self._billing.has_active_subscription():
                raise SubscriptionRequiredError(translate(self.locale, "subscriptionRequired"))
