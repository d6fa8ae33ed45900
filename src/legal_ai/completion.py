"""
Completion service access.

The remote `chat` edge function is tried once; when the backend is not
configured, or the call fails in any way, the deterministic scripted
responder answers instead so the assistant keeps working offline.
"""

import asyncio
import logging
from typing import Optional

from legal_ai.detection import DEFAULT_READINESS_THRESHOLD, detect_document_type, infer_status
from legal_ai.i18n import document_type_name, translate
from legal_ai.knowledge import find_references
from legal_ai.models.completion import CompletionRequest, CompletionResponse
from legal_ai.models.document import ChatMode, DocumentStatus
from legal_ai.transport.http import HttpClient

logger = logging.getLogger(__name__)

CHAT_FUNCTION = "chat"
GREETING_WORDS = ("привет", "здравствуй", "сәлем")


class RemoteCompleter:
    def __init__(self, http: HttpClient, timeout: Optional[float] = None):
        self._http = http
        self._timeout = timeout if timeout is not None else http.timeout

    @property
    def available(self) -> bool:
        return self._http.configured

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        body = request.model_dump(mode="json", by_alias=True)
        data = await asyncio.wait_for(self._http.invoke(CHAT_FUNCTION, body), timeout=self._timeout)
        return CompletionResponse.model_validate(data)


class ScriptedResponder:
    """Answers locally using keyword detection and a handful of canned replies."""

    def __init__(self, locale: str = "ru", threshold: int = DEFAULT_READINESS_THRESHOLD):
        self.locale = locale
        self.threshold = threshold

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        return self.respond(request)

    def respond(self, request: CompletionRequest) -> CompletionResponse:
        user_input = ""
        for message in request.messages:
            if message.role == "user":
                user_input = message.content
        user_input = user_input.lower()

        if request.mode == ChatMode.CONSULTATION:
            return self._consult(user_input)

        document_type = request.document_type or detect_document_type(user_input)
        # the reply being produced counts towards the transcript length
        status = infer_status(len(request.messages) + 1, document_type, self.threshold)

        if document_type and status == DocumentStatus.READY:
            text = translate(self.locale, "mockDocumentReady",
                             {"documentType": document_type_name(self.locale, document_type)})
        elif document_type:
            text = translate(self.locale, "mockDocumentTypeKnown",
                             {"documentType": document_type_name(self.locale, document_type)})
        elif any(word in user_input for word in GREETING_WORDS):
            text = translate(self.locale, "mockGreeting")
        else:
            text = translate(self.locale, "mockAskDocumentType")

        return CompletionResponse(response=text, document_type=document_type, document_status=status)

    def _consult(self, user_input: str) -> CompletionResponse:
        references = find_references(user_input)
        if references:
            text = translate(self.locale, "mockConsultationReference", {"title": references[0].title})
        else:
            text = translate(self.locale, "mockConsultation")
        return CompletionResponse(
            response=text,
            document_status=DocumentStatus.NOT_STARTED,
            references=references,
        )


class FallbackCompleter:
    """One remote attempt, one local fallback tier. Never raises for service failures."""

    def __init__(self, remote: RemoteCompleter, scripted: ScriptedResponder):
        self.remote = remote
        self.scripted = scripted
        self.last_source: Optional[str] = None

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        if not self.remote.available:
            logger.warning("Backend credentials not found, using scripted response")
            self.last_source = "scripted"
            return await self.scripted.complete(request)
        try:
            response = await self.remote.complete(request)
        except Exception as e:
            logger.warning("Completion service unavailable, using scripted response: %s", e)
            self.last_source = "scripted"
            return await self.scripted.complete(request)
        self.last_source = "remote"
        return response
