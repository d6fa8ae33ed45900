"""
LegalAI / AsyncLegalAI: main SDK clients.

The client builds every collaborator once (HTTP transport, auth, template
store, billing, completion, document generator) and hands them to each
Conversation it creates. Conversations never share a transcript.
"""

import asyncio
from typing import Any, Optional

import httpx

from legal_ai.auth import Auth
from legal_ai.billing import BillingAPI
from legal_ai.chat import Conversation
from legal_ai.completion import FallbackCompleter, RemoteCompleter, ScriptedResponder
from legal_ai.config import Settings
from legal_ai.documents import DocumentGenerator
from legal_ai.i18n import normalize_locale
from legal_ai.models.document import ChatMode
from legal_ai.templates import TemplateStore
from legal_ai.transport.http import HttpClient


class AsyncLegalAI:
    """Async Legal AI client (primary)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        self.settings = settings or Settings.load(**overrides)
        self.locale = normalize_locale(self.settings.locale)

        self.http = HttpClient(
            base_url=self.settings.supabase_url,
            api_key=self.settings.supabase_anon_key,
            timeout=self.settings.request_timeout,
            transport=transport,
        )
        self.auth = Auth(self.settings.session_file)
        self.templates = TemplateStore(self.http)
        self.billing = BillingAPI(self.http)
        self.documents = DocumentGenerator(self.templates, self.settings)
        self.completer = FallbackCompleter(
            RemoteCompleter(self.http, timeout=self.settings.request_timeout),
            ScriptedResponder(locale=self.locale, threshold=self.settings.readiness_threshold),
        )

    def conversation(self, mode: ChatMode = ChatMode.DOCUMENT) -> Conversation:
        """Start a new conversation with its own transcript."""
        return Conversation(
            self.completer,
            self.documents,
            self.templates,
            self.auth,
            self.billing,
            mode=mode,
            locale=self.locale,
            readiness_threshold=self.settings.readiness_threshold,
            require_subscription=self.settings.require_subscription,
        )

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncLegalAI":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class LegalAI:
    """Sync wrapper around AsyncLegalAI. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncLegalAI(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def settings(self) -> Settings:
        return self._async.settings

    @property
    def auth(self) -> Auth:
        return self._async.auth

    @property
    def documents(self) -> DocumentGenerator:
        return self._async.documents

    def conversation(self, mode: ChatMode = ChatMode.DOCUMENT) -> "SyncConversation":
        return SyncConversation(self._async.conversation(mode), self._run)

    def list_templates(self, document_type: Any = None) -> list[Any]:
        if document_type is None:
            return self._run(self._async.templates.list_all())
        return self._run(self._async.templates.list_by_type(document_type))

    def get_template(self, template_id: str) -> Any:
        return self._run(self._async.templates.get_by_id(template_id))

    def list_template_fields(self, template_id: str) -> list[Any]:
        return self._run(self._async.templates.list_fields(template_id))

    def get_subscription(self) -> Any:
        return self._run(self._async.billing.get_subscription())

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()


class SyncConversation:
    """Blocking view of a Conversation."""

    def __init__(self, conversation: Conversation, run: Any):
        self._conversation = conversation
        self._run = run

    def __getattr__(self, name: str) -> Any:
        return getattr(self._conversation, name)

    def send_message(self, content: str) -> Any:
        return self._run(self._conversation.send_message(content))

    def generate_document(self) -> str:
        return self._run(self._conversation.generate_document())

    def generate_from_template(self, template_id: str, form_data: dict[str, Any]) -> str:
        return self._run(self._conversation.generate_from_template(template_id, form_data))
