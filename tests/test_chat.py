import asyncio

import pytest

from conftest import json_response, make_client
from legal_ai.chat import Conversation
from legal_ai.errors import (
    AlreadyProcessingError,
    AuthError,
    DocumentNotReadyError,
    EmptyMessageError,
    SubscriptionRequiredError,
    TemplateNotFoundError,
    ValidationError,
)
from legal_ai.models.completion import CompletionResponse, Reference
from legal_ai.models.document import ChatMode, DocumentStatus, DocumentType
from legal_ai.models.message import Role


class FailingCompleter:
    async def complete(self, request):
        raise RuntimeError("unexpected")


class StubCompleter:
    def __init__(self, response: CompletionResponse):
        self.response = response
        self.requests = []

    async def complete(self, request):
        self.requests.append(request)
        return self.response


def _conversation(client, completer, **kwargs) -> Conversation:
    return Conversation(completer, client.documents, client.templates, client.auth, client.billing, **kwargs)


class TestTranscript:
    def test_seeded_with_greeting(self, offline_client):
        conversation = offline_client.conversation()
        assert len(conversation.messages) == 1
        assert conversation.messages[0].role == Role.ASSISTANT
        assert conversation.document_status == DocumentStatus.NOT_STARTED
        assert conversation.document_type is None

    def test_consultation_greeting(self, offline_client):
        conversation = offline_client.conversation(ChatMode.CONSULTATION)
        assert "консультант" in conversation.messages[0].content

    def test_messages_are_copies(self, offline_client):
        conversation = offline_client.conversation()
        conversation.messages.clear()
        assert len(conversation.messages) == 1

    @pytest.mark.asyncio
    async def test_reset(self, offline_client):
        conversation = offline_client.conversation()
        await conversation.send_message("Нужен договор аренды")
        conversation.reset()
        assert len(conversation.messages) == 1
        assert conversation.document_type is None
        assert conversation.document_status == DocumentStatus.NOT_STARTED


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_purchase_sale_scenario(self, signed_in_client):
        conversation = signed_in_client.conversation()
        reply = await conversation.send_message("Хочу составить договор купли-продажи")
        assert reply.role == Role.ASSISTANT
        assert len(conversation.messages) == 3
        assert conversation.document_type == DocumentType.PURCHASE_SALE
        assert conversation.document_status == DocumentStatus.IN_PROGRESS

        with pytest.raises(DocumentNotReadyError):
            await conversation.generate_document()

        await conversation.send_message("Продаю автомобиль Toyota Camry 2018 года")
        assert len(conversation.messages) == 5
        assert conversation.document_status == DocumentStatus.READY

        url = await conversation.generate_document()
        assert url.startswith("/documents/purchase_sale_")
        assert url.endswith(".pdf")
        assert conversation.document_status == DocumentStatus.COMPLETED

    @pytest.mark.asyncio
    async def test_type_is_sticky(self, offline_client):
        conversation = offline_client.conversation()
        await conversation.send_message("договор аренды")
        await conversation.send_message("а может лучше договор подряда")
        assert conversation.document_type == DocumentType.LEASE

    @pytest.mark.asyncio
    async def test_no_type_never_ready(self, offline_client):
        conversation = offline_client.conversation()
        await conversation.send_message("Здравствуйте")
        await conversation.send_message("Мне нужна помощь")
        assert len(conversation.messages) == 5
        assert conversation.document_status == DocumentStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_empty_message_rejected(self, offline_client):
        conversation = offline_client.conversation()
        with pytest.raises(EmptyMessageError):
            await conversation.send_message("   ")
        assert len(conversation.messages) == 1

    @pytest.mark.asyncio
    async def test_concurrent_send_rejected(self, offline_client):
        gate = asyncio.Event()

        class SlowCompleter:
            async def complete(self, request):
                await gate.wait()
                return CompletionResponse(response="ok")

        conversation = _conversation(offline_client, SlowCompleter())
        first = asyncio.create_task(conversation.send_message("аренда"))
        await asyncio.sleep(0)
        assert conversation.processing
        with pytest.raises(AlreadyProcessingError):
            await conversation.send_message("ещё")
        gate.set()
        await first
        assert not conversation.processing
        assert len(conversation.messages) == 3

    @pytest.mark.asyncio
    async def test_hard_failure_appends_one_apology(self, offline_client):
        conversation = _conversation(offline_client, FailingCompleter())
        reply = await conversation.send_message("договор аренды")
        assert reply.content.startswith("Извините, произошла ошибка")
        assert len(conversation.messages) == 3
        assert conversation.document_type is None
        assert conversation.document_status == DocumentStatus.NOT_STARTED
        assert not conversation.processing

    @pytest.mark.asyncio
    async def test_unreachable_backend_still_answers(self, tmp_path):
        client = make_client(tmp_path, lambda request: json_response({"error": "down"}, 503))
        conversation = client.conversation()
        await conversation.send_message("Нужен трудовой договор")
        assert len(conversation.messages) == 3
        assert conversation.document_type == DocumentType.EMPLOYMENT

    @pytest.mark.asyncio
    async def test_remote_type_adopted(self, offline_client):
        completer = StubCompleter(CompletionResponse(response="Понял", document_type=DocumentType.SERVICES))
        conversation = _conversation(offline_client, completer)
        await conversation.send_message("что-то без ключевых слов")
        assert conversation.document_type == DocumentType.SERVICES

        request = completer.requests[0]
        assert [m.role for m in request.messages] == ["assistant", "user"]
        assert request.document_type is None
        assert request.mode == ChatMode.DOCUMENT

    @pytest.mark.asyncio
    async def test_local_detection_when_remote_has_no_type(self, offline_client):
        completer = StubCompleter(CompletionResponse(response="Понял"))
        conversation = _conversation(offline_client, completer)
        await conversation.send_message("договор оказания услуг")
        assert conversation.document_type == DocumentType.SERVICES

    @pytest.mark.asyncio
    async def test_threshold_is_configurable(self, offline_client):
        conversation = _conversation(offline_client, StubCompleter(CompletionResponse(response="ok")),
                                     readiness_threshold=3)
        await conversation.send_message("аренда")
        assert conversation.document_status == DocumentStatus.READY

    @pytest.mark.asyncio
    async def test_status_does_not_go_back_after_completion(self, signed_in_client):
        conversation = _conversation(signed_in_client, StubCompleter(CompletionResponse(response="ok")),
                                     readiness_threshold=3)
        await conversation.send_message("аренда")
        await conversation.generate_document()
        await conversation.send_message("спасибо")
        assert conversation.document_status == DocumentStatus.COMPLETED


class TestConsultation:
    @pytest.mark.asyncio
    async def test_references_from_local_scan(self, offline_client):
        conversation = offline_client.conversation(ChatMode.CONSULTATION)
        await conversation.send_message("Может ли работодатель не платить зарплату?")
        assert [r.title for r in conversation.references] == ["Трудовой договор"]
        assert conversation.document_type is None
        assert conversation.document_status == DocumentStatus.NOT_STARTED

    @pytest.mark.asyncio
    async def test_document_keywords_do_not_set_type(self, offline_client):
        conversation = offline_client.conversation(ChatMode.CONSULTATION)
        for text in ("аренда", "продажа"):
            await conversation.send_message(text)
        assert conversation.document_type is None
        assert conversation.document_status == DocumentStatus.NOT_STARTED

    @pytest.mark.asyncio
    async def test_remote_references_preferred(self, offline_client):
        ref = Reference(title="Статья 9 ГК РК", content="Защита гражданских прав")
        completer = StubCompleter(CompletionResponse(response="ok", references=[ref]))
        conversation = _conversation(offline_client, completer, mode=ChatMode.CONSULTATION)
        await conversation.send_message("права работника")
        assert conversation.references == [ref]
        assert completer.requests[0].mode == ChatMode.CONSULTATION


class TestGenerationGating:
    @pytest.mark.asyncio
    async def test_generate_requires_identity(self, offline_client):
        conversation = _conversation(offline_client, StubCompleter(CompletionResponse(response="ok")),
                                     readiness_threshold=3)
        await conversation.send_message("аренда")
        with pytest.raises(AuthError) as exc:
            await conversation.generate_document()
        assert exc.value.code == "not_authenticated"
        assert conversation.document_status == DocumentStatus.READY

    @pytest.mark.asyncio
    async def test_template_generation_requires_identity(self, offline_client):
        conversation = offline_client.conversation()
        with pytest.raises(AuthError):
            await conversation.generate_from_template("1", {})

    @pytest.mark.asyncio
    async def test_subscription_required_when_configured(self, tmp_path):
        client = make_client(tmp_path, require_subscription=True)
        client.auth.login("user@example.kz")
        conversation = client.conversation()
        with pytest.raises(SubscriptionRequiredError):
            await conversation.generate_from_template("1", {})

    @pytest.mark.asyncio
    async def test_active_subscription_allows_generation(self, tmp_path):
        def handler(request):
            if request.url.path == "/rest/v1/stripe_user_subscriptions":
                return json_response([{"subscription_status": "active", "price_id": "price_x"}])
            return json_response({"error": "offline"}, 500)

        client = make_client(tmp_path, handler, require_subscription=True)
        client.auth.login("user@example.kz")
        conversation = _conversation(client, StubCompleter(CompletionResponse(response="ok")),
                                     readiness_threshold=3, require_subscription=True)
        await conversation.send_message("аренда")
        assert (await conversation.generate_document()).startswith("/documents/lease_")

    @pytest.mark.asyncio
    async def test_one_generation_at_a_time(self, tmp_path):
        async def slow_billing(request):
            await asyncio.sleep(0.05)
            return json_response([{"subscription_status": "active", "price_id": "price_x"}])

        client = make_client(tmp_path, slow_billing, require_subscription=True)
        client.auth.login("user@example.kz")
        conversation = _conversation(client, StubCompleter(CompletionResponse(response="ok")),
                                     readiness_threshold=3, require_subscription=True)
        await conversation.send_message("аренда")

        first, second = await asyncio.gather(
            conversation.generate_document(),
            conversation.generate_document(),
            return_exceptions=True,
        )
        assert first.startswith("/documents/lease_")
        assert isinstance(second, AlreadyProcessingError)
        assert not conversation.processing
        assert conversation.document_status == DocumentStatus.COMPLETED
        await client.close()

    @pytest.mark.asyncio
    async def test_send_rejected_while_checking_entitlement(self, tmp_path):
        gate = asyncio.Event()

        async def blocked_billing(request):
            await gate.wait()
            return json_response([{"subscription_status": "active"}])

        client = make_client(tmp_path, blocked_billing, require_subscription=True)
        client.auth.login("user@example.kz")
        conversation = _conversation(client, StubCompleter(CompletionResponse(response="ok")),
                                     require_subscription=True)
        task = asyncio.create_task(conversation.generate_from_template("1", {}))
        await asyncio.sleep(0.01)
        assert conversation.processing
        with pytest.raises(AlreadyProcessingError):
            await conversation.send_message("ещё")
        gate.set()
        with pytest.raises(ValidationError):
            await task
        assert not conversation.processing
        assert len(conversation.messages) == 1
        await client.close()


class TestTemplateGeneration:
    @pytest.mark.asyncio
    async def test_nonexistent_template(self, signed_in_client):
        conversation = signed_in_client.conversation()
        with pytest.raises(TemplateNotFoundError):
            await conversation.generate_from_template("nonexistent-id", {})
        assert not conversation.processing

    @pytest.mark.asyncio
    async def test_missing_required_fields(self, signed_in_client):
        conversation = signed_in_client.conversation()
        with pytest.raises(ValidationError) as exc:
            await conversation.generate_from_template("2", {"city": "Алматы"})
        assert set(exc.value.details) == {"date", "lessor_name", "lessee_name", "property_description"}
        assert len(conversation.messages) == 1

    @pytest.mark.asyncio
    async def test_generates_filled_document(self, signed_in_client):
        conversation = signed_in_client.conversation()
        form = {
            "city": "Алматы",
            "date": "2025-03-01",
            "lessor_name": "Иванов И.И.",
            "lessee_name": "Сапаров А.Б.",
            "property_description": "офис 40 м2",
        }
        url = await conversation.generate_from_template("2", form)
        assert url.startswith("/documents/template_lease_")
        assert conversation.document_status == DocumentStatus.COMPLETED
        assert conversation.messages[-1].content.startswith("Документ по шаблону успешно сформирован")

        document = signed_in_client.documents.get(url)
        assert document.template_id == "2"
        assert "г. Алматы 2025-03-01" in document.content
        assert "{{purpose}}" in document.content
