"""Basic unit tests for the legal-ai package."""

from legal_ai import (
    AsyncLegalAI,
    LegalAI,
    LegalAIError,
    AuthError,
    DocumentNotReadyError,
    TemplateNotFoundError,
    ValidationError,
    EmptyMessageError,
    AlreadyProcessingError,
    GenerationError,
    SubscriptionRequiredError,
    DocumentType,
    DocumentStatus,
    ChatMode,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert LegalAI is not None
    assert AsyncLegalAI is not None


def test_error_hierarchy():
    for cls in (AuthError, DocumentNotReadyError, TemplateNotFoundError, ValidationError,
                AlreadyProcessingError, GenerationError, SubscriptionRequiredError):
        assert issubclass(cls, LegalAIError)
    assert issubclass(EmptyMessageError, ValidationError)


def test_error_attributes():
    err = LegalAIError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    missing = TemplateNotFoundError("42")
    assert missing.code == "template_not_found"
    assert missing.details == {"template_id": "42"}

    invalid = ValidationError("bad form", details={"city": "required"})
    assert invalid.code == "validation_error"
    assert invalid.details == {"city": "required"}

    assert EmptyMessageError().code == "empty_message"
    assert DocumentNotReadyError().code == "document_not_ready"
    assert AuthError("nope", code="not_authenticated").code == "not_authenticated"


def test_enum_values():
    assert DocumentType.PURCHASE_SALE == "purchase_sale"
    assert DocumentType.CONTRACT_WORK == "contract_work"
    assert DocumentStatus.READY == "ready"
    assert ChatMode.CONSULTATION == "consultation"


def test_status_order():
    assert DocumentStatus.NOT_STARTED.rank < DocumentStatus.IN_PROGRESS.rank
    assert DocumentStatus.IN_PROGRESS.rank < DocumentStatus.READY.rank
    assert DocumentStatus.READY.rank < DocumentStatus.COMPLETED.rank


def test_sync_client(tmp_path):
    from conftest import make_settings

    client = LegalAI(settings=make_settings(tmp_path))
    try:
        assert [t.id for t in client.list_templates()] == ["2", "1"]
        assert [t.id for t in client.list_templates(DocumentType.LEASE)] == ["2"]
        assert client.get_template("nonexistent-id") is None
        assert len(client.list_template_fields("1")) == 11
        assert client.get_subscription() is None

        client.auth.login("user@example.kz")
        conversation = client.conversation()
        conversation.send_message("Хочу составить договор купли-продажи")
        conversation.send_message("Продаю автомобиль")
        assert conversation.document_status == DocumentStatus.READY
        assert conversation.generate_document().startswith("/documents/purchase_sale_")
    finally:
        client.close()
