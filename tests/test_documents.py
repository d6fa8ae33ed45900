import re

import pytest

from conftest import make_settings
from legal_ai.documents import DocumentGenerator
from legal_ai.errors import TemplateNotFoundError
from legal_ai.models.document import DocumentType
from legal_ai.templates import TemplateStore
from legal_ai.transport.http import HttpClient


@pytest.fixture
def generator(tmp_path):
    return DocumentGenerator(TemplateStore(HttpClient()), make_settings(tmp_path))


class TestDocumentGenerator:
    @pytest.mark.asyncio
    async def test_generate(self, generator):
        url = await generator.generate(DocumentType.EMPLOYMENT)
        assert re.fullmatch(r"/documents/employment_\d+_[0-9a-f]{8}\.pdf", url)
        document = generator.get(url)
        assert document.document_type == DocumentType.EMPLOYMENT
        assert document.template_id is None

    @pytest.mark.asyncio
    async def test_generate_from_template(self, generator):
        url = await generator.generate_from_template("1", {"city": "Астана", "price": 1500000})
        assert re.fullmatch(r"/documents/template_purchase_sale_\d+_[0-9a-f]{8}\.pdf", url)
        document = generator.get(url)
        assert document.template_id == "1"
        assert document.content.startswith("ДОГОВОР")
        assert "г. Астана {{date}}" in document.content
        assert "1500000 ({{price_in_words}})" in document.content

    @pytest.mark.asyncio
    async def test_unknown_template(self, generator):
        with pytest.raises(TemplateNotFoundError) as exc:
            await generator.generate_from_template("nonexistent-id", {})
        assert exc.value.details == {"template_id": "nonexistent-id"}

    @pytest.mark.asyncio
    async def test_base_url(self, tmp_path):
        generator = DocumentGenerator(
            TemplateStore(HttpClient()),
            make_settings(tmp_path, documents_base_url="https://files.test/docs/"),
        )
        url = await generator.generate(DocumentType.LEASE)
        assert url.startswith("https://files.test/docs/lease_")

    def test_unknown_url(self, generator):
        assert generator.get("/documents/missing.pdf") is None

    @pytest.mark.asyncio
    async def test_urls_unique_within_a_millisecond(self, generator, monkeypatch):
        monkeypatch.setattr("legal_ai.documents.time.time", lambda: 1767225600.0)
        first = await generator.generate(DocumentType.LEASE)
        second = await generator.generate(DocumentType.LEASE)
        assert first != second
        assert generator.get(first) is not None
        assert generator.get(second) is not None

    @pytest.mark.asyncio
    async def test_records_bounded(self, generator, monkeypatch):
        monkeypatch.setattr("legal_ai.documents.MAX_RECORDS", 2)
        urls = [await generator.generate(DocumentType.SERVICES) for _ in range(3)]
        assert generator.get(urls[0]) is None
        assert generator.get(urls[1]) is not None
        assert generator.get(urls[2]) is not None
