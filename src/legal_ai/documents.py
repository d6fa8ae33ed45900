"""
Document materialization.

No file is rendered yet: each call waits `generation_delay` seconds and
returns a reference under `documents_base_url`. The generated record, and for
template documents the filled body, is kept so it can be retrieved later.
"""

import asyncio
import logging
import time
import uuid
from datetime import datetime, timezone
from typing import Optional

from legal_ai.config import Settings
from legal_ai.errors import GenerationError, LegalAIError, TemplateNotFoundError
from legal_ai.models.artifact import GeneratedDocument
from legal_ai.models.document import DocumentType
from legal_ai.models.template import TemplateFormData
from legal_ai.templates import TemplateStore, fill_template

logger = logging.getLogger(__name__)

# generated records kept for get(); oldest dropped first
MAX_RECORDS = 256


class DocumentGenerator:
    def __init__(self, templates: TemplateStore, settings: Optional[Settings] = None):
        self._templates = templates
        self._settings = settings or Settings()
        self._documents: dict[str, GeneratedDocument] = {}

    async def generate(self, document_type: DocumentType) -> str:
        try:
            await asyncio.sleep(self._settings.generation_delay)
            url = self._url(f"{document_type.value}_{_stamp()}.pdf")
        except Exception as e:
            raise GenerationError(f"Failed to generate {document_type.value} document: {e}") from e
        self._record(GeneratedDocument(url=url, document_type=document_type, created_at=_now_iso()))
        return url

    async def generate_from_template(self, template_id: str, form_data: TemplateFormData) -> str:
        template = await self._templates.get_by_id(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        try:
            content = fill_template(template.content, form_data)
            await asyncio.sleep(self._settings.generation_delay)
            url = self._url(f"template_{template.document_type.value}_{_stamp()}.pdf")
        except LegalAIError:
            raise
        except Exception as e:
            raise GenerationError(f"Failed to generate document from template {template_id}: {e}",
                                  {"template_id": template_id}) from e
        self._record(GeneratedDocument(
            url=url, document_type=template.document_type, template_id=template_id,
            content=content, created_at=_now_iso(),
        ))
        return url

    def get(self, url: str) -> Optional[GeneratedDocument]:
        return self._documents.get(url)

    def _url(self, name: str) -> str:
        return f"{self._settings.documents_base_url.rstrip('/')}/{name}"

    def _record(self, document: GeneratedDocument) -> None:
        self._documents[document.url] = document
        while len(self._documents) > MAX_RECORDS:
            del self._documents[next(iter(self._documents))]
        logger.info("Generated document %s", document.url)


def _stamp() -> str:
    """Epoch milliseconds plus a random suffix, unique within a millisecond."""
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
