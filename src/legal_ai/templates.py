"""
Template store access, form helpers and placeholder filling.

Templates live in the `templates` table, their form fields in
`template_fields`. When the store cannot be reached every lookup is answered
from the bundled sample templates instead.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

from legal_ai import fixtures
from legal_ai.errors import ValidationError
from legal_ai.i18n import translate
from legal_ai.models.document import DocumentType
from legal_ai.models.template import Template, TemplateField, TemplateFormData
from legal_ai.transport.http import HttpClient

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{([^{}]+)\}\}")

SOURCE_REMOTE = "remote"
SOURCE_FIXTURES = "fixtures"

ModelT = TypeVar("ModelT", bound=BaseModel)


class TemplateStore:
    def __init__(self, http: HttpClient):
        self._http = http
        self.last_source: Optional[str] = None

    async def list_all(self) -> list[Template]:
        rows = await self._load("templates", Template, order="name")
        if rows is None:
            return sorted(fixtures.TEMPLATES, key=lambda t: t.name)
        return rows

    async def list_by_type(self, document_type: DocumentType) -> list[Template]:
        rows = await self._load("templates", Template, {"document_type": document_type.value}, order="name")
        if rows is None:
            return sorted((t for t in fixtures.TEMPLATES if t.document_type == document_type), key=lambda t: t.name)
        return rows

    async def get_by_id(self, template_id: str) -> Optional[Template]:
        rows = await self._load("templates", Template, {"id": template_id})
        if rows is None:
            return next((t for t in fixtures.TEMPLATES if t.id == template_id), None)
        return rows[0] if rows else None

    async def list_fields(self, template_id: str) -> list[TemplateField]:
        fields = await self._load("template_fields", TemplateField, {"template_id": template_id}, order="order")
        if fields is None:
            fields = list(fixtures.TEMPLATE_FIELDS.get(template_id, []))
        # sorted() is stable, so equal `order` values keep arrival order
        return sorted(fields, key=lambda f: f.order)

    async def _load(
        self,
        table: str,
        model: type[ModelT],
        filters: Optional[dict[str, Any]] = None,
        order: Optional[str] = None,
    ) -> Optional[list[ModelT]]:
        """Parsed rows from the store, or None when the fixtures must be used."""
        if not self._http.configured:
            logger.warning("Template store not configured, using sample templates")
            self.last_source = SOURCE_FIXTURES
            return None
        try:
            rows = await self._http.select(table, filters, order=order)
            records = [model.model_validate(row) for row in rows]
        except Exception as e:
            logger.warning("Failed to fetch %s, using sample templates: %s", table, e)
            self.last_source = SOURCE_FIXTURES
            return None
        self.last_source = SOURCE_REMOTE
        return records


def fill_template(content: str, data: TemplateFormData) -> str:
    """Replace each {{key}} present in data with str(value).

    Single pass over content: unknown placeholders stay as they are and
    inserted values are never scanned again.
    """
    def repl(m: re.Match[str]) -> str:
        key = m.group(1)
        if key in data:
            return str(data[key])
        return m.group(0)

    return PLACEHOLDER_RE.sub(repl, content)


def find_placeholders(content: str) -> list[str]:
    seen: list[str] = []
    for m in PLACEHOLDER_RE.finditer(content):
        if m.group(1) not in seen:
            seen.append(m.group(1))
    return seen


def initial_form_data(fields: list[TemplateField]) -> dict[str, str]:
    return {field.field_name: "" for field in fields}


def validate_form(fields: list[TemplateField], data: TemplateFormData, locale: str = "ru") -> dict[str, str]:
    errors: dict[str, str] = {}
    for field in fields:
        value = data.get(field.field_name)
        if field.required and (value is None or (isinstance(value, str) and not value.strip())):
            errors[field.field_name] = translate(locale, "fieldRequired")
    return errors


def require_valid_form(fields: list[TemplateField], data: TemplateFormData, locale: str = "ru") -> None:
    errors = validate_form(fields, data, locale)
    if errors:
        raise ValidationError("Required template fields are missing", details=errors)
