"""
Template records as stored in the `templates` and `template_fields` tables.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel

from legal_ai.models.document import DocumentType

FormValue = Union[str, int, float]
TemplateFormData = dict[str, FormValue]


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


class Template(BaseModel):
    id: str
    name: str
    description: str = ""
    content: str
    document_type: DocumentType
    created_at: Optional[str] = None


class TemplateField(BaseModel):
    id: str
    template_id: str
    field_name: str           # placeholder key inside {{...}}
    display_name: str         # form label
    field_type: FieldType = FieldType.TEXT
    required: bool = False
    order: int = 0
    created_at: Optional[str] = None
