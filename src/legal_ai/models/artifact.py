"""
Generated document records.
"""

from typing import Optional

from pydantic import BaseModel

from legal_ai.models.document import DocumentType


class GeneratedDocument(BaseModel):
    url: str
    document_type: DocumentType
    template_id: Optional[str] = None
    content: Optional[str] = None
    created_at: str
