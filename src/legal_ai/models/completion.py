"""
Completion service request/response: the `chat` edge function contract.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from legal_ai.models.document import ChatMode, DocumentStatus, DocumentType


class Reference(BaseModel):
    title: str
    content: str


class WireMessage(BaseModel):
    role: str
    content: str


class CompletionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: list[WireMessage]
    document_type: Optional[DocumentType] = Field(default=None, alias="documentType")
    mode: ChatMode = ChatMode.DOCUMENT


class CompletionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    response: str
    document_type: Optional[DocumentType] = Field(default=None, alias="documentType")
    document_status: DocumentStatus = Field(default=DocumentStatus.IN_PROGRESS, alias="documentStatus")
    references: Optional[list[Reference]] = None
