"""
Keyword-based document type detection and readiness heuristics.

Detection is a plain ordered scan: the first keyword (in table order) found
as a case-insensitive substring of the text decides the type. Keywords are
word stems so inflected forms ("купли-продажи", "аренды") still match.
"""

from typing import Iterable, Optional

from legal_ai.models.document import DocumentStatus, DocumentType
from legal_ai.models.message import Message, Role

DEFAULT_READINESS_THRESHOLD = 5

DOCUMENT_KEYWORDS: list[tuple[str, DocumentType]] = [
    ("купл", DocumentType.PURCHASE_SALE),
    ("продаж", DocumentType.PURCHASE_SALE),
    ("покупк", DocumentType.PURCHASE_SALE),
    ("купить", DocumentType.PURCHASE_SALE),
    ("продать", DocumentType.PURCHASE_SALE),
    ("сатып ал", DocumentType.PURCHASE_SALE),
    ("сату", DocumentType.PURCHASE_SALE),
    ("аренд", DocumentType.LEASE),
    ("съем", DocumentType.LEASE),
    ("жалға", DocumentType.LEASE),
    ("жалда", DocumentType.LEASE),
    ("услуг", DocumentType.SERVICES),
    ("қызмет көрсет", DocumentType.SERVICES),
    ("подряд", DocumentType.CONTRACT_WORK),
    ("выполнение работ", DocumentType.CONTRACT_WORK),
    ("работы", DocumentType.CONTRACT_WORK),
    ("мердігер", DocumentType.CONTRACT_WORK),
    ("трудов", DocumentType.EMPLOYMENT),
    ("найм", DocumentType.EMPLOYMENT),
    ("работа", DocumentType.EMPLOYMENT),
    ("еңбек", DocumentType.EMPLOYMENT),
]


def detect_document_type(
    text: str,
    keywords: Iterable[tuple[str, DocumentType]] = DOCUMENT_KEYWORDS,
) -> Optional[DocumentType]:
    lowered = text.lower()
    for keyword, document_type in keywords:
        if keyword.lower() in lowered:
            return document_type
    return None


def infer_status(
    message_count: int,
    document_type: Optional[DocumentType],
    threshold: int = DEFAULT_READINESS_THRESHOLD,
) -> DocumentStatus:
    """ready iff a type is known and the transcript has reached threshold messages."""
    if document_type is not None and message_count >= threshold:
        return DocumentStatus.READY
    return DocumentStatus.IN_PROGRESS


def last_user_message(messages: Iterable[Message]) -> Optional[Message]:
    last = None
    for message in messages:
        if message.role == Role.USER:
            last = message
    return last
