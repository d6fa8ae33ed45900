"""
Document type and status enumerations.
"""

from enum import Enum


class DocumentType(str, Enum):
    PURCHASE_SALE = "purchase_sale"
    LEASE = "lease"
    SERVICES = "services"
    CONTRACT_WORK = "contract_work"
    EMPLOYMENT = "employment"


class DocumentStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    READY = "ready"
    COMPLETED = "completed"

    @property
    def rank(self) -> int:
        return STATUS_ORDER.index(self)


STATUS_ORDER = [
    DocumentStatus.NOT_STARTED,
    DocumentStatus.IN_PROGRESS,
    DocumentStatus.READY,
    DocumentStatus.COMPLETED,
]


class ChatMode(str, Enum):
    CONSULTATION = "consultation"
    DOCUMENT = "document"
