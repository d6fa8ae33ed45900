"""
Built-in legal knowledge base used by the consultation mode.
"""

from typing import Optional

from pydantic import BaseModel

from legal_ai.models.completion import Reference


class KnowledgeDocument(BaseModel):
    id: str
    title: str
    content: str
    tags: list[str] = []

    def as_reference(self) -> Reference:
        return Reference(title=self.title, content=self.content)


class KnowledgeCategory(BaseModel):
    id: str
    title: str
    documents: list[KnowledgeDocument]


CATEGORIES: list[KnowledgeCategory] = [
    KnowledgeCategory(
        id="cat1",
        title="Гражданское право",
        documents=[
            KnowledgeDocument(
                id="doc1",
                title="Договор купли-продажи",
                content=(
                    "Договор купли-продажи регулируется ГК РК. Статья 406 определяет договор "
                    "купли-продажи как договор, по которому одна сторона (продавец) обязуется "
                    "передать вещь (товар) в собственность другой стороне (покупателю), а "
                    "покупатель обязуется принять этот товар и уплатить за него определенную "
                    "денежную сумму (цену)."
                ),
                tags=["договор", "купля-продажа", "ГК РК"],
            ),
            KnowledgeDocument(
                id="doc2",
                title="Договор аренды",
                content=(
                    "Договор аренды регулируется главой 29 ГК РК. По договору аренды "
                    "(имущественного найма) арендодатель (наймодатель) обязуется предоставить "
                    "арендатору (нанимателю) имущество за плату во временное владение и "
                    "пользование или во временное пользование."
                ),
                tags=["договор", "аренда", "ГК РК"],
            ),
        ],
    ),
    KnowledgeCategory(
        id="cat2",
        title="Трудовое право",
        documents=[
            KnowledgeDocument(
                id="doc3",
                title="Трудовой договор",
                content=(
                    "Трудовой договор регулируется Трудовым кодексом РК. Согласно ст. 33, "
                    "трудовой договор - письменное соглашение между работником и работодателем, "
                    "в соответствии с которым работник обязуется лично выполнять определенную "
                    "работу, а работодатель обязуется предоставить работу, выплачивать работнику "
                    "заработную плату и обеспечивать условия труда."
                ),
                tags=["трудовой договор", "Трудовой кодекс"],
            ),
        ],
    ),
]

# Scanned in order, first hit wins. Kept disjoint from the document-type keywords.
CONSULTATION_KEYWORDS: list[tuple[str, str]] = [
    ("покупател", "doc1"),
    ("продавец", "doc1"),
    ("продавц", "doc1"),
    ("товар", "doc1"),
    ("ст. 406", "doc1"),
    ("арендатор", "doc2"),
    ("арендодател", "doc2"),
    ("наниматель", "doc2"),
    ("наймодател", "doc2"),
    ("имуществ", "doc2"),
    ("работник", "doc3"),
    ("работодател", "doc3"),
    ("зарплат", "doc3"),
    ("заработн", "doc3"),
    ("отпуск", "doc3"),
    ("увольн", "doc3"),
]


def all_documents() -> list[KnowledgeDocument]:
    return [doc for category in CATEGORIES for doc in category.documents]


def get_document(document_id: str) -> Optional[KnowledgeDocument]:
    for doc in all_documents():
        if doc.id == document_id:
            return doc
    return None


def search(query: str) -> list[KnowledgeCategory]:
    """Categories whose documents match query in title, content or tags; empty categories dropped."""
    if not query:
        return list(CATEGORIES)
    needle = query.lower()
    result = []
    for category in CATEGORIES:
        docs = [
            doc for doc in category.documents
            if needle in doc.title.lower()
            or needle in doc.content.lower()
            or any(needle in tag.lower() for tag in doc.tags)
        ]
        if docs:
            result.append(KnowledgeCategory(id=category.id, title=category.title, documents=docs))
    return result


def find_references(text: str) -> list[Reference]:
    lowered = text.lower()
    for keyword, document_id in CONSULTATION_KEYWORDS:
        if keyword in lowered:
            doc = get_document(document_id)
            return [doc.as_reference()] if doc else []
    return []
