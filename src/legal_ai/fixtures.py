"""
Sample templates served when the template store is unreachable.
"""

from legal_ai.models.document import DocumentType
from legal_ai.models.template import FieldType, Template, TemplateField

PURCHASE_SALE_CONTENT = """ДОГОВОР КУПЛИ-ПРОДАЖИ

г. {{city}} {{date}}

{{seller_name}}, именуемый в дальнейшем «Продавец», с одной стороны, и {{buyer_name}}, именуемый в дальнейшем «Покупатель», с другой стороны, заключили настоящий Договор о нижеследующем:

1. ПРЕДМЕТ ДОГОВОРА

1.1. Продавец обязуется передать в собственность Покупателя, а Покупатель обязуется принять и оплатить следующее имущество: {{property_description}} (далее - "Имущество").

2. ЦЕНА И ПОРЯДОК РАСЧЕТОВ

2.1. Стоимость Имущества составляет {{price}} ({{price_in_words}}) тенге.
2.2. Оплата производится в следующем порядке: {{payment_terms}}.

3. ПЕРЕДАЧА ИМУЩЕСТВА

3.1. Имущество передается Продавцом Покупателю в течение {{delivery_period}} с момента подписания настоящего Договора.
3.2. Передача Имущества осуществляется по акту приема-передачи, подписываемому обеими сторонами.

4. ОТВЕТСТВЕННОСТЬ СТОРОН

4.1. За неисполнение или ненадлежащее исполнение обязательств по настоящему Договору стороны несут ответственность в соответствии с законодательством Республики Казахстан.

5. ЗАКЛЮЧИТЕЛЬНЫЕ ПОЛОЖЕНИЯ

5.1. Настоящий Договор вступает в силу с момента его подписания обеими сторонами и действует до полного исполнения сторонами своих обязательств.
5.2. Все изменения и дополнения к настоящему Договору действительны, если они совершены в письменной форме и подписаны обеими сторонами.
5.3. Настоящий Договор составлен в двух экземплярах, имеющих одинаковую юридическую силу, по одному для каждой из сторон.

6. РЕКВИЗИТЫ И ПОДПИСИ СТОРОН

Продавец:                               Покупатель:
{{seller_details}}                      {{buyer_details}}

____________ / {{seller_name}} /         ____________ / {{buyer_name}} /"""

LEASE_CONTENT = """ДОГОВОР АРЕНДЫ

г. {{city}} {{date}}

{{lessor_name}}, именуемый в дальнейшем «Арендодатель», с одной стороны, и {{lessee_name}}, именуемый в дальнейшем «Арендатор», с другой стороны, заключили настоящий Договор о нижеследующем:

1. ПРЕДМЕТ ДОГОВОРА

1.1. Арендодатель обязуется предоставить Арендатору во временное пользование следующее недвижимое имущество: {{property_description}} (далее - "Помещение").
1.2. Помещение будет использоваться для: {{purpose}}.

2. СРОК АРЕНДЫ

2.1. Настоящий Договор заключен сроком на {{rental_period}} с {{start_date}} по {{end_date}}.

3. АРЕНДНАЯ ПЛАТА И ПОРЯДОК РАСЧЕТОВ

3.1. Ежемесячная арендная плата составляет {{monthly_rent}} ({{monthly_rent_in_words}}) тенге.
3.2. Арендная плата вносится не позднее {{payment_day}} числа каждого месяца.
3.3. Способ оплаты: {{payment_method}}."""

TEMPLATES: list[Template] = [
    Template(
        id="1",
        name="Договор купли-продажи",
        description="Базовый шаблон договора купли-продажи имущества",
        content=PURCHASE_SALE_CONTENT,
        document_type=DocumentType.PURCHASE_SALE,
    ),
    Template(
        id="2",
        name="Договор аренды помещения",
        description="Базовый шаблон договора аренды недвижимого имущества",
        content=LEASE_CONTENT,
        document_type=DocumentType.LEASE,
    ),
]

# (id, field_name, display_name, field_type)
_PURCHASE_SALE_FIELDS = [
    ("1", "city", "Город", FieldType.TEXT),
    ("2", "date", "Дата договора", FieldType.DATE),
    ("3", "seller_name", "ФИО продавца", FieldType.TEXT),
    ("4", "buyer_name", "ФИО покупателя", FieldType.TEXT),
    ("5", "property_description", "Описание имущества", FieldType.TEXTAREA),
    ("6", "price", "Стоимость (цифрами)", FieldType.NUMBER),
    ("7", "price_in_words", "Стоимость (прописью)", FieldType.TEXT),
    ("8", "payment_terms", "Условия оплаты", FieldType.TEXTAREA),
    ("9", "delivery_period", "Срок передачи имущества", FieldType.TEXT),
    ("10", "seller_details", "Реквизиты продавца", FieldType.TEXTAREA),
    ("11", "buyer_details", "Реквизиты покупателя", FieldType.TEXTAREA),
]

_LEASE_FIELDS = [
    ("12", "city", "Город", FieldType.TEXT),
    ("13", "date", "Дата договора", FieldType.DATE),
    ("14", "lessor_name", "ФИО арендодателя", FieldType.TEXT),
    ("15", "lessee_name", "ФИО арендатора", FieldType.TEXT),
    ("16", "property_description", "Описание помещения", FieldType.TEXTAREA),
]


def _fields(template_id: str, rows: list[tuple[str, str, str, FieldType]]) -> list[TemplateField]:
    return [
        TemplateField(id=field_id, template_id=template_id, field_name=name, display_name=label,
                      field_type=field_type, required=True, order=position)
        for position, (field_id, name, label, field_type) in enumerate(rows, start=1)
    ]


TEMPLATE_FIELDS: dict[str, list[TemplateField]] = {
    "1": _fields("1", _PURCHASE_SALE_FIELDS),
    "2": _fields("2", _LEASE_FIELDS),
}
