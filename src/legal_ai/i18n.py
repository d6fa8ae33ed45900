"""
Translation tables for the Russian and Kazakh interfaces.
"""

from typing import Optional

from legal_ai.models.document import DocumentType

DEFAULT_LOCALE = "ru"
LOCALES = ("ru", "kk")

TRANSLATIONS: dict[str, dict[str, str]] = {
    "ru": {
        "appName": "Legal AI",
        "welcomeMessage": (
            "Здравствуйте! Я ИИ-ассистент, который поможет вам составить юридический документ. "
            "Расскажите, какой документ вам нужен?"
        ),
        "consultationWelcomeMessage": (
            "Здравствуйте! Я ИИ-консультант по законодательству Республики Казахстан. "
            "Задайте ваш юридический вопрос."
        ),
        "errorMessage": "Извините, произошла ошибка. Пожалуйста, попробуйте еще раз.",
        "documentNotReady": "Документ еще не готов. Пожалуйста, продолжите диалог с ассистентом.",
        "documentGenerationError": "Не удалось сформировать документ. Пожалуйста, попробуйте позже.",
        "templateDocumentGenerated": "Документ по шаблону успешно сформирован. Вы можете скачать его.",
        "templateGenerationError": "Не удалось сформировать документ по шаблону.",
        "templateNotFound": "Шаблон не найден.",
        "fieldRequired": "Это поле обязательно для заполнения",
        "signInRequired": "Чтобы сформировать документ, войдите в систему.",
        "subscriptionRequired": "Для формирования документа необходима активная подписка.",
        "invalidEmail": "Пожалуйста, введите корректный адрес электронной почты",
        "unknownPlan": "Неизвестный тариф",
        "notLoggedIn": "Вы не вошли в систему",
        "noActiveSubscription": "Нет активной подписки",
        "mockConnectionError": (
            "Извините, я не смог подключиться к серверу. "
            "Пожалуйста, проверьте подключение к интернету и попробуйте еще раз."
        ),
        "mockDocumentReady": (
            "Отлично! У меня есть вся необходимая информация для составления документа "
            "\"{{documentType}}\". Вы можете сформировать его."
        ),
        "mockDocumentTypeKnown": (
            "Я понимаю, что вам нужен документ типа \"{{documentType}}\". "
            "Расскажите, пожалуйста, подробнее о ваших требованиях к этому документу."
        ),
        "mockGreeting": (
            "Здравствуйте! Я ИИ-ассистент, который поможет вам составить юридический документ. "
            "Какой тип документа вам нужен?"
        ),
        "mockAskDocumentType": (
            "Пожалуйста, уточните, какой тип юридического документа вам нужен? "
            "Например, договор купли-продажи, аренды, оказания услуг и т.д."
        ),
        "mockConsultationReference": (
            "По вашему вопросу может быть полезна следующая справка: \"{{title}}\". "
            "Для точной оценки ситуации опишите обстоятельства подробнее."
        ),
        "mockConsultation": (
            "Спасибо за вопрос. Опишите, пожалуйста, ситуацию подробнее, "
            "чтобы я мог указать применимые нормы законодательства Республики Казахстан."
        ),
        "documentType.purchase_sale": "Договор купли-продажи",
        "documentType.lease": "Договор аренды",
        "documentType.services": "Договор оказания услуг",
        "documentType.contract_work": "Договор подряда",
        "documentType.employment": "Трудовой договор",
    },
    "kk": {
        "appName": "Legal AI",
        "welcomeMessage": (
            "Сәлеметсіз бе! Мен заңды құжат жасауға көмектесетін ЖИ-көмекшімін. "
            "Сізге қандай құжат қажет?"
        ),
        "consultationWelcomeMessage": (
            "Сәлеметсіз бе! Мен Қазақстан Республикасының заңнамасы бойынша ЖИ-кеңесшімін. "
            "Заңгерлік сұрағыңызды қойыңыз."
        ),
        "errorMessage": "Кешіріңіз, қате орын алды. Қайталап көріңіз.",
        "documentNotReady": "Құжат әлі дайын емес. Көмекшімен сұхбатты жалғастырыңыз.",
        "documentGenerationError": "Құжатты жасау мүмкін болмады. Кейінірек қайталап көріңіз.",
        "templateDocumentGenerated": "Үлгі бойынша құжат сәтті жасалды. Оны жүктеп алуға болады.",
        "templateGenerationError": "Үлгі бойынша құжатты жасау мүмкін болмады.",
        "templateNotFound": "Үлгі табылмады.",
        "fieldRequired": "Бұл өрісті толтыру міндетті",
        "signInRequired": "Құжатты жасау үшін жүйеге кіріңіз.",
        "subscriptionRequired": "Құжатты жасау үшін белсенді жазылым қажет.",
        "invalidEmail": "Дұрыс электрондық пошта мекенжайын енгізіңіз",
        "unknownPlan": "Белгісіз тариф",
        "notLoggedIn": "Сіз жүйеге кірмегенсіз",
        "noActiveSubscription": "Белсенді жазылым жоқ",
        "mockDocumentReady": (
            "Тамаша! \"{{documentType}}\" құжатын жасау үшін барлық қажетті ақпарат бар. "
            "Оны жасай аласыз."
        ),
        "mockDocumentTypeKnown": (
            "Сізге \"{{documentType}}\" құжаты қажет екенін түсіндім. "
            "Осы құжатқа қойылатын талаптарыңыз туралы толығырақ айтып беріңіз."
        ),
        "documentType.purchase_sale": "Сатып алу-сату шарты",
        "documentType.lease": "Жалдау шарты",
        "documentType.services": "Қызмет көрсету шарты",
        "documentType.contract_work": "Мердігерлік шарт",
        "documentType.employment": "Еңбек шарты",
    },
}


def normalize_locale(locale: Optional[str]) -> str:
    return locale if locale in TRANSLATIONS else DEFAULT_LOCALE


def translate(locale: Optional[str], key: str, params: Optional[dict[str, str]] = None) -> str:
    """Look up key for locale, falling back to Russian and then to the key itself."""
    text = TRANSLATIONS[normalize_locale(locale)].get(key) or TRANSLATIONS[DEFAULT_LOCALE].get(key) or key
    for name, value in (params or {}).items():
        text = text.replace(f"{{{{{name}}}}}", value)
    return text


def document_type_name(locale: Optional[str], document_type: DocumentType) -> str:
    return translate(locale, f"documentType.{document_type.value}")
