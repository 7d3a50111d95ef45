"""
Registry extract configuration: entity signatures, section/field labels and name prefixes.

Labels are literal captions of the extract table as they read once wrapped
lines are joined with a single space. Section order matters: a section's
fields are looked up between its caption and the next located caption.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from app.core.config import get_settings
from app.core.schemas import (
    EntitySignatures,
    EntityType,
    FieldDescriptor,
    NamePrefix,
    RegistryConfig,
    RegistrySchema,
    SectionDescriptor,
)

logger = logging.getLogger(__name__)

# Section holding the personal data of an IP/KFH head; reshaped into 'head'/'name'
HEAD_SECTION_KEY = "common"

# ===== PAGE FURNITURE =====

HEADER_MARKER = r"№\s{1,2}п/п"
FOOTER_CAPTION = "Сведения с сайта ФНС России"
PAGE_COUNTER = r"Страница\s{1,2}\d{1,2}\s{1,2}из\s{1,2}"

SIGNATURES = EntitySignatures(
    legal_entity="ВЫПИСКА ИЗ ЕДИНОГО ГОСУДАРСТВЕННОГО РЕЕСТРА ЮРИДИЧЕСКИХ ЛИЦ",
    sole_entity="ВЫПИСКА ИЗ ЕДИНОГО ГОСУДАРСТВЕННОГО РЕЕСТРА ИНДИВИДУАЛЬНЫХ ПРЕДПРИНИМАТЕЛЕЙ",
    individual_entrepreneur="Сведения об индивидуальном предпринимателе",
    farm_enterprise="Сведения о главе крестьянского (фермерского) хозяйства",
)


def _section(label: str, key: Optional[str], *fields: Tuple[str, str]) -> SectionDescriptor:
    return SectionDescriptor(
        label=label,
        key=key,
        fields=[FieldDescriptor(label=f_label, key=f_key) for f_label, f_key in fields],
    )


# ===== SHARED SECTIONS =====

TAX_SECTION_SE = _section(
    "Сведения об учете в налоговом органе", "tax",
    ("ИНН", "inn"),
    ("Дата постановки на учет", "date"),
    ("Наименование налогового органа", "authority"),
)

ACTIVITY_SECTION = _section(
    "Сведения об основном виде деятельности", "activity",
    ("Код и наименование вида деятельности", "main"),
)

# ===== LEGAL ENTITY =====

LE_SCHEMA = RegistrySchema(sections=[
    _section(
        "Наименование", "name",
        ("Полное наименование на русском языке", "full"),
        ("Сокращенное наименование на русском языке", "short"),
    ),
    _section(
        "Место нахождения и адрес юридического лица", "address",
        ("Место нахождения юридического лица", "location"),
        ("Адрес юридического лица", "address"),
    ),
    _section(
        "Сведения о регистрации", "registration",
        ("Способ образования", "method"),
        ("ОГРН", "ogrn"),
        ("Дата регистрации", "date"),
    ),
    _section(
        "Сведения о регистрирующем органе по месту нахождения юридического лица", "registrar",
        ("Наименование регистрирующего органа", "name"),
        ("Адрес регистрирующего органа", "address"),
    ),
    _section(
        "Сведения о состоянии юридического лица", "status",
        ("Состояние", "state"),
    ),
    _section(
        "Сведения об учете в налоговом органе", "tax",
        ("ИНН юридического лица", "inn"),
        ("КПП юридического лица", "kpp"),
        ("Дата постановки на учет", "date"),
        ("Сведения о налоговом органе, в котором юридическое лицо состоит на учете", "authority"),
    ),
    _section(
        "Сведения о лице, имеющем право без доверенности действовать от имени юридического лица", "director",
        ("Фамилия", "surname"),
        ("Имя", "name"),
        ("Отчество", "patronymic"),
        ("ИНН", "inn"),
        ("Должность", "position"),
    ),
    _section(
        "Сведения об уставном капитале", "capital",
        ("Вид", "kind"),
        ("Размер (в рублях)", "amount"),
    ),
    ACTIVITY_SECTION,
    _section("Сведения о записях, внесенных в Единый государственный реестр юридических лиц", None),
])

# ===== SOLE ENTITIES =====

SE_SENTINEL = _section(
    "Сведения о записях, внесенных в Единый государственный реестр индивидуальных предпринимателей", None
)

HEAD_FIELDS: List[Tuple[str, str]] = [
    ("Фамилия", "surname"),
    ("Имя", "name"),
    ("Отчество", "patronymic"),
    ("Пол", "sex"),
]

REGISTRAR_FIELDS: List[Tuple[str, str]] = [
    ("Наименование регистрирующего органа", "name"),
    ("Адрес регистрирующего органа", "address"),
]

IP_SCHEMA = RegistrySchema(sections=[
    _section(
        "Фамилия, имя, отчество (при наличии) индивидуального предпринимателя", HEAD_SECTION_KEY,
        *HEAD_FIELDS,
    ),
    _section("Сведения о гражданстве", "citizenship", ("Гражданство", "citizenship")),
    _section(
        "Сведения о регистрации индивидуального предпринимателя", "registration",
        ("ОГРНИП", "ogrnip"),
        ("Дата присвоения ОГРНИП", "date"),
    ),
    _section(
        "Сведения о регистрирующем органе по месту жительства индивидуального предпринимателя", "registrar",
        *REGISTRAR_FIELDS,
    ),
    TAX_SECTION_SE,
    ACTIVITY_SECTION,
    SE_SENTINEL,
])

KFH_SCHEMA = RegistrySchema(sections=[
    _section(
        "Фамилия, имя, отчество (при наличии) главы крестьянского (фермерского) хозяйства", HEAD_SECTION_KEY,
        *HEAD_FIELDS,
    ),
    _section("Сведения о гражданстве", "citizenship", ("Гражданство", "citizenship")),
    _section(
        "Сведения о регистрации крестьянского (фермерского) хозяйства", "registration",
        ("ОГРНИП", "ogrnip"),
        ("Дата присвоения ОГРНИП", "date"),
    ),
    _section(
        "Сведения о регистрирующем органе по месту жительства главы крестьянского (фермерского) хозяйства",
        "registrar",
        *REGISTRAR_FIELDS,
    ),
    TAX_SECTION_SE,
    ACTIVITY_SECTION,
    SE_SENTINEL,
])

SE_PREFIXES = {
    EntityType.IP: NamePrefix(full="Индивидуальный предприниматель", short="ИП"),
    EntityType.KFH: NamePrefix(full="Глава крестьянского (фермерского) хозяйства", short="Глава КФХ"),
}

DEFAULT_REGISTRY_CONFIG = RegistryConfig(
    signatures=SIGNATURES,
    header_marker=HEADER_MARKER,
    footer_caption=FOOTER_CAPTION,
    page_counter=PAGE_COUNTER,
    schemas={
        EntityType.LE: LE_SCHEMA,
        EntityType.IP: IP_SCHEMA,
        EntityType.KFH: KFH_SCHEMA,
    },
    se_prefixes=SE_PREFIXES,
)


def load_registry_config(path: str) -> RegistryConfig:
    """Load a registry configuration from a JSON file shaped like RegistryConfig."""
    raw = Path(path).read_text(encoding="utf-8")
    return RegistryConfig.model_validate_json(raw)


@lru_cache(maxsize=1)
def get_registry_config() -> RegistryConfig:
    """
    Return the shared registry configuration.

    Loaded once; REGISTRY_SCHEMA_PATH replaces the bundled labels with a JSON file.
    The returned object is shared between parses and must not be mutated.
    """
    schema_path = get_settings().schema_path
    if schema_path:
        logger.info(f"Loading registry configuration from {schema_path}")
        return load_registry_config(schema_path)
    return DEFAULT_REGISTRY_CONFIG
