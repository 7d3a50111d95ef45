"""
Record shaping for sole-entity extracts (individual entrepreneur, farm enterprise head).

The personal-data section is replaced by a 'head' block and a derived 'name'
block, e.g. for an individual entrepreneur:

    full:  "Индивидуальный предприниматель Иванов Иван Иванович"
    short: "ИП Иванов И.И."
"""

from typing import Dict, Mapping, Optional

from app.core.errors import ParseErrorKind, RegistryParseError
from app.core.registry_schema import HEAD_SECTION_KEY
from app.core.schemas import (
    EntityHead,
    EntityName,
    EntityType,
    NamePrefix,
    SectionRecord,
    SoleEntityRecord,
)


def _initial(word: Optional[str]) -> str:
    return f"{word[0]}." if word else ""


def build_entity_name(head: EntityHead, prefix: NamePrefix) -> EntityName:
    """Compose full and short names; a missing patronymic is left out of both."""
    full_parts = [prefix.full, head.surname, head.name, head.patronymic]
    full = " ".join(p for p in full_parts if p)
    short = f"{prefix.short} {head.surname} {_initial(head.name)}{_initial(head.patronymic)}"
    return EntityName(full=full, short=short)


def extract_head(sections: Mapping[str, SectionRecord]) -> EntityHead:
    common = sections.get(HEAD_SECTION_KEY)
    if common is None:
        raise RegistryParseError(ParseErrorKind.INCOMPLETE_HEAD, f"section '{HEAD_SECTION_KEY}' not found")

    values = common.present()
    missing = [k for k in ("surname", "name") if not values.get(k)]
    if missing:
        raise RegistryParseError(ParseErrorKind.INCOMPLETE_HEAD, f"missing {', '.join(missing)}")

    return EntityHead(
        surname=values["surname"],
        name=values["name"],
        patronymic=values.get("patronymic"),
        sex=values.get("sex"),
    )


def shape_sole_entity(
    sections: Mapping[str, SectionRecord],
    kind: EntityType,
    prefixes: Mapping[EntityType, NamePrefix],
) -> SoleEntityRecord:
    """Build the sole-entity record: head and name blocks in place of the personal-data section."""
    head = extract_head(sections)
    remaining: Dict[str, SectionRecord] = {k: v for k, v in sections.items() if k != HEAD_SECTION_KEY}
    return SoleEntityRecord(
        kind=kind.value,
        name=build_entity_name(head, prefixes[kind]),
        head=head,
        sections=remaining,
    )
