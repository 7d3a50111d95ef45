import logging
from typing import Dict, Optional, Sequence

from app.core.field_extractor import extract_field
from app.core.label_matcher import find_label
from app.core.schemas import RegistrySchema, SectionDescriptor, SectionRecord

logger = logging.getLogger(__name__)


def extract_section_fields(region: Sequence[str], section: SectionDescriptor) -> SectionRecord:
    """Resolve every declared field of a section against its line region."""
    values: Dict[str, Optional[str]] = {
        f.key: extract_field(region, f.label) for f in section.fields
    }
    return SectionRecord(key=section.key, values=values)


def extract_sections(lines: Sequence[str], schema: RegistrySchema) -> Dict[str, SectionRecord]:
    """
    Walk the schema over trimmed extract lines and collect field values per section.

    A section's fields are flushed only when the next caption is located, so the
    trimmed lines must end with the sentinel caption. A caption that cannot be
    located is skipped and the cursor stays put; the preceding section then
    extends up to whichever caption is found next.
    """
    sections: Dict[str, SectionRecord] = {}
    current: Optional[SectionDescriptor] = None
    cursor = 0

    for descriptor in schema.sections:
        bounds = find_label(lines, descriptor.label, start=cursor)
        if bounds is None:
            logger.debug(f"Section not found, skipping: {descriptor.label!r}")
            continue

        first, last = bounds
        if current is not None and current.key is not None:
            region = lines[cursor:first]
            sections[current.key] = extract_section_fields(region, current)

        cursor = last + 1
        current = descriptor
        if descriptor.key is not None:
            sections[descriptor.key] = SectionRecord(
                key=descriptor.key, values={f.key: None for f in descriptor.fields}
            )

    return sections
