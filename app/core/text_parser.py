import logging
from typing import Optional

from app.core.bounds import trim_to_body
from app.core.entity_classifier import classify_entity
from app.core.record_shaper import shape_sole_entity
from app.core.registry_schema import get_registry_config
from app.core.schemas import EntityType, LegalEntityRecord, ParsedRecord, RegistryConfig
from app.core.section_extractor import extract_sections
from app.core.text_normalization import normalize_lines

logger = logging.getLogger(__name__)


def parse_registry_text(text: str, config: Optional[RegistryConfig] = None) -> ParsedRecord:
    """
    Parse the plain-text rendering of a registry extract into a structured record.

    Raises RegistryParseError (UNKNOWN_ENTITY_TYPE, MISSING_START_BIT,
    MISSING_STOP_BIT, INCOMPLETE_HEAD); never returns a partial record.
    Each call works on its own line tuple, so calls are independent.
    """
    if config is None:
        config = get_registry_config()

    lines = normalize_lines(text, footer_caption=config.footer_caption, page_counter=config.page_counter)
    logger.debug(f"Normalized {len(lines)} lines")

    schema, entity_type = classify_entity(lines, config)
    body = trim_to_body(lines, schema, header_marker=config.header_marker)
    sections = extract_sections(body, schema)
    logger.debug(f"Located sections: {list(sections)}")

    if entity_type == EntityType.LE:
        record: ParsedRecord = LegalEntityRecord(sections=sections)
    else:
        record = shape_sole_entity(sections, entity_type, config.se_prefixes)

    logger.info(f"Parsed {entity_type.value} extract: {len(sections)} sections")
    return record
