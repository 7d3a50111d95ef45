import logging
from typing import Sequence, Tuple

from app.core.errors import ParseErrorKind, RegistryParseError
from app.core.schemas import EntityType, RegistryConfig, RegistrySchema

logger = logging.getLogger(__name__)


def detect_entity_type(lines: Sequence[str], config: RegistryConfig) -> EntityType:
    """
    Detect the extract variant from its signature lines.

    Line 0 tells a legal entity from a sole entity; for a sole entity, line 1
    tells an individual entrepreneur from a farm enterprise head.
    """
    signatures = config.signatures
    first = lines[0] if lines else None

    if first == signatures.legal_entity:
        return EntityType.LE

    if first == signatures.sole_entity:
        second = lines[1] if len(lines) > 1 else None
        if second == signatures.individual_entrepreneur:
            return EntityType.IP
        if second == signatures.farm_enterprise:
            return EntityType.KFH
        raise RegistryParseError(
            ParseErrorKind.UNKNOWN_ENTITY_TYPE, f"unknown sole entity signature: {second!r}"
        )

    raise RegistryParseError(ParseErrorKind.UNKNOWN_ENTITY_TYPE, f"unknown signature: {first!r}")


def classify_entity(lines: Sequence[str], config: RegistryConfig) -> Tuple[RegistrySchema, EntityType]:
    """Select the schema that applies to the extract."""
    entity_type = detect_entity_type(lines, config)
    logger.debug(f"Entity type detected: {entity_type.value}")
    return config.schemas[entity_type], entity_type
