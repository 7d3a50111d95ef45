import pytest

from app.core.entity_classifier import classify_entity, detect_entity_type
from app.core.errors import ParseErrorKind, RegistryParseError
from app.core.registry_schema import DEFAULT_REGISTRY_CONFIG, IP_SCHEMA, KFH_SCHEMA, LE_SCHEMA
from app.core.schemas import EntityType

LE_LINE = "ВЫПИСКА ИЗ ЕДИНОГО ГОСУДАРСТВЕННОГО РЕЕСТРА ЮРИДИЧЕСКИХ ЛИЦ"
SE_LINE = "ВЫПИСКА ИЗ ЕДИНОГО ГОСУДАРСТВЕННОГО РЕЕСТРА ИНДИВИДУАЛЬНЫХ ПРЕДПРИНИМАТЕЛЕЙ"


def test_legal_entity():
    schema, entity_type = classify_entity([LE_LINE, "anything"], DEFAULT_REGISTRY_CONFIG)
    assert entity_type == EntityType.LE
    assert schema == LE_SCHEMA


def test_legal_entity_needs_one_line():
    assert detect_entity_type([LE_LINE], DEFAULT_REGISTRY_CONFIG) == EntityType.LE


def test_individual_entrepreneur():
    lines = [SE_LINE, "Сведения об индивидуальном предпринимателе"]
    schema, entity_type = classify_entity(lines, DEFAULT_REGISTRY_CONFIG)
    assert entity_type == EntityType.IP
    assert schema == IP_SCHEMA


def test_farm_enterprise():
    lines = [SE_LINE, "Сведения о главе крестьянского (фермерского) хозяйства"]
    schema, entity_type = classify_entity(lines, DEFAULT_REGISTRY_CONFIG)
    assert entity_type == EntityType.KFH
    assert schema == KFH_SCHEMA


@pytest.mark.parametrize("lines", [
    [],
    ["ВЫПИСКА"],
    ["Some other document", "Сведения об индивидуальном предпринимателе"],
    [SE_LINE],
    [SE_LINE, "Сведения о юридическом лице"],
    ["Сведения об индивидуальном предпринимателе", SE_LINE],
])
def test_unknown_entity_type(lines):
    with pytest.raises(RegistryParseError) as exc_info:
        classify_entity(lines, DEFAULT_REGISTRY_CONFIG)
    assert exc_info.value.kind == ParseErrorKind.UNKNOWN_ENTITY_TYPE


def test_signature_must_match_whole_line(english_config):
    lines = ["EXTRACT FROM THE STATE REGISTER OF LEGAL ENTITIES (copy)"]
    with pytest.raises(RegistryParseError):
        detect_entity_type(lines, english_config)
