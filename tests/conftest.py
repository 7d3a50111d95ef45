from pathlib import Path

import pytest

from app.core.schemas import (
    EntitySignatures,
    EntityType,
    FieldDescriptor,
    NamePrefix,
    RegistryConfig,
    RegistrySchema,
    SectionDescriptor,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _section(label, key, *fields):
    return SectionDescriptor(
        label=label,
        key=key,
        fields=[FieldDescriptor(label=f_label, key=f_key) for f_label, f_key in fields],
    )


ENGLISH_LE_SCHEMA = RegistrySchema(sections=[
    _section("Name", "name", ("Full name", "full"), ("Short name of the legal entity", "short")),
    _section("Address", "address", ("Postal code", "postal_code"), ("Address of the legal entity", "address")),
    _section("Registration", "registration",
             ("Registration number", "number"), ("Date of state registration", "date")),
    _section("Records entered into the register", None),
])

ENGLISH_SE_SCHEMA = RegistrySchema(sections=[
    _section("Full name of the individual", "common",
             ("Surname", "surname"), ("Name", "name"), ("Patronymic", "patronymic"), ("Sex", "sex")),
    _section("Registration", "registration", ("Registration number", "number")),
    _section("Records entered into the register of sole proprietors", None),
])

ENGLISH_CONFIG = RegistryConfig(
    signatures=EntitySignatures(
        legal_entity="EXTRACT FROM THE STATE REGISTER OF LEGAL ENTITIES",
        sole_entity="EXTRACT FROM THE STATE REGISTER OF SOLE PROPRIETORS",
        individual_entrepreneur="Individual entrepreneur",
        farm_enterprise="Head of farm enterprise",
    ),
    header_marker=r"No\.\s{1,2}in order",
    footer_caption="Information from the tax service website",
    page_counter=r"Page\s{1,2}\d{1,2}\s{1,2}of\s{1,2}",
    schemas={
        EntityType.LE: ENGLISH_LE_SCHEMA,
        EntityType.IP: ENGLISH_SE_SCHEMA,
        EntityType.KFH: ENGLISH_SE_SCHEMA,
    },
    se_prefixes={
        EntityType.IP: NamePrefix(full="Individual Entrepreneur", short="IE"),
        EntityType.KFH: NamePrefix(full="Head of Farm Enterprise", short="HFE"),
    },
)

ENGLISH_LE_TEXT = """EXTRACT FROM THE STATE REGISTER OF LEGAL ENTITIES
                 ACME LLC
No. in order   Indicator                      Value
1              2                              3
                      Name
1  Full name                      ACME LIMITED LIABILITY COMPANY
2  Short name of the legal        ACME LLC
   entity
                      Address
3  Postal code                    101000
4  Address of the legal           Moscow, Tverskaya street,
   entity                         building 1
Information from the tax service website
                                               Page 1 of 2
                    Registration
5  Registration number            1027700000001
6  Date of state                  01.02.2010
   registration
         Records entered into the register
7  Record number                  1027700000001
Information from the tax service website
                                               Page 2 of 2
"""

ENGLISH_IP_TEXT = """EXTRACT FROM THE STATE REGISTER OF SOLE PROPRIETORS
Individual entrepreneur
No. in order   Indicator                      Value
1              2                              3
             Full name of the individual
1  Surname                        Ivanov
2  Name                           Ivan
3  Patronymic                     Ivanovich
4  Sex                            M
                    Registration
5  Registration number            304770000123456
   Records entered into the register of sole
                  proprietors
6  Record number                  304770000123456
"""


@pytest.fixture
def english_config() -> RegistryConfig:
    return ENGLISH_CONFIG


@pytest.fixture
def english_le_text() -> str:
    return ENGLISH_LE_TEXT


@pytest.fixture
def english_ip_text() -> str:
    return ENGLISH_IP_TEXT


@pytest.fixture
def read_fixture():
    def _read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _read
