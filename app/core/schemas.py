from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import Any, Dict, List, Literal, Optional, Union


class EntityType(str, Enum):
    LE = "LE"  # legal entity
    IP = "IP"  # individual entrepreneur
    KFH = "KFH"  # head of farm enterprise


SoleEntityKind = Literal["IP", "KFH"]


# ===== SCHEMA DESCRIPTORS =====

class FieldDescriptor(BaseModel):
    label: str = Field(..., description="Sign text of the field row, wrapped lines joined by one space")
    key: str = Field(..., description="Output key the value is stored under")


class SectionDescriptor(BaseModel):
    label: str = Field(..., description="Section caption, wrapped lines joined by one space")
    key: Optional[str] = Field(default=None, description="Output key; None marks the terminal sentinel")
    fields: List[FieldDescriptor] = Field(default_factory=list)

    @property
    def is_sentinel(self) -> bool:
        return self.key is None


class RegistrySchema(BaseModel):
    """Ordered section descriptors of one extract variant, ending with the sentinel."""
    sections: List[SectionDescriptor]

    @model_validator(mode="after")
    def _ends_with_sentinel(self) -> "RegistrySchema":
        if not self.sections or not self.sections[-1].is_sentinel:
            raise ValueError("schema must end with a sentinel section (no key)")
        if self.sections[-1].fields:
            raise ValueError("sentinel section cannot declare fields")
        return self

    @property
    def sentinel(self) -> SectionDescriptor:
        return self.sections[-1]


class EntitySignatures(BaseModel):
    legal_entity: str  # line 0 of an LE extract
    sole_entity: str  # line 0 of an IP/KFH extract
    individual_entrepreneur: str  # line 1 of an IP extract
    farm_enterprise: str  # line 1 of a KFH extract


class NamePrefix(BaseModel):
    full: str
    short: str


class RegistryConfig(BaseModel):
    signatures: EntitySignatures
    header_marker: str = Field(..., description="Regex of the table header column (start bit)")
    footer_caption: str = Field(..., description="Page footer line dropped during normalization")
    page_counter: str = Field(..., description="Regex of the 'page X of Y' footer line")
    schemas: Dict[EntityType, RegistrySchema]
    se_prefixes: Dict[EntityType, NamePrefix]


# ===== PARSED RECORDS =====

class SectionRecord(BaseModel):
    """Values of one located section. Every declared field key is present; None means absent."""
    key: str
    values: Dict[str, Optional[str]] = Field(default_factory=dict)

    def present(self) -> Dict[str, str]:
        return {k: v for k, v in self.values.items() if v is not None}


class EntityName(BaseModel):
    full: str
    short: str


class EntityHead(BaseModel):
    surname: str
    name: str
    patronymic: Optional[str] = None
    sex: Optional[str] = None


class LegalEntityRecord(BaseModel):
    type: Literal["LE"] = "LE"
    sections: Dict[str, SectionRecord] = Field(default_factory=dict)

    def to_output(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {key: s.present() for key, s in self.sections.items()}
        out["type"] = self.type
        return out


class SoleEntityRecord(BaseModel):
    type: Literal["SE"] = "SE"
    kind: SoleEntityKind
    name: EntityName
    head: EntityHead
    sections: Dict[str, SectionRecord] = Field(default_factory=dict)

    def to_output(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {key: s.present() for key, s in self.sections.items()}
        out["type"] = self.type
        out["kind"] = self.kind
        out["name"] = self.name.model_dump()
        out["head"] = self.head.model_dump(exclude_none=True)
        return out


ParsedRecord = Union[LegalEntityRecord, SoleEntityRecord]
