"""
Field extraction within one section of a registry extract.

A field row starts with a 1-2 digit ordinal, then the sign (field caption),
then a gap of two or more spaces, then the value:

    3  Дата регистрации  01.02.2010

Long signs and values wrap onto following lines that carry no ordinal. While
the sign is still incomplete, such a line holds a sign piece and, after a
column gap, a value piece; once the sign matches the target label, every
further line up to the next row belongs to the value.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from app.core.label_matcher import starts_label

logger = logging.getLogger(__name__)

FIELD_ROW_RE = re.compile(r"^\d{1,2}\s+(\S.*?)\s{2,}(.*)$")
COLUMN_GAP_RE = re.compile(r"\s{2,}")


@dataclass(frozen=True)
class FieldCandidate:
    sign: str
    value_parts: Tuple[str, ...] = field(default_factory=tuple)
    consistent: bool = False

    @property
    def value(self) -> str:
        return " ".join(p for p in self.value_parts if p)

    def checked(self, label: str) -> "FieldCandidate":
        """Mark the candidate consistent once its sign equals the label. Never revoked."""
        if self.consistent or self.sign != label:
            return self
        return FieldCandidate(self.sign, self.value_parts, True)

    def with_value(self, piece: str) -> "FieldCandidate":
        return FieldCandidate(self.sign, self.value_parts + (piece,), self.consistent)

    def with_sign(self, piece: str) -> "FieldCandidate":
        return FieldCandidate(f"{self.sign} {piece}", self.value_parts, self.consistent)


def match_field_row(line: str) -> Optional[Tuple[str, str]]:
    """Return (sign, value) if the line is an ordinal-prefixed field row."""
    m = FIELD_ROW_RE.match(line)
    if not m:
        return None
    return m.group(1), m.group(2).strip()


def split_columns(line: str) -> Tuple[str, ...]:
    """Split a wrapped row line on column gaps, dropping blank pieces."""
    return tuple(p.strip() for p in COLUMN_GAP_RE.split(line) if p.strip())


def _continue(candidate: FieldCandidate, line: str) -> FieldCandidate:
    if candidate.consistent:
        return candidate.with_value(line.strip())
    pieces = split_columns(line)
    if not pieces:
        return candidate
    candidate = candidate.with_sign(pieces[0])
    if len(pieces) > 1:
        candidate = candidate.with_value(pieces[1])
    return candidate


def extract_field(region: Sequence[str], label: str) -> Optional[str]:
    """
    Extract the value of the field whose sign equals the label.

    The first row whose sign is a prefix of the label opens the candidate; the
    next row closes it. Returns None unless the accumulated sign matched the
    label exactly, even when value text was collected.
    """
    candidate: Optional[FieldCandidate] = None

    for line in region:
        row = match_field_row(line)
        if candidate is None:
            if row is None or not starts_label(row[0], label):
                continue
            sign, value = row
            candidate = FieldCandidate(sign=sign, value_parts=(value,))
        elif row is not None:
            break
        else:
            candidate = _continue(candidate, line)
        candidate = candidate.checked(label)

    if candidate is None:
        return None
    if not candidate.consistent:
        logger.debug(f"Field sign incomplete: {candidate.sign!r} != {label!r}")
        return None
    return candidate.value
