"""
Multi-line label matching.

Extract captions wrap across physical lines with no markup to tell where a
caption starts or ends. A caption is located by accumulating consecutive lines
until their space-joined text equals the label exactly.

The scan is a two-state automaton:
- no candidate: a line opens a candidate only if the label starts with it
- candidate active: a line extends the candidate if it occurs anywhere in the
  label; any other line abandons the search (there is no restart)
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


def escape_label(text: str) -> str:
    """Escape a literal line so it can be used as a match pattern (. ( ) , - and the rest)."""
    return re.escape(text)


def starts_label(fragment: str, label: str) -> bool:
    """Check if the label starts with the fragment (anchored match)."""
    return re.match(escape_label(fragment), label) is not None


def occurs_in_label(fragment: str, label: str) -> bool:
    """Check if the fragment occurs anywhere in the label (unanchored match)."""
    return re.search(escape_label(fragment), label) is not None


@dataclass(frozen=True)
class LabelCandidate:
    """Lines accumulated so far for one label occurrence."""
    start: int
    text: str

    def extend(self, line: str) -> "LabelCandidate":
        return LabelCandidate(start=self.start, text=f"{self.text} {line}")


def step_label(
    candidate: Optional[LabelCandidate], index: int, line: str, label: str
) -> Tuple[Optional[LabelCandidate], bool]:
    """
    Advance the matcher by one line.

    Returns (candidate, abandoned). With no candidate, a line that is not a
    prefix of the label leaves the state unchanged.
    """
    if candidate is None:
        if starts_label(line, label):
            return LabelCandidate(start=index, text=line), False
        return None, False
    if occurs_in_label(line, label):
        return candidate.extend(line), False
    return None, True


def find_label(lines: Sequence[str], label: str, start: int = 0) -> Optional[Tuple[int, int]]:
    """
    Locate a (possibly wrapped) label in lines[start:].

    Returns absolute (first_line, last_line) indices of the lines that together
    equal the label, or None when the label is absent or a candidate was abandoned.
    """
    candidate: Optional[LabelCandidate] = None
    for i in range(start, len(lines)):
        candidate, abandoned = step_label(candidate, i, lines[i], label)
        if abandoned:
            logger.debug(f"Label abandoned at line {i}: {lines[i]!r} breaks {label!r}")
            return None
        if candidate is not None and candidate.text == label:
            return candidate.start, i
    return None
