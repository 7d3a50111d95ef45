import logging
import re
from typing import Optional, Pattern, Sequence, Tuple, Union

from app.core.errors import ParseErrorKind, RegistryParseError
from app.core.label_matcher import find_label
from app.core.registry_schema import HEADER_MARKER
from app.core.schemas import RegistrySchema

logger = logging.getLogger(__name__)

# Lines after the header marker that belong to the table header (marker row, column numbers)
HEADER_LINES = 2


def find_header(lines: Sequence[str], header_marker: Union[str, Pattern[str]] = HEADER_MARKER) -> Optional[int]:
    """Index of the first line carrying the table header marker, or None."""
    marker_re = re.compile(header_marker) if isinstance(header_marker, str) else header_marker
    for i, line in enumerate(lines):
        if marker_re.search(line):
            return i
    return None


def trim_to_body(
    lines: Sequence[str],
    schema: RegistrySchema,
    header_marker: Union[str, Pattern[str]] = HEADER_MARKER,
) -> Tuple[str, ...]:
    """
    Cut the extract down to the table body the section extractor walks.

    Leading text up to and including the table header is dropped; everything
    from the sentinel caption on is dropped and replaced by the caption itself,
    as a single line, so the last section always has a closing boundary.
    """
    header = find_header(lines, header_marker)
    if header is None:
        raise RegistryParseError(ParseErrorKind.MISSING_START_BIT, "table header not found")

    body = tuple(lines[header + HEADER_LINES:])
    if not body:
        raise RegistryParseError(ParseErrorKind.MISSING_START_BIT, "nothing follows the table header")

    sentinel = schema.sentinel.label
    bounds = find_label(body, sentinel)
    if bounds is None:
        raise RegistryParseError(ParseErrorKind.MISSING_STOP_BIT, f"sentinel not found: {sentinel!r}")

    logger.debug(f"Body spans lines {header + HEADER_LINES}..{header + HEADER_LINES + bounds[0]}")
    return body[:bounds[0]] + (sentinel,)
