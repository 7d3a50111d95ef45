"""
Text normalization for registry extracts.

Turns the raw character stream of an extract into the ordered lines the parser
walks: line breaks split, leading layout indentation removed, page furniture
(footer caption and 'page X of Y' counter) dropped.
"""

import re
from typing import Optional, Pattern, Tuple, Union

from app.core.registry_schema import FOOTER_CAPTION, PAGE_COUNTER


LINE_BREAK_RE = re.compile(r"\r?\n")


def _compile(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    return re.compile(pattern) if isinstance(pattern, str) else pattern


def is_page_furniture(line: str, footer_caption: str, page_counter: Pattern[str]) -> bool:
    """Check if a normalized line is repeated page footer text."""
    return line == footer_caption or page_counter.search(line) is not None


def normalize_lines(
    text: Optional[str],
    footer_caption: str = FOOTER_CAPTION,
    page_counter: Union[str, Pattern[str]] = PAGE_COUNTER,
) -> Tuple[str, ...]:
    """
    Split extracted text into cleaned lines.

    Examples:
        "  Наименование\\r\\n\\n  1  Полное  ООО" -> ("Наименование", "1  Полное  ООО")
        "Сведения с сайта ФНС России"           -> ()
        "Страница 1 из 3"                       -> ()

    Trailing whitespace is kept; the column gap between a field sign and its
    value is a run of two or more spaces and must survive normalization.
    """
    if not text:
        return ()

    counter_re = _compile(page_counter)
    out = []
    for raw in LINE_BREAK_RE.split(text):
        line = raw.lstrip()
        if not line:
            continue
        if is_page_furniture(line, footer_caption, counter_re):
            continue
        out.append(line)
    return tuple(out)
