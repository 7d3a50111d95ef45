from io import BytesIO
from typing import Any, List

import pdfplumber


def _page_to_text(page: Any, *, x_density: float, y_density: float) -> str:
    """
    Extract a page as layout-preserving text.

    Layout mode keeps the horizontal gaps between table columns as runs of
    spaces, which is how a field sign is told apart from its value. Lines are
    padded to the page width by pdfplumber; the padding is stripped.
    """
    text = page.extract_text(layout=True, x_density=x_density, y_density=y_density) or ""
    return "\n".join(ln.rstrip() for ln in text.splitlines())


def extract_pdf_text(pdf_bytes: bytes, *, x_density: float = 4.0, y_density: float = 13.0) -> str:
    """
    Deterministically extract the text layer of a registry extract PDF.

    Pages are concatenated in order; page footers are left in place and removed
    later by normalization. Returns an empty string for PDFs without a text layer.
    """
    pages: List[str] = []

    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            text = _page_to_text(page, x_density=x_density, y_density=y_density)
            if text.strip():
                pages.append(text)

    return "\n".join(pages)
