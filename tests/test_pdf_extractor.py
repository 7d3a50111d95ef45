"""
Tests for PDF text-layer extraction.

Layout extraction is exercised through a stand-in page object; a real extract
PDF is used when one is present under tests/fixtures.
"""

import os

import pytest

from app.core.pdf_extractor import _page_to_text, extract_pdf_text
from app.core.text_parser import parse_registry_text


FIXTURES_DIR = "tests/fixtures"


class FakePage:
    def __init__(self, text):
        self.text = text
        self.calls = []

    def extract_text(self, **kwargs):
        self.calls.append(kwargs)
        return self.text


def test_page_to_text_strips_layout_padding():
    page = FakePage("  1  ОГРН       1027700132195          \n        \n  Наименование   ")
    text = _page_to_text(page, x_density=4.0, y_density=13.0)

    assert text == "  1  ОГРН       1027700132195\n\n  Наименование"
    assert page.calls == [{"layout": True, "x_density": 4.0, "y_density": 13.0}]


def test_page_without_text_layer():
    assert _page_to_text(FakePage(None), x_density=4.0, y_density=13.0) == ""


def test_real_extract_pdf():
    pdf_path = os.path.join(FIXTURES_DIR, "le_extract.pdf")
    if not os.path.exists(pdf_path):
        pytest.skip(f"Test fixture not found: {pdf_path}")

    with open(pdf_path, "rb") as f:
        text = extract_pdf_text(f.read())

    assert text.strip()
    assert parse_registry_text(text).to_output()["type"] == "LE"
