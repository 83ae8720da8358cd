"""Test setup for section_headings."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bs4 import BeautifulSoup  # noqa: E402


@pytest.fixture
def parse_fragment() -> Callable[[str], BeautifulSoup]:
    """Parse an HTML fragment the way sectionize_html does by default."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse
