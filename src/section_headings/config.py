"""Local configuration for section_headings."""

from __future__ import annotations

import os

DEFAULT_PARSER = "html.parser"
DEFAULT_MAX_HEADING_RANK = 6

SECTION_TAG = "section"
HEADING_TAGS = tuple(f"h{rank}" for rank in range(1, 7))

# BeautifulSoup parser used by sectionize_html; html.parser keeps fragments as fragments.
SECTION_HEADINGS_PARSER = os.getenv("SECTION_HEADINGS_PARSER", DEFAULT_PARSER)
SECTION_HEADINGS_MAX_HEADING_RANK = int(
    os.getenv("SECTION_HEADINGS_MAX_HEADING_RANK", str(DEFAULT_MAX_HEADING_RANK))
)
