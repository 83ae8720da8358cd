"""Validation of data-* attribute names.

A data attribute name must follow the XML ``Name`` production, except that
colons and ASCII upper case letters (A-Z) are not allowed.

See:
    https://html.spec.whatwg.org/multipage/dom.html#embedding-custom-non-visible-data-with-the-data-*-attributes
    https://html.spec.whatwg.org/multipage/infrastructure.html#xml-compatible
    https://www.w3.org/TR/xml/#NT-Name
"""

from __future__ import annotations

import re
from typing import Any

from section_headings.exceptions import DataAttributeGrammarError, DataAttributeTypeError

_NAME_START_CHARS = (
    "_a-z"
    "\u00c0-\u00d6"
    "\u00d8-\u00f6"
    "\u00f8-\u02ff"
    "\u0370-\u037d"
    "\u037f-\u1fff"
    "\u200c-\u200d"
    "\u2070-\u218f"
    "\u2c00-\u2fef"
    "\u3001-\ud7ff"
    "\uf900-\ufdcf"
    "\ufdf0-\ufffd"
    "\U00010000-\U000effff"
)
_NAME_CHARS = _NAME_START_CHARS + "\\-.0-9\u00b7\u0300-\u036f\u203f-\u2040"

_DATA_ATTRIBUTE_RE = re.compile(f"data-[{_NAME_START_CHARS}][{_NAME_CHARS}]*")


def validate_data_attribute(data_attribute: Any) -> None:
    """Validate a data-* attribute name, raising if it is invalid.

    Args:
        data_attribute: Candidate attribute name, e.g. ``"data-heading-id"``.

    Raises:
        DataAttributeTypeError: If the value is not a string.
        DataAttributeGrammarError: If the string is not a valid data-* name.
    """
    if not isinstance(data_attribute, str):
        raise DataAttributeTypeError("sectionDataAttribute must be of type 'string'")

    if _DATA_ATTRIBUTE_RE.fullmatch(data_attribute) is None:
        raise DataAttributeGrammarError(data_attribute)


def is_valid_data_attribute(data_attribute: Any) -> bool:
    """Return True if the value is a usable data-* attribute name."""
    return isinstance(data_attribute, str) and _DATA_ATTRIBUTE_RE.fullmatch(data_attribute) is not None
