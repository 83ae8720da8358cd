"""section_headings: wrap HTML headings and their content in <section> elements."""

from section_headings.data_attribute import is_valid_data_attribute, validate_data_attribute
from section_headings.exceptions import (
    ConfigurationError,
    DataAttributeGrammarError,
    DataAttributeTypeError,
    SectionHeadingsError,
)
from section_headings.html_utils import heading_rank
from section_headings.schemas import SectionHeadingsOptions, WrapperTemplate
from section_headings.sectionizer import SectionHeadings, sectionize, sectionize_html

__all__ = [
    "ConfigurationError",
    "DataAttributeGrammarError",
    "DataAttributeTypeError",
    "SectionHeadings",
    "SectionHeadingsError",
    "SectionHeadingsOptions",
    "WrapperTemplate",
    "heading_rank",
    "is_valid_data_attribute",
    "sectionize",
    "sectionize_html",
    "validate_data_attribute",
]
