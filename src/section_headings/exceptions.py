"""Custom exceptions for section_headings."""


class SectionHeadingsError(Exception):
    """Base exception for section_headings operations."""


class ConfigurationError(SectionHeadingsError):
    """Invalid sectioning configuration."""


class DataAttributeTypeError(ConfigurationError, TypeError):
    """The section data attribute name is not a string."""


class DataAttributeGrammarError(ConfigurationError):
    """The section data attribute name is not a valid data-* attribute."""

    def __init__(self, value: str) -> None:
        super().__init__(f"sectionDataAttribute '{value}' is an invalid data-* attribute")
        self.value = value
