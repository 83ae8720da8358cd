"""Tests for data-* attribute name validation."""

from __future__ import annotations

import pytest

from section_headings.data_attribute import is_valid_data_attribute, validate_data_attribute
from section_headings.exceptions import (
    ConfigurationError,
    DataAttributeGrammarError,
    DataAttributeTypeError,
)


class TestValidateDataAttribute:
    """Tests for validate_data_attribute function."""

    @pytest.mark.parametrize(
        "name",
        [
            "data-heading-id",
            "data-x",
            "data-_private",
            "data-a1",
            "data-a.b",
            "data-a·b",
            "data-été",
            "data-日本",
        ],
    )
    def test_accepts_valid_names(self, name: str) -> None:
        """Valid data-* names pass without raising."""
        assert validate_data_attribute(name) is None

    def test_rejects_non_string(self) -> None:
        """Non-string values fail with a TypeError."""
        with pytest.raises(TypeError, match=r"^sectionDataAttribute must be of type 'string'$"):
            validate_data_attribute(1)

    def test_type_error_is_configuration_error(self) -> None:
        """The type error belongs to the configuration error family."""
        with pytest.raises(ConfigurationError):
            validate_data_attribute(["data-a"])

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "data",
            "data-",
            "data-ab;c",
            "data-ABC",
            "data-aBc",
            "data-a:b",
            "data-1abc",
            "data--abc",
            "aria-label",
            "DATA-abc",
            "data-abc\n",
            "data-a b",
        ],
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        """Names outside the data-* grammar raise a grammar error."""
        with pytest.raises(DataAttributeGrammarError):
            validate_data_attribute(name)

    def test_grammar_error_carries_value(self) -> None:
        """The grammar error keeps the offending value and names it in the message."""
        with pytest.raises(DataAttributeGrammarError) as exc_info:
            validate_data_attribute("data-ABC")

        assert exc_info.value.value == "data-ABC"
        assert str(exc_info.value) == "sectionDataAttribute 'data-ABC' is an invalid data-* attribute"

    def test_empty_string_message(self) -> None:
        """Empty string is reported verbatim."""
        with pytest.raises(DataAttributeGrammarError, match="sectionDataAttribute '' is an invalid"):
            validate_data_attribute("")

    def test_grammar_error_is_not_type_error(self) -> None:
        """Grammar and type failures are distinguishable."""
        with pytest.raises(DataAttributeGrammarError) as exc_info:
            validate_data_attribute("data")

        assert not isinstance(exc_info.value, DataAttributeTypeError)
        assert isinstance(exc_info.value, ConfigurationError)


class TestIsValidDataAttribute:
    """Tests for is_valid_data_attribute function."""

    def test_valid(self) -> None:
        assert is_valid_data_attribute("data-heading-id")

    def test_invalid(self) -> None:
        assert not is_valid_data_attribute("data-ABC")
        assert not is_valid_data_attribute(None)
