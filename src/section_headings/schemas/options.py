"""Sectioning configuration models."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from bs4.element import Tag
from pydantic import BaseModel, ConfigDict, Field, field_validator

from section_headings.config import HEADING_TAGS, SECTION_HEADINGS_MAX_HEADING_RANK
from section_headings.data_attribute import validate_data_attribute

logger = logging.getLogger(__name__)

AttributeValue = Union[str, list[str], bool]


class WrapperTemplate(BaseModel):
    """Element used to wrap a heading or the content that follows it.

    Attributes:
        tag_name: Tag name of the wrapper element, e.g. ``"div"``.
        properties: Attributes copied onto every wrapper built from this template.
            Boolean values are stored the HTML way: ``True`` becomes ``""`` and
            ``False`` drops the attribute.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tag_name: str = Field(..., alias="tagName", min_length=1)
    properties: dict[str, AttributeValue] = Field(default_factory=dict)

    @field_validator("properties")
    @classmethod
    def _normalize_boolean_attributes(cls, value: dict[str, AttributeValue]) -> dict[str, AttributeValue]:
        # HTML boolean attributes: present as "" when true, absent when false.
        return {
            name: "" if attribute is True else attribute
            for name, attribute in value.items()
            if attribute is not False
        }

    @classmethod
    def coerce(cls, value: Any) -> WrapperTemplate | None:
        """Build a template from a tag name, element mapping or bs4 Tag.

        ``None`` and the empty string mean "do not wrap" and return None.
        """
        if value is None or value == "":
            return None
        if isinstance(value, WrapperTemplate):
            return value
        if isinstance(value, str):
            return cls(tag_name=value)
        if isinstance(value, Tag):
            # Only the element itself is a template; its children are dropped.
            return cls(tag_name=value.name, properties=dict(value.attrs))
        if isinstance(value, Mapping):
            return cls.model_validate(value)
        raise ValueError(
            f"wrapper must be a tag name, an element mapping or a Tag, got {type(value).__name__}"
        )


class SectionHeadingsOptions(BaseModel):
    """Options for heading sectioning.

    Every option can be given by its snake_case name or by its camelCase
    alias (``sectionDataAttribute``, ``maxHeadingRank``, ``headerWrap``,
    ``contentWrap``).

    Attributes:
        section_data_attribute: data-* attribute set on each section to the id
            of its heading. Validated when the options are built.
        max_heading_rank: Highest heading rank that starts a section. Headings
            past it are treated as ordinary content.
        header_wrap: Per heading tag (``h1``..``h6``) wrapper for the heading.
        content_wrap: Wrapper for the content following each heading.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    section_data_attribute: str | None = Field(default=None, alias="sectionDataAttribute")
    max_heading_rank: int = Field(
        default=SECTION_HEADINGS_MAX_HEADING_RANK,
        alias="maxHeadingRank",
        ge=1,
        le=6,
        strict=True,
        validate_default=True,
    )
    header_wrap: dict[str, WrapperTemplate | None] = Field(default_factory=dict, alias="headerWrap")
    content_wrap: WrapperTemplate | None = Field(default=None, alias="contentWrap")

    @field_validator("section_data_attribute", mode="before")
    @classmethod
    def _validate_section_data_attribute(cls, value: Any) -> Any:
        # Configuration errors propagate as-is, before any tree is touched.
        if value is not None:
            validate_data_attribute(value)
        return value

    @field_validator("header_wrap", mode="before")
    @classmethod
    def _coerce_header_wrap(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError("headerWrap must be a mapping of heading tag to wrapper")

        wrappers: dict[str, WrapperTemplate | None] = {}
        for tag_name, wrapper in value.items():
            if tag_name not in HEADING_TAGS:
                logger.warning("Ignoring headerWrap entry for non-heading tag %r", tag_name)
                continue
            wrappers[tag_name] = WrapperTemplate.coerce(wrapper)
        return wrappers

    @field_validator("content_wrap", mode="before")
    @classmethod
    def _coerce_content_wrap(cls, value: Any) -> Any:
        return WrapperTemplate.coerce(value)

    def header_template(self, tag_name: str) -> WrapperTemplate | None:
        """Return the wrapper configured for a heading tag, if any."""
        return self.header_wrap.get(tag_name)
