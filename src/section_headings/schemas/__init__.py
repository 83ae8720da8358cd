"""Shared schemas for section_headings."""

from section_headings.schemas.options import SectionHeadingsOptions, WrapperTemplate

__all__ = ["SectionHeadingsOptions", "WrapperTemplate"]
