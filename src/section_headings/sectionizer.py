"""Wrap headings and the content that follows them in <section> elements."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from section_headings.config import SECTION_HEADINGS_PARSER, SECTION_TAG
from section_headings.html_utils import (
    element_id,
    find_document,
    heading_rank,
    new_element,
)
from section_headings.schemas import SectionHeadingsOptions

logger = logging.getLogger(__name__)


@dataclass
class _WalkStats:
    wrapped: int = 0
    relabelled: int = 0


class SectionHeadings:
    """Groups each heading with its following siblings inside a <section>.

    A span starts at a qualifying heading (rank <= ``max_heading_rank``) and
    runs up to the next qualifying heading among its siblings, or to the end
    of the sibling list. Headings whose parent already is a <section> are not
    wrapped again; the section only receives the configured data attribute.

    Configuration is validated when the instance is built, so an invalid
    configuration never touches a tree. Instances hold no per-tree state and
    can be reused.

    Example:
        >>> soup = BeautifulSoup("<h2 id='a'>A</h2><p>x</p>", "html.parser")
        >>> SectionHeadings(section_data_attribute="data-heading-id")(soup)
        <section data-heading-id="a"><h2 id="a">A</h2><p>x</p></section>
    """

    def __init__(self, options: SectionHeadingsOptions | None = None, **overrides: Any) -> None:
        if options is None:
            options = SectionHeadingsOptions(**overrides)
        elif overrides:
            # Only the overridden fields are validated; the rest already were.
            changed = SectionHeadingsOptions(**overrides)
            options = options.model_copy(
                update={name: getattr(changed, name) for name in changed.model_fields_set}
            )
        self.options = options

    def is_heading(self, node: PageElement) -> bool:
        """Return True if ``node`` is a heading that starts a section."""
        if not isinstance(node, Tag):
            return False
        rank = heading_rank(node.name)
        return rank is not None and rank <= self.options.max_heading_rank

    def __call__(self, tree: Tag) -> Tag:
        return self.transform(tree)

    def transform(self, tree: Tag) -> Tag:
        """Section every qualifying heading in ``tree``, in place.

        Args:
            tree: Root of the tree, usually a ``BeautifulSoup`` document.

        Returns:
            The same tree, mutated.
        """
        document = find_document(tree)
        stats = _WalkStats()

        # Containers whose children still have to be checked. Content moved
        # into a new section is pushed explicitly so nested headings are seen.
        pending: list[Tag] = [tree]
        while pending:
            parent = pending.pop()
            descend: list[Tag] = []
            index = 0
            while index < len(parent.contents):
                node = parent.contents[index]
                if isinstance(node, Tag):
                    descend.extend(self._visit(document, parent, index, node, stats))
                index += 1
            pending.extend(reversed(descend))

        logger.debug(
            "Sectioned %d heading(s), relabelled %d existing section(s)",
            stats.wrapped,
            stats.relabelled,
        )
        return tree

    def _visit(
        self,
        document: BeautifulSoup | None,
        parent: Tag,
        index: int,
        node: Tag,
        stats: _WalkStats,
    ) -> list[Tag]:
        """Process one element and return the elements whose children to walk next."""
        if not self.is_heading(node):
            return [node]

        if parent.name == SECTION_TAG:
            if self.options.section_data_attribute is not None:
                self._label_section(parent, node)
                stats.relabelled += 1
            return [node]

        end = self._span_end(parent, index)
        section = self._wrap_span(document, parent, index, end)
        stats.wrapped += 1
        logger.debug("Wrapped <%s> and %d following node(s) in <section>", node.name, end - index - 1)

        # The heading slot may be a header wrapper; walk the heading itself
        # plus every content node, never re-checking the slot elements.
        content = [child for child in section.contents[1:] if isinstance(child, Tag)]
        return [node, *content]

    def _span_end(self, parent: Tag, index: int) -> int:
        siblings = parent.contents
        end = index + 1
        while end < len(siblings) and not self.is_heading(siblings[end]):
            end += 1
        return end

    def _label_section(self, section: Tag, heading: Tag) -> None:
        attribute = self.options.section_data_attribute
        heading_id = element_id(heading)
        if heading_id is None:
            section.attrs.pop(attribute, None)
        else:
            section[attribute] = heading_id

    def _wrap_span(self, document: BeautifulSoup | None, parent: Tag, start: int, end: int) -> Tag:
        span = parent.contents[start:end]
        for child in span:
            child.extract()
        heading, content = span[0], span[1:]

        attrs: dict[str, str] = {}
        if self.options.section_data_attribute is not None:
            heading_id = element_id(heading)
            if heading_id is not None:
                attrs[self.options.section_data_attribute] = heading_id

        head_slot: PageElement = heading
        header_template = self.options.header_template(heading.name)
        if header_template is not None:
            head_slot = _build_wrapper(document, header_template.tag_name, header_template.properties, [heading])

        content_slots: list[PageElement] = content
        content_wrap = self.options.content_wrap
        if content_wrap is not None:
            content_slots = [_build_wrapper(document, content_wrap.tag_name, content_wrap.properties, content)]

        section = _build_wrapper(document, SECTION_TAG, attrs, [head_slot, *content_slots])
        parent.insert(start, section)
        return section


def _build_wrapper(
    document: BeautifulSoup | None,
    tag_name: str,
    attrs: Mapping[str, Any],
    children: list[PageElement],
) -> Tag:
    wrapper = new_element(document, tag_name, attrs)
    for child in children:
        wrapper.append(child)
    return wrapper


def sectionize(tree: Tag, options: SectionHeadingsOptions | None = None, **overrides: Any) -> Tag:
    """Wrap headings in ``tree`` with <section> elements and return the tree."""
    return SectionHeadings(options, **overrides).transform(tree)


def sectionize_html(
    html: str,
    options: SectionHeadingsOptions | None = None,
    *,
    parser: str | None = None,
    **overrides: Any,
) -> str:
    """Parse ``html``, section its headings and serialize it back.

    Args:
        html: Markup to transform. Fragments are fine with the default parser.
        options: Sectioning options; keyword overrides are merged on top.
        parser: BeautifulSoup parser name. Defaults to ``SECTION_HEADINGS_PARSER``.

    Returns:
        The transformed markup.

    Raises:
        ConfigurationError: If the options are invalid. Raised before parsing.
    """
    sectionizer = SectionHeadings(options, **overrides)
    soup = BeautifulSoup(html, parser or SECTION_HEADINGS_PARSER)
    sectionizer.transform(soup)
    return str(soup)
