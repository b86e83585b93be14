"""Property details extraction."""

from __future__ import annotations

import html
import re
from typing import List, Optional

from bs4 import Tag

from .base import SectionExtractor
from .utils import child_paragraphs, non_empty, parse_tag_line, read_warning, text_of
from ..locator import SectionKind
from ..models import Property, SourceModel
from ..normalize import (
    WRAP_WIDTH,
    camel_case,
    comment_lines,
    rewrite_family_names,
    strip_fancy_quotes,
    word_wrap,
)
from ..translator import translate

_NUMBER_PATTERN = re.compile(r"^\s*-?\d+\.?\d*\s*$")


def normalize_default(raw: Optional[str]) -> Optional[str]:
    """Reduce a documented default to a Go literal, or None when it has none.

    ``TRUE``/``FALSE`` become booleans, an empty (or ``""``) value becomes the
    empty string literal and anything that is not a plain number is dropped.
    """
    if raw is None:
        return None
    value = html.unescape(raw).strip()
    if value.startswith('"'):
        value = value.replace('"', "")
    if value == "FALSE":
        return "false"
    if value == "TRUE":
        return "true"
    if value == "":
        return '""'
    if _NUMBER_PATTERN.match(value):
        return value
    return None


class PropertiesExtractor(SectionExtractor):
    kind = SectionKind.PROPERTIES

    def extract(self, model: SourceModel, section: Tag) -> None:
        for block in section.select("div.refsect2"):
            prop = self._extract_property(model, block)
            if prop is not None:
                model.properties.append(prop)
        self.logger.debug("Extracted %d properties for %s", len(model.properties), model.name)

    def _extract_property(self, model: SourceModel, block: Tag) -> Optional[Property]:
        tag = strip_fancy_quotes(text_of(block, "h3 code.literal")).strip()
        if not tag:
            return None

        warning = read_warning(block)
        if warning.blocked(model.include_deprecated):
            self.logger.debug("Skipping deprecated property %s", tag)
            return None

        writable = False
        default: Optional[str] = None
        prose: List[str] = []
        tag_lines: List[str] = []
        for text in child_paragraphs(block):
            parsed = parse_tag_line(text)
            if parsed is None:
                prose.append(text)
                continue
            label, value = parsed
            if label == "Since":
                continue
            if label == "Flags" and "Write" in value:
                writable = True
            elif label == "Default value":
                default = value
            tag_lines.append(text)

        docs = "\n".join(non_empty([word_wrap("\n".join(prose), WRAP_WIDTH), "\n".join(tag_lines)]))
        if warning.present:
            docs = "\n\n".join(non_empty([docs, warning.render()]))
        docs = rewrite_family_names(model.name, docs)

        name = camel_case(tag)
        decl = f'const Property{name} cdk.Property = "{tag}"'
        if docs:
            decl = comment_lines(docs) + "\n" + decl

        return Property(
            name=name,
            tag=tag,
            type=translate(model.package_name, text_of(block, "pre.programlisting span.type")),
            writable=writable,
            default=normalize_default(default),
            docs=docs,
            decl=decl,
        )
