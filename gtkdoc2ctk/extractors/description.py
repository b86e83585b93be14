"""Long description extraction."""

from __future__ import annotations

from typing import List

from bs4 import Tag

from .base import SectionExtractor
from .utils import collapse
from ..locator import SectionKind
from ..models import SourceModel
from ..normalize import (
    FAMILY_PREFIXES,
    WRAP_WIDTH,
    comment_lines,
    is_blank,
    rewrite_family_names,
    word_wrap,
)


class DescriptionExtractor(SectionExtractor):
    """Turns the description paragraphs into a wrapped Go comment block."""

    kind = SectionKind.DESCRIPTION

    def extract(self, model: SourceModel, section: Tag) -> None:
        paragraphs: List[str] = []
        for paragraph in section.find_all("p"):
            text = collapse(paragraph.get_text())
            if not text:
                continue
            paragraphs.append(self._localise(model, text))

        prose = word_wrap("\n".join(paragraphs), WRAP_WIDTH)
        if is_blank(prose):
            self.logger.debug("Description for %s is empty", model.name)
            return
        model.description = rewrite_family_names(model.name, comment_lines(prose))

    @staticmethod
    def _localise(model: SourceModel, text: str) -> str:
        for prefixed in model.prefixed_names():
            text = text.replace(prefixed, model.name)
        replacement = "" if model.package_name == "ctk" else "ctk."
        for prefix in FAMILY_PREFIXES:
            text = text.replace(prefix, replacement)
        return text
