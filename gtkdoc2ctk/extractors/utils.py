"""Markup helpers shared by the section extractors."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from bs4 import Tag

DEPRECATION_MARKERS = (
    "is deprecated and should not be used",
    "has been deprecated since",
)

_TAG_LINE_PATTERN = re.compile(r"^\s*([^:]+?): (.+?)\s*$")


def collapse(text: str) -> str:
    """Collapse all runs of whitespace, including source line breaks, to single spaces."""
    return " ".join(text.split())


def text_of(block: Tag, selector: str) -> str:
    """Whitespace-collapsed text of the first match for ``selector``, or ``""``."""
    found = block.select_one(selector)
    return collapse(found.get_text()) if found is not None else ""


def child_paragraphs(block: Tag) -> List[str]:
    """Texts of the ``<p>`` elements that are direct children of ``block``."""
    return [collapse(p.get_text()) for p in block.find_all("p", recursive=False)]


def parse_tag_line(text: str) -> Optional[Tuple[str, str]]:
    """Split a ``Label: value`` line such as ``Flags: Read / Write``."""
    match = _TAG_LINE_PATTERN.match(text)
    if match is None:
        return None
    return match.group(1), match.group(2)


def parameter_rows(block: Tag) -> List[Tag]:
    return block.select("div.informaltable table tr")


@dataclass
class WarningNote:
    """Paragraphs of a ``div.warning`` block."""

    paragraphs: List[str] = field(default_factory=list)

    @property
    def present(self) -> bool:
        return bool(self.paragraphs)

    @property
    def deprecated(self) -> bool:
        joined = " ".join(self.paragraphs)
        return any(marker in joined for marker in DEPRECATION_MARKERS)

    def blocked(self, include_deprecated: bool) -> bool:
        """True when the owning entry must be dropped under the deprecation gate."""
        return self.deprecated and not include_deprecated

    def render(self, rewrite: Callable[[str], str] | None = None) -> str:
        lines = ["WARNING:"]
        for paragraph in self.paragraphs:
            lines.append("\t" + (rewrite(paragraph) if rewrite else paragraph))
        return "\n".join(lines)


def read_warning(block: Tag) -> WarningNote:
    paragraphs: List[str] = []
    for warning in block.select("div.warning"):
        paragraphs.extend(child_paragraphs(warning))
    return WarningNote(paragraphs=paragraphs)


def non_empty(items: Iterable[str]) -> List[str]:
    return [item for item in items if item]
