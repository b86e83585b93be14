"""Capability-indexed lookup of gtk-doc sections within a parsed page."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from .normalize import FAMILY_PREFIXES


class SectionKind(Enum):
    """Documentation sections understood by the extractors, keyed by anchor suffix."""

    HIERARCHY = "object-hierarchy"
    INTERFACES = "implemented-interfaces"
    DESCRIPTION = "description"
    PROPERTIES = "property-details"
    SIGNALS = "signal-details"
    FUNCTIONS = "functions_details"


class SectionLocator:
    """Maps each :class:`SectionKind` to the ``div.refsect1`` block labelled for it.

    gtk-doc labels a section with a named anchor such as
    ``<a name="GtkButton.property-details">``; only the first anchor of a
    block is considered and the first block for a kind wins.
    """

    def __init__(self, document: BeautifulSoup, type_name: str) -> None:
        self.type_name = type_name
        self._sections: Dict[SectionKind, Tag] = {}
        anchors = self._anchor_index(type_name)
        for block in document.select("div.refsect1"):
            anchor = block.find("a", attrs={"name": True})
            if anchor is None:
                continue
            kind = anchors.get(str(anchor["name"]))
            if kind is not None and kind not in self._sections:
                self._sections[kind] = block

    @staticmethod
    def _anchor_index(type_name: str) -> Dict[str, SectionKind]:
        index: Dict[str, SectionKind] = {}
        for kind in SectionKind:
            for prefix in FAMILY_PREFIXES:
                index[f"{prefix}{type_name}.{kind.value}"] = kind
        return index

    def locate(self, kind: SectionKind) -> Optional[Tag]:
        return self._sections.get(kind)

    def kinds(self) -> List[SectionKind]:
        """Located kinds in document order."""
        return list(self._sections)


__all__ = ["SectionKind", "SectionLocator"]
