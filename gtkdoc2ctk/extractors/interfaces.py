"""Implemented interfaces extraction."""

from __future__ import annotations

from bs4 import Tag

from .base import SectionExtractor
from .utils import collapse
from ..locator import SectionKind
from ..models import SourceModel
from ..normalize import strip_family_prefix


class InterfacesExtractor(SectionExtractor):
    kind = SectionKind.INTERFACES

    def extract(self, model: SourceModel, section: Tag) -> None:
        for link in section.select("p > a.link"):
            value = strip_family_prefix(collapse(link.get_text()))
            if value and value not in model.implements:
                model.implements.append(value)
