"""Object hierarchy extraction."""

from __future__ import annotations

import html
import re

from bs4 import Tag

from .base import SectionExtractor
from ..locator import SectionKind
from ..models import SourceModel
from ..normalize import strip_family_prefix, strip_markup

_TREE_GLYPHS = re.compile(r"^[\s+\-|`│├└╰─]+")


class HierarchyExtractor(SectionExtractor):
    """Reads the ``pre.screen`` ancestry tree into ``model.hierarchy``."""

    kind = SectionKind.HIERARCHY

    ROOT_RENAMES = {"GObject": "Object", "GInterface": "CInterface"}
    RESET_SENTINEL = "GInitiallyUnowned"

    def extract(self, model: SourceModel, section: Tag) -> None:
        screen = section.select_one("pre.screen")
        if screen is None:
            self.logger.debug("No hierarchy block found for %s", model.name)
            return

        text = html.unescape(strip_markup(screen.decode_contents()))
        for raw in text.split("\n"):
            line = _TREE_GLYPHS.sub("", raw).strip()
            if not line:
                continue
            if line == self.RESET_SENTINEL:
                model.hierarchy = []
                continue
            line = self.ROOT_RENAMES.get(line) or strip_family_prefix(line)
            model.hierarchy.append(line)
            if line == model.name and not model.parent and len(model.hierarchy) > 1:
                model.parent = model.hierarchy[-2]

        self.logger.debug("Hierarchy for %s: %s", model.name, ", ".join(model.hierarchy))
