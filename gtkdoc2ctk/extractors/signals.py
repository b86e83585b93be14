"""Signal details extraction."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from bs4 import Tag

from .base import SectionExtractor
from .utils import child_paragraphs, collapse, non_empty, parameter_rows, parse_tag_line, read_warning, text_of
from ..locator import SectionKind
from ..models import NamedParameter, Signal, SourceModel
from ..normalize import WRAP_WIDTH, camel_case, rewrite_family_names, strip_fancy_quotes, word_wrap
from ..translator import translate_parameter

USER_DATA = "user_data"

_USER_FUNCTION_PATTERN = re.compile(r"void\s*user_function\s*\(\s*(.+?)\s*\)", re.DOTALL)
_ARGUMENT_PATTERN = re.compile(r"^\s*(\S+)\s+(\S+)\s*$")
_SKIPPED_TAGS = {"Flags", "Since"}


class SignalsExtractor(SectionExtractor):
    kind = SectionKind.SIGNALS

    def extract(self, model: SourceModel, section: Tag) -> None:
        for block in section.select("div.refsect2"):
            signal = self._extract_signal(model, block)
            if signal is not None:
                model.signals.append(signal)
        self.logger.debug("Extracted %d signals for %s", len(model.signals), model.name)

    def _extract_signal(self, model: SourceModel, block: Tag) -> Optional[Signal]:
        tag = strip_fancy_quotes(text_of(block, "h3 code.literal")).strip()
        if not tag:
            return None

        warning = read_warning(block)
        if warning.blocked(model.include_deprecated):
            self.logger.debug("Skipping deprecated signal %s", tag)
            return None

        signal = Signal(name=camel_case(tag), tag=tag)
        signal.params = self._listener_parameters(model, block, self._parameter_notes(block))

        prose: List[str] = []
        for text in child_paragraphs(block):
            parsed = parse_tag_line(text)
            if parsed is not None and parsed[0] in _SKIPPED_TAGS:
                continue
            if text:
                prose.append(text)

        def rewrite(text: str) -> str:
            return rewrite_family_names(model.name, text)

        signal.docs = "\n".join(
            non_empty(
                [
                    warning.render(rewrite) if warning.present else "",
                    rewrite(word_wrap("\n".join(prose), WRAP_WIDTH)) if prose else "",
                ]
            )
        )
        return signal

    @staticmethod
    def _parameter_notes(block: Tag) -> Dict[str, str]:
        notes: Dict[str, str] = {}
        for row in parameter_rows(block):
            name = text_of(row, "td.parameter_name p")
            if not name or name == USER_DATA:
                continue
            note = text_of(row, "td.parameter_description p")
            annotation = text_of(row, "td.parameter_annotation p")
            if annotation:
                note += f" ({annotation})"
            notes[name] = note
        return notes

    def _listener_parameters(
        self, model: SourceModel, block: Tag, notes: Dict[str, str]
    ) -> List[NamedParameter]:
        listing = block.select_one("pre.programlisting")
        if listing is None:
            return []
        match = _USER_FUNCTION_PATTERN.search(listing.get_text())
        if match is None:
            self.logger.debug("No listener signature in %s", listing.get_text()[:60])
            return []

        params: List[NamedParameter] = []
        own_types = model.prefixed_names()
        for argument in match.group(1).replace("\n", "").split(","):
            argument = collapse(argument)
            if argument.startswith("const "):
                argument = argument[len("const ") :]
            found = _ARGUMENT_PATTERN.match(argument)
            if found is None:
                continue
            type_token, raw_name = found.group(1), found.group(2).lstrip("*")
            if type_token in own_types or raw_name == USER_DATA:
                continue
            name, descriptor = translate_parameter(model.package_name, type_token, raw_name)
            params.append(NamedParameter(name=name, type=descriptor, note=notes.get(raw_name, "")))
        return params
