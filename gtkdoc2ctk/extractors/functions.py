"""Function details extraction."""

from __future__ import annotations

from typing import List, Optional

from bs4 import Tag

from .base import SectionExtractor
from .utils import child_paragraphs, collapse, non_empty, parameter_rows, parse_tag_line, read_warning, text_of
from ..locator import SectionKind
from ..models import Function, NamedParameter, SourceModel
from ..normalize import (
    FUNCTION_PREFIXES,
    WRAP_WIDTH,
    camel_case,
    comment_lines,
    is_blank,
    lower_camel,
    rewrite_family_names,
    word_wrap,
)
from ..translator import VARIADIC_TOKEN, concrete_type, translate, translate_parameter

RETURNS_WRAP_WIDTH = 65
CONSTRUCTOR_NAME = "New"


class FunctionsExtractor(SectionExtractor):
    """Collects constructors, factories and plain functions with their documentation."""

    kind = SectionKind.FUNCTIONS

    def extract(self, model: SourceModel, section: Tag) -> None:
        for block in section.select("div.refsect2"):
            function = self._extract_function(model, block)
            if function is None:
                continue
            self._classify(model, function)
        self.logger.debug(
            "Extracted %d functions and %d factories for %s (constructor: %s)",
            len(model.functions),
            len(model.factories),
            model.name,
            "yes" if model.constructor else "no",
        )

    def _extract_function(self, model: SourceModel, block: Tag) -> Optional[Function]:
        name = self.function_name(model, text_of(block, "h3"))
        if not name:
            return None

        warning = read_warning(block)
        if warning.blocked(model.include_deprecated):
            self.logger.debug("Skipping deprecated function %s", name)
            return None

        prose: List[str] = [warning.render()] if warning.present else []
        tag_lines: List[str] = []
        for text in child_paragraphs(block):
            parsed = parse_tag_line(text)
            if parsed is None:
                prose.append(text)
            elif parsed[0] != "Since":
                tag_lines.append(text)

        param_lines: List[str] = []
        return_lines: List[str] = []
        for subsection in block.select("div.refsect3"):
            heading = text_of(subsection, "h4")
            if heading == "Parameters":
                param_lines.extend(self._parameter_docs(model, subsection))
            elif heading == "Returns":
                for text in child_paragraphs(subsection):
                    wrapped = word_wrap(text, RETURNS_WRAP_WIDTH)
                    return_lines.extend("\t" + line for line in wrapped.split("\n") if line)

        docs = "\n".join(
            non_empty(
                [
                    word_wrap("\n".join(prose), WRAP_WIDTH) if prose else "",
                    "\n".join(tag_lines),
                    "\n".join(["Parameters:", *param_lines]) if param_lines else "",
                    "\n".join(["Returns:", *return_lines]) if return_lines else "",
                ]
            )
        )

        return Function(
            name=name,
            docs="" if is_blank(docs) else rewrite_family_names(model.name, comment_lines(docs)),
            params=self._signature_parameters(model, block),
            returns=translate(model.package_name, self._return_token(block)),
        )

    @staticmethod
    def function_name(model: SourceModel, heading: str) -> str:
        """``gtk_button_set_label ()`` on the Button page -> ``SetLabel``."""
        symbol = heading.replace("()", "").strip()
        for prefix in FUNCTION_PREFIXES:
            if symbol.startswith(prefix):
                symbol = symbol[len(prefix) :]
                break
        if symbol == model.flat:
            return ""
        if symbol.startswith(model.flat + "_"):
            symbol = symbol[len(model.flat) + 1 :]
        return camel_case(symbol)

    @staticmethod
    def _return_token(block: Tag) -> str:
        """``const gchar *`` is spread over several spans; keep the type words."""
        spans = block.select(":scope > pre.programlisting span.returnvalue")
        words = [collapse(span.get_text()) for span in spans]
        return " ".join(word for word in words if word and word != "const")

    @staticmethod
    def _parameter_docs(model: SourceModel, subsection: Tag) -> List[str]:
        own_types = model.prefixed_names()
        lines: List[str] = []
        for row in parameter_rows(subsection):
            name = lower_camel(text_of(row, "td.parameter_name > p"))
            if not name:
                continue
            described_type = text_of(row, "td.parameter_description span.type")
            if described_type in own_types:
                continue
            lines.append(f"\t{name}\t{text_of(row, 'td.parameter_description > p')}")
        return lines

    def _signature_parameters(self, model: SourceModel, block: Tag) -> List[NamedParameter]:
        own_types = model.prefixed_names()
        params: List[NamedParameter] = []
        codes = block.select(":scope > pre.programlisting > em.parameter > code")
        for index, code in enumerate(codes):
            text = collapse(code.get_text())
            if text == "void" or (index == 0 and text.startswith(own_types)):
                continue
            if text == "...":
                text = f"{VARIADIC_TOKEN} argv"
            if text.startswith("const "):
                text = text[len("const ") :]
            parts = text.split()
            if len(parts) != 2:
                self.logger.error(
                    "Unexpected argument signature %r in %s, parts=%s", code.get_text(), model.name, parts
                )
                continue
            name, descriptor = translate_parameter(model.package_name, parts[0], parts[1])
            params.append(NamedParameter(name=name, type=descriptor))
        return params

    @staticmethod
    def _classify(model: SourceModel, function: Function) -> None:
        if function.name == CONSTRUCTOR_NAME:
            function.name = f"New{model.name}"
            function.returns = concrete_type(model.name)
            model.constructor = function
        elif function.name.startswith(CONSTRUCTOR_NAME):
            function.name = f"New{model.name}{function.name[len(CONSTRUCTOR_NAME):]}"
            function.returns = concrete_type(model.name)
            model.factories.append(function)
        else:
            model.functions.append(function)
