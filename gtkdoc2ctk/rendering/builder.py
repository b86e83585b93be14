"""Assembles generated Go source as an ordered sequence of declarations."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..errors import RenderError
from ..logging import get_logger
from ..models import SourceModel
from ..normalize import camel_case, lower_camel, snake_case


@dataclass(frozen=True)
class Declaration:
    """One top-level block of the output and the fragment that renders it."""

    kind: str
    template: str
    context: Mapping[str, Any] = field(default_factory=dict)


class SourceBuilder:
    """Decides which declarations a model produces and in what order."""

    def __init__(self, model: SourceModel) -> None:
        self.model = model

    def build(self) -> List[Declaration]:
        if self.model.is_interface:
            return self._interface_declarations()
        return self._concrete_declarations()

    def _concrete_declarations(self) -> List[Declaration]:
        model = self.model
        declarations = [
            Declaration("package", "package.j2"),
            Declaration("type-tag", "type_tag.j2"),
            Declaration("interface", "interface.j2"),
            Declaration("struct", "struct.j2"),
        ]
        if model.constructor is not None:
            declarations.append(Declaration("constructor", "constructor.j2"))
        declarations.extend(
            Declaration("factory", "factory.j2", {"factory": factory}) for factory in model.factories
        )
        declarations.append(Declaration("init", "init.j2"))
        declarations.extend(
            Declaration("method", "method.j2", {"function": function}) for function in model.functions
        )
        declarations.extend(self._constants())
        return declarations

    def _interface_declarations(self) -> List[Declaration]:
        return [
            Declaration("package", "package.j2"),
            Declaration("facade", "facade.j2"),
            *self._constants(),
        ]

    def _constants(self) -> List[Declaration]:
        constants = [Declaration("property", "property.j2", {"prop": prop}) for prop in self.model.properties]
        constants.extend(
            Declaration("signal", "signal.j2", {"signal": signal}) for signal in self.model.signals
        )
        return constants


def _sprintf(fmt: str, *args: object) -> str:
    return fmt % args


TEMPLATE_HELPERS: Dict[str, Callable[..., str]] = {
    "camel_case": camel_case,
    "lower_camel": lower_camel,
    "snake_case": snake_case,
    "sprintf": _sprintf,
}


class SourceRenderer:
    """Serializes a model into Go source text using Jinja2 fragments."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.logger = get_logger("rendering")

    def render(self, model: SourceModel) -> str:
        declarations = SourceBuilder(model).build()
        self.logger.debug(
            "Rendering %s with the %s layout (%d declarations)",
            model.name,
            "interface" if model.is_interface else "concrete",
            len(declarations),
        )
        blocks = [self.render_declaration(model, declaration) for declaration in declarations]
        return html.unescape("\n\n".join(block for block in blocks if block) + "\n")

    def render_declaration(self, model: SourceModel, declaration: Declaration) -> str:
        try:
            template = self._env.get_template(declaration.template)
            text = template.render(src=model, **TEMPLATE_HELPERS, **declaration.context)
        except TemplateError as exc:
            raise RenderError(
                f"error generating Go source code for {model.name} ({declaration.kind}): {exc}"
            ) from exc
        return text.strip("\n")


__all__ = ["Declaration", "SourceBuilder", "SourceRenderer", "TEMPLATE_HELPERS"]
