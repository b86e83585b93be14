"""Builds the source model from a documentation page and resolves derived content."""

from __future__ import annotations

from typing import Iterable, List, Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from .errors import ParseError
from .extractors import SectionExtractor, discover_extractors
from .locator import SectionLocator
from .logging import get_logger
from .models import Function, NamedParameter, Property, Signal, SourceModel
from .normalize import camel_case, dash_case, lower_camel, snake_case

_ACCESSOR_LABELS = {"int": "Int", "float": "Float", "string": "String", "bool": "Bool"}


class ModelAssembler:
    """Runs the section extractors over a page, then links defaults and bodies."""

    def __init__(self, extractors: Optional[Iterable[SectionExtractor]] = None) -> None:
        self.extractors: List[SectionExtractor] = (
            list(extractors) if extractors is not None else discover_extractors()
        )
        self.logger = get_logger("assembler")

    @staticmethod
    def new_model(
        flat_name: str, *, package_name: str = "ctk", include_deprecated: bool = False
    ) -> SourceModel:
        flat = snake_case(flat_name)
        return SourceModel(
            name=camel_case(flat),
            flat=flat,
            tag=dash_case(flat),
            this=flat[:1].lower(),
            package_name=package_name,
            include_deprecated=include_deprecated,
        )

    def assemble(
        self,
        flat_name: str,
        content: str,
        *,
        package_name: str = "ctk",
        include_deprecated: bool = False,
    ) -> SourceModel:
        """Parse ``content`` and return the fully linked model for ``flat_name``."""
        if not content.strip():
            raise ParseError(f"documentation for {flat_name!r} is empty")
        try:
            document = BeautifulSoup(content, "html.parser")
        except ParserRejectedMarkup as exc:  # pragma: no cover
            raise ParseError(f"unable to parse documentation for {flat_name!r}: {exc}") from exc

        model = self.new_model(
            flat_name, package_name=package_name, include_deprecated=include_deprecated
        )
        locator = SectionLocator(document, model.name)
        for extractor in self.extractors:
            section = locator.locate(extractor.kind)
            if section is None:
                self.logger.debug("No %s section for %s", extractor.kind.value, model.name)
                continue
            extractor.extract(model, section)

        propagate_defaults(model)
        synthesize_bodies(model)
        self.logger.debug("Assembled %s", model.summary())
        return model


def propagate_defaults(model: SourceModel) -> None:
    """Give constructor and factory arguments the defaults of matching properties."""
    if model.constructor is not None:
        _apply_defaults(model.constructor.params, model.properties)
    for factory in model.factories:
        _apply_defaults(factory.params, model.properties)


def _apply_defaults(params: List[NamedParameter], properties: List[Property]) -> None:
    for param in params:
        for prop in properties:
            if lower_camel(prop.name) == param.name:
                param.value = prop.default
                break
        if param.value is None and param.type.kind.is_scalar:
            param.value = param.type.zero


def synthesize_bodies(model: SourceModel) -> None:
    """Fill in function bodies from the property and signal naming conventions."""
    for function in model.functions:
        function.body = _synthesize(model, function)


def _synthesize(model: SourceModel, function: Function) -> str:
    for prop in model.properties:
        suffix = camel_case(prop.name)
        if function.name == f"Get{suffix}":
            return getter_body(model, prop)
        if function.name == f"Set{suffix}":
            param = setter_parameter(function, prop)
            if param is not None:
                return setter_body(model, prop, param)
    for signal in model.signals:
        if function.name == f"Emit{camel_case(signal.name)}":
            return emit_body(model, signal)
    if function.returns is not None and not function.returns.is_void:
        return f"\treturn {function.returns.zero}"
    return ""


def setter_parameter(function: Function, prop: Property) -> Optional[NamedParameter]:
    """Pick the argument a setter assigns to ``prop``.

    An argument whose name equals the property wins; otherwise the first
    argument whose name overlaps the property name, or whose type matches,
    in declaration order.
    """
    prop_key = snake_case(prop.name)
    candidates = [
        param
        for param in function.params
        if param.name
        and (
            prop_key in snake_case(param.name)
            or snake_case(param.name) in prop_key
            or param.type.name == prop.type.name
        )
    ]
    for param in candidates:
        if snake_case(param.name) == prop_key:
            return param
    return candidates[0] if candidates else None


def _accessor_label(prop: Property) -> str:
    return _ACCESSOR_LABELS.get(prop.type.label, "Struct")


def getter_body(model: SourceModel, prop: Property) -> str:
    this = model.this
    return "\n".join(
        [
            "\tvar err error",
            f"\tif value, err = {this}.Get{_accessor_label(prop)}Property(Property{prop.name}); err != nil {{",
            f"\t\t{this}.LogErr(err)",
            "\t}",
            "\treturn",
        ]
    )


def setter_body(model: SourceModel, prop: Property, param: NamedParameter) -> str:
    this = model.this
    return "\n".join(
        [
            f"\tif err := {this}.Set{_accessor_label(prop)}Property(Property{prop.name}, {param.name}); err != nil {{",
            f"\t\t{this}.LogErr(err)",
            "\t}",
        ]
    )


def emit_body(model: SourceModel, signal: Signal) -> str:
    this = model.this
    return "\n".join(
        [
            f"\tif f := {this}.Emit(Signal{signal.name}); f == cdk.EVENT_STOP {{",
            f'\t\t{this}.LogTrace("Signal{signal.name} was stopped")',
            "\t}",
        ]
    )


__all__ = [
    "ModelAssembler",
    "emit_body",
    "getter_body",
    "propagate_defaults",
    "setter_body",
    "setter_parameter",
    "synthesize_bodies",
]
