"""Intermediate model shared across extraction, assembly and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ZeroKind(Enum):
    """Closed set of value kinds a translated type can carry."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    NONE = "none"
    ANY = "any"

    @property
    def zero(self) -> Optional[str]:
        """Canonical Go zero literal for the kind, None for the void kind."""
        return _ZERO_LITERALS[self]

    @property
    def is_scalar(self) -> bool:
        return self in _SCALAR_KINDS


_ZERO_LITERALS = {
    ZeroKind.INTEGER: "0",
    ZeroKind.FLOAT: "0.0",
    ZeroKind.STRING: '""',
    ZeroKind.BOOLEAN: "false",
    ZeroKind.NONE: None,
    ZeroKind.ANY: "nil",
}

_SCALAR_KINDS = frozenset(
    {ZeroKind.INTEGER, ZeroKind.FLOAT, ZeroKind.STRING, ZeroKind.BOOLEAN}
)


@dataclass(frozen=True)
class TypeDescriptor:
    """A documentation type token lowered to its Go counterpart."""

    source: str
    name: str
    label: str
    kind: ZeroKind

    @property
    def zero(self) -> Optional[str]:
        return self.kind.zero

    @property
    def is_void(self) -> bool:
        return not self.name

    def __str__(self) -> str:
        return self.name


@dataclass
class NamedParameter:
    """A function argument or signal listener argument."""

    name: str
    type: TypeDescriptor
    value: Optional[str] = None
    note: str = ""

    def declaration(self, *, with_note: bool = False) -> str:
        text = f"{self.name} {self.type.name}"
        if with_note and self.note:
            text += f"\t{self.note}"
        return text


@dataclass
class Function:
    """A documented function, its signature and its synthesized body."""

    name: str
    docs: str = ""
    params: List[NamedParameter] = field(default_factory=list)
    returns: Optional[TypeDescriptor] = None
    body: str = ""

    def signature(self) -> str:
        """Render the Go method signature, e.g. ``SetLabel(label string)``."""
        argv = ", ".join(param.declaration() for param in self.params)
        result = ""
        if self.returns is not None and not self.returns.is_void:
            result = f" (value {self.returns.name})"
        return f"{self.name}({argv}){result}"


@dataclass
class Property:
    """A documented object property."""

    name: str
    tag: str
    type: TypeDescriptor
    writable: bool = False
    default: Optional[str] = None
    docs: str = ""
    decl: str = ""

    @property
    def default_literal(self) -> str:
        return self.default if self.default is not None else "nil"


@dataclass
class Signal:
    """A documented signal and its listener arguments."""

    name: str
    tag: str
    docs: str = ""
    params: List[NamedParameter] = field(default_factory=list)


@dataclass
class SourceModel:
    """Everything extracted from one documentation page."""

    name: str
    flat: str
    tag: str
    this: str
    package_name: str
    include_deprecated: bool = False
    description: str = ""
    parent: str = ""
    hierarchy: List[str] = field(default_factory=list)
    implements: List[str] = field(default_factory=list)
    properties: List[Property] = field(default_factory=list)
    signals: List[Signal] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)
    constructor: Optional[Function] = None
    factories: List[Function] = field(default_factory=list)

    @property
    def is_interface(self) -> bool:
        return bool(self.hierarchy) and self.hierarchy[0] == "CInterface"

    def prefixed_names(self) -> tuple[str, str]:
        """The two documentation spellings of this type, e.g. GtkButton and GdkButton."""
        return f"Gtk{self.name}", f"Gdk{self.name}"

    def object_hierarchy(self) -> str:
        """Render the hierarchy as a Go comment tree rooted at the first ancestor."""
        lines = [f"// {self.name} Hierarchy:"]
        depth = 0
        found = False
        for entry in self.hierarchy:
            prefix = "  " * depth + ("+- " if depth > 0 else "")
            lines.append(f"//\t{prefix}{entry}")
            if entry == self.name:
                found = True
                depth += 1
            elif not found:
                depth += 1
        return "\n".join(lines)

    def summary(self) -> str:
        return (
            f"{self.name}: hierarchy={','.join(self.hierarchy) or '-'} "
            f"properties={len(self.properties)} signals={len(self.signals)} "
            f"functions={len(self.functions)} factories={len(self.factories)}"
        )


__all__ = [
    "Function",
    "NamedParameter",
    "Property",
    "Signal",
    "SourceModel",
    "TypeDescriptor",
    "ZeroKind",
]
