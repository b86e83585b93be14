"""Lowering of GTK/GLib C type tokens to Go types for CTK sources."""

from __future__ import annotations

from typing import Dict, Tuple

from .models import TypeDescriptor, ZeroKind
from .normalize import lower_camel, strip_digit_suffix

VARIADIC_TOKEN = "...interface{}"

INTEGER_TOKENS = frozenset(
    {
        "gint",
        "guint",
        "gshort",
        "gushort",
        "glong",
        "gulong",
        "gsize",
        "gssize",
        "goffset",
        "gint8",
        "guint8",
        "gint16",
        "guint16",
        "gint32",
        "guint32",
        "gint64",
        "guint64",
        "int",
        "long",
        "short",
    }
)
FLOAT_TOKENS = frozenset({"gdouble", "gfloat", "double", "float"})
STRING_TOKENS = frozenset({"gchar", "guchar", "gstrv", "char"})
POINTER_TOKENS = frozenset({"gpointer", "gconstpointer", "gintptr", "guintptr"})

# token -> (go name, label, kind) for everything that is not a family-prefixed object type
_FIXED: Dict[str, Tuple[str, str, ZeroKind]] = {}
_FIXED.update({token: ("int", "int", ZeroKind.INTEGER) for token in INTEGER_TOKENS})
_FIXED.update({token: ("float64", "float", ZeroKind.FLOAT) for token in FLOAT_TOKENS})
_FIXED.update({token: ("string", "string", ZeroKind.STRING) for token in STRING_TOKENS})
_FIXED.update({token: ("interface{}", "struct", ZeroKind.ANY) for token in POINTER_TOKENS})
_FIXED.update(
    {
        "gboolean": ("bool", "bool", ZeroKind.BOOLEAN),
        "void": ("", "", ZeroKind.NONE),
        "": ("", "", ZeroKind.NONE),
        "style": ("cdk.Style", "style", ZeroKind.ANY),
        VARIADIC_TOKEN: (VARIADIC_TOKEN, "interface{}", ZeroKind.ANY),
    }
)


def translate(package: str, token: str) -> TypeDescriptor:
    """Map a documentation type token to its descriptor for ``package``.

    Unknown tokens are treated as object types: in the ``ctk`` package the
    Gtk/Gdk prefix is dropped, in ``cdk`` Gtk types are referenced through
    the ``ctk.`` alias, and any other package references both through it.
    """
    token = token.strip()
    fixed = _FIXED.get(token)
    if fixed is not None:
        name, label, kind = fixed
        return TypeDescriptor(source=token, name=name, label=label, kind=kind)
    return TypeDescriptor(
        source=token,
        name=_object_type_name(package, token),
        label="struct",
        kind=ZeroKind.ANY,
    )


def _object_type_name(package: str, token: str) -> str:
    if package == "ctk":
        return token.replace("Gdk", "").replace("Gtk", "")
    if package == "cdk":
        return token.replace("Gdk", "").replace("Gtk", "ctk.")
    return token.replace("Gdk", "ctk.").replace("Gtk", "ctk.")


def translate_parameter(package: str, type_token: str, name: str) -> Tuple[str, TypeDescriptor]:
    """Translate a ``type name`` pair from a C signature into a Go name and type."""
    type_token = strip_digit_suffix(type_token)
    if name.startswith("*"):
        name = name.lstrip("*")
    return lower_camel(name), translate(package, type_token)


def concrete_type(name: str) -> TypeDescriptor:
    """Descriptor for the concrete ``*C<Name>`` pointer returned by constructors."""
    return TypeDescriptor(source=name, name=f"*C{name}", label="struct", kind=ZeroKind.ANY)


__all__ = [
    "FLOAT_TOKENS",
    "INTEGER_TOKENS",
    "POINTER_TOKENS",
    "STRING_TOKENS",
    "VARIADIC_TOKEN",
    "concrete_type",
    "translate",
    "translate_parameter",
]
