"""Pure text rewriting helpers used throughout extraction and rendering."""

from __future__ import annotations

import re
import textwrap
from typing import List

FAMILY_PREFIXES = ("Gtk", "Gdk")
FUNCTION_PREFIXES = ("gtk_", "gdk_")
WRAP_WIDTH = 76

_LINE_ART_PATTERN = re.compile(r"<span[^>]+?>.+?</span>", re.IGNORECASE | re.DOTALL)
_TAG_PATTERN = re.compile(r"<[^>]+?>", re.DOTALL)
_DIGIT_SUFFIX_PATTERN = re.compile(r"\d+\s*$")
_FANCY_QUOTES_PATTERN = re.compile(r"[“”]")
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+")
_FAMILY_CLASS_PATTERN = re.compile(r"\b(?:Gdk|Gtk)([_a-zA-Z0-9]+)\b")
_FAMILY_FUNC_PATTERN = re.compile(r"\b(?:gdk|gtk)_([_a-zA-Z0-9]+)\b")


def strip_markup(text: str) -> str:
    """Drop decorative spans (with their content) and any remaining tags."""
    text = _LINE_ART_PATTERN.sub("", text)
    return _TAG_PATTERN.sub("", text)


def strip_digit_suffix(token: str) -> str:
    return _DIGIT_SUFFIX_PATTERN.sub("", token)


def strip_fancy_quotes(text: str) -> str:
    return _FANCY_QUOTES_PATTERN.sub("", text)


def strip_family_prefix(token: str) -> str:
    """Remove a leading Gtk/Gdk type prefix, e.g. ``GtkWidget`` -> ``Widget``."""
    for prefix in FAMILY_PREFIXES:
        if token.startswith(prefix):
            return token[len(prefix) :]
    return token


def split_words(identifier: str) -> List[str]:
    return _WORD_PATTERN.findall(identifier)


def camel_case(identifier: str) -> str:
    """``use-stock`` / ``use_stock`` / ``useStock`` -> ``UseStock``."""
    return "".join(_capitalize(word) for word in split_words(identifier))


def lower_camel(identifier: str) -> str:
    """``use-stock`` / ``UseStock`` -> ``useStock``."""
    words = split_words(identifier)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def snake_case(identifier: str) -> str:
    return "_".join(word.lower() for word in split_words(identifier))


def dash_case(identifier: str) -> str:
    return "-".join(word.lower() for word in split_words(identifier))


def _capitalize(word: str) -> str:
    # acronyms stay as they are so the conversions are idempotent
    if word.isupper():
        return word
    return word[:1].upper() + word[1:].lower()


def word_wrap(text: str, width: int = WRAP_WIDTH) -> str:
    """Wrap each line of ``text`` at ``width`` columns without splitting words.

    Leading indentation of an input line is repeated on every line produced
    from it; blank lines are kept.
    """
    wrapped: List[str] = []
    for line in text.split("\n"):
        if not line.strip():
            wrapped.append("")
            continue
        indent = line[: len(line) - len(line.lstrip())]
        wrapper = textwrap.TextWrapper(
            width=width,
            initial_indent=indent,
            subsequent_indent=indent,
            break_long_words=False,
            break_on_hyphens=False,
        )
        wrapped.extend(wrapper.wrap(line.strip()))
    return "\n".join(wrapped)


def comment_lines(text: str, prefix: str = "// ") -> str:
    """Prefix every line of ``text`` with a Go line comment marker."""
    return "\n".join(prefix + line for line in text.split("\n"))


def is_blank(text: str) -> bool:
    return not text.strip()


def rewrite_family_names(class_name: str, text: str) -> str:
    """Rewrite GTK-family symbol references into CTK naming.

    ``gtk_button_set_label()`` becomes ``SetLabel`` inside the Button page,
    ``GtkWidget`` becomes ``Widget`` and ``GTK+`` becomes ``CTK``. The rewrite
    runs to a fixed point so applying it again is a no-op.
    """
    own_prefix = snake_case(class_name) + "_"
    while True:
        rewritten = _rewrite_once(own_prefix, text)
        if rewritten == text:
            return rewritten
        text = rewritten


def _rewrite_once(own_prefix: str, text: str) -> str:
    def _function(match: re.Match[str]) -> str:
        symbol = match.group(1)
        if symbol.startswith(own_prefix):
            symbol = symbol[len(own_prefix) :]
        return camel_case(symbol) or match.group(0)

    text = _FAMILY_FUNC_PATTERN.sub(_function, text)
    text = _FAMILY_CLASS_PATTERN.sub(r"\1", text)
    text = text.replace("()", "")
    return text.replace("GTK+", "CTK")


__all__ = [
    "FAMILY_PREFIXES",
    "FUNCTION_PREFIXES",
    "WRAP_WIDTH",
    "camel_case",
    "comment_lines",
    "dash_case",
    "is_blank",
    "lower_camel",
    "rewrite_family_names",
    "snake_case",
    "split_words",
    "strip_digit_suffix",
    "strip_family_prefix",
    "strip_fancy_quotes",
    "strip_markup",
    "word_wrap",
]
