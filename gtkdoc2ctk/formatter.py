"""Rewrites a source file's interface so it lists the concrete type's exported methods."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .errors import FormatError
from .logging import get_logger

SOURCE_SUFFIX = ".go"

_INTERFACE_PATTERN = re.compile(r"^[ \t]*type (\w+) interface \{[ \t]*$", re.MULTILINE)
_STRUCT_PATTERN = re.compile(r"^[ \t]*type (\w+) struct \{[ \t]*$", re.MULTILINE)

logger = get_logger("formatter")


def exported_methods(text: str, concrete: str) -> List[str]:
    """Signatures of the exported methods declared on ``*concrete``, in source order."""
    pattern = re.compile(
        rf"^[ \t]*func \(\w+ \*?{re.escape(concrete)}\) ([A-Z].*?) \{{\}}?[ \t]*$",
        re.MULTILINE,
    )
    return [match.group(1) for match in pattern.finditer(text)]


def format_source(text: str) -> str:
    """Return ``text`` with the facade interface body rebuilt from the exported methods."""
    interface = _INTERFACE_PATTERN.search(text)
    if interface is None:
        raise FormatError("missing an interface declaration")
    struct = _STRUCT_PATTERN.search(text)
    if struct is None:
        raise FormatError("missing a matching struct declaration")
    methods = exported_methods(text, struct.group(1))
    if not methods:
        raise FormatError("missing exported methods")

    facade = interface.group(1)
    body_pattern = re.compile(
        rf"^type {re.escape(facade)} interface \{{[ \t]*\r?\n(.*?)\r?\n^\}}[ \t]*$",
        re.MULTILINE | re.DOTALL,
    )
    match = body_pattern.search(text)
    if match is None:
        return text

    embedded: List[str] = []
    found_blank = False
    for line in match.group(1).split("\n"):
        if not line.strip():
            found_blank = True
            break
        embedded.append(line.strip())

    lines = [f"type {facade} interface {{"]
    if found_blank and embedded:
        lines.extend(f"\t{entry}" for entry in embedded)
        lines.append("")
    lines.extend(f"\t{method}" for method in methods)
    lines.append("}")
    return text[: match.start()] + "\n".join(lines) + text[match.end() :]


def format_file(path: Path) -> str:
    """Rewrite ``path`` in place; return ``"updated"`` or ``"skipped"``."""
    path = Path(path)
    if not path.is_file():
        raise FormatError(f"file not found: {path}")
    if path.suffix != SOURCE_SUFFIX:
        raise FormatError(f"not a {SOURCE_SUFFIX} source file: {path}")
    original = path.read_text(encoding="utf-8")
    try:
        formatted = format_source(original)
    except FormatError as exc:
        raise FormatError(f"{path} is {exc}") from exc
    if formatted == original:
        logger.debug("No interface changes for %s", path)
        return "skipped"
    path.write_text(formatted, encoding="utf-8")
    return "updated"


__all__ = ["exported_methods", "format_file", "format_source"]
