"""Error taxonomy for the generation pipeline."""

from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base class for failures that terminate a generation run."""


class InputError(GeneratorError):
    """Raised when the requested documentation page cannot be obtained."""


class FetchError(InputError):
    """Raised when a documentation page cannot be downloaded."""


class ParseError(GeneratorError):
    """Raised when the documentation content cannot be parsed."""


class RenderError(GeneratorError):
    """Raised when a source template cannot be rendered against the model."""


class OutputError(GeneratorError):
    """Raised when generated source cannot be written to its destination."""


class FormatError(GeneratorError):
    """Raised when a source file lacks an interface, struct or exported methods."""


__all__ = [
    "FetchError",
    "FormatError",
    "GeneratorError",
    "InputError",
    "OutputError",
    "ParseError",
    "RenderError",
]
