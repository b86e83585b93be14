"""Section extractor implementations and discovery utilities."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .base import SectionExtractor
from .description import DescriptionExtractor
from .functions import FunctionsExtractor
from .hierarchy import HierarchyExtractor
from .interfaces import InterfacesExtractor
from .properties import PropertiesExtractor, normalize_default
from .signals import SignalsExtractor

_BUILTIN_FACTORIES: dict[str, Callable[[], SectionExtractor]] = {
    "hierarchy": HierarchyExtractor,
    "interfaces": InterfacesExtractor,
    "description": DescriptionExtractor,
    "properties": PropertiesExtractor,
    "signals": SignalsExtractor,
    "functions": FunctionsExtractor,
}

EXTRACTOR_NAMES = tuple(_BUILTIN_FACTORIES)


def discover_extractors(enabled: Sequence[str] | None = None) -> List[SectionExtractor]:
    """Return instantiated extractors in pipeline order, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set - set(_BUILTIN_FACTORIES)
        if unknown:
            raise ValueError(f"Unknown extractors requested: {', '.join(sorted(unknown))}")

    extractors: List[SectionExtractor] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        instance = factory()
        if not isinstance(instance, SectionExtractor):
            raise TypeError(f"Extractor factory for '{name}' did not return a SectionExtractor")
        extractors.append(instance)
    return extractors


__all__ = [
    "DescriptionExtractor",
    "EXTRACTOR_NAMES",
    "FunctionsExtractor",
    "HierarchyExtractor",
    "InterfacesExtractor",
    "PropertiesExtractor",
    "SectionExtractor",
    "SignalsExtractor",
    "discover_extractors",
    "normalize_default",
]
