"""Base class for section extractor plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from bs4 import Tag

from ..locator import SectionKind
from ..logging import get_logger
from ..models import SourceModel


class SectionExtractor(ABC):
    """Contract for extractors that populate the model from one documentation section.

    Extractors never raise on unexpected markup: anything they cannot
    recognise is left out of the model.
    """

    kind: ClassVar[SectionKind]

    def __init__(self) -> None:
        self.logger = get_logger(f"extractors.{self.kind.name.lower()}")

    @abstractmethod
    def extract(self, model: SourceModel, section: Tag) -> None:
        """Mutate ``model`` with whatever ``section`` describes."""
