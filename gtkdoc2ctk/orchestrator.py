"""Pipeline orchestration: obtain a page, build its model, render and write it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .assembler import ModelAssembler
from .config import DEFAULT_DOC_URL, DEFAULT_PACKAGE_NAME
from .errors import InputError
from .extractors import discover_extractors
from .logging import get_logger
from .models import SourceModel
from .rendering import SourceRenderer
from .sources import fetch_page, read_page, resolve_page_url, type_name_from_page, type_name_from_path
from .writer import OutputWriter


@dataclass
class GenerationResult:
    """Generated source for one documentation page."""

    name: str
    code: str
    model: SourceModel


class Generator:
    """Coordinates fetch-or-read, assembly, rendering and output for a single page."""

    def __init__(
        self,
        *,
        package_name: str = DEFAULT_PACKAGE_NAME,
        include_deprecated: bool = False,
        doc_url: str = DEFAULT_DOC_URL,
        request_timeout: Optional[float] = None,
        extractors: Optional[Sequence[str]] = None,
        assembler: ModelAssembler | None = None,
        renderer: SourceRenderer | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self.package_name = package_name
        self.include_deprecated = include_deprecated
        self.doc_url = doc_url
        self.request_timeout = request_timeout
        self.assembler = assembler or ModelAssembler(discover_extractors(extractors))
        self.renderer = renderer or SourceRenderer()
        self.writer = writer or OutputWriter()
        self.logger = get_logger("orchestrator")

    def generate_page(self, page: str) -> GenerationResult:
        """Download ``page`` (a type name or URL) and generate its source."""
        url = resolve_page_url(page, self.doc_url)
        self.logger.info("Generating from %s", url)
        content = fetch_page(url, timeout=self.request_timeout)
        return self._generate(type_name_from_page(page), content)

    def generate_file(self, path: Path) -> GenerationResult:
        """Generate source from a documentation page saved on disk."""
        path = Path(path)
        self.logger.info("Generating from %s", path)
        content = read_page(path)
        return self._generate(type_name_from_path(path), content)

    def run(
        self,
        *,
        page: Optional[str] = None,
        path: Optional[Path] = None,
        output: Optional[Path] = None,
        output_path: Optional[Path] = None,
        force: bool = False,
    ) -> GenerationResult:
        """Generate from ``page`` or ``path`` and deliver the result."""
        if page:
            result = self.generate_page(page)
        elif path is not None:
            result = self.generate_file(path)
        else:
            raise InputError("missing --page or --path arguments")
        self.writer.write(result.name, result.code, output, output_path, force=force)
        return result

    def _generate(self, flat_name: str, content: str) -> GenerationResult:
        model = self.assembler.assemble(
            flat_name,
            content,
            package_name=self.package_name,
            include_deprecated=self.include_deprecated,
        )
        code = self.renderer.render(model)
        self.logger.debug("Rendered %d lines for %s", code.count("\n"), model.name)
        return GenerationResult(name=model.name, code=code, model=model)


__all__ = ["GenerationResult", "Generator"]
