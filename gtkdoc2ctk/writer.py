"""Delivery of generated source to stdout, a file or a directory."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from .errors import OutputError
from .logging import get_logger
from .normalize import snake_case

SOURCE_SUFFIX = ".go"


class OutputWriter:
    """Writes generated code and reports what was written to ``stream``."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.logger = get_logger("writer")

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(
        self,
        name: str,
        code: str,
        output: Optional[Path] = None,
        output_path: Optional[Path] = None,
        *,
        force: bool = False,
    ) -> Optional[Path]:
        """Deliver ``code`` and return the file it landed in, if any.

        An explicit ``output`` file wins over an ``output_path`` directory;
        with neither, the code is printed to the stream.
        """
        if output is not None:
            return self._write_file(Path(output), code, force=force)
        if output_path is not None:
            directory = Path(output_path)
            if not directory.is_dir():
                raise OutputError(f"directory not found: {directory}")
            return self._write_file(directory / target_filename(name), code, force=force)
        self.stream.write(code)
        return None

    def _write_file(self, target: Path, code: str, *, force: bool) -> Path:
        overwrote = target.exists()
        if overwrote and not force:
            raise OutputError(f"output file exists: {target}, use --force to overwrite")
        try:
            target.write_text(code, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"unable to write {target}: {exc}") from exc
        self.logger.debug("Wrote %d bytes to %s", len(code), target)
        print(f"{'overwrote' if overwrote else 'wrote'}: {target}", file=self.stream)
        return target


def target_filename(name: str) -> str:
    """``CheckButton`` -> ``check_button.go``."""
    return snake_case(name) + SOURCE_SUFFIX


__all__ = ["OutputWriter", "SOURCE_SUFFIX", "target_filename"]
