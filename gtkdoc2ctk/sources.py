"""Retrieval of gtk-doc pages from the network or the local filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import urlopen

from .config import DEFAULT_DOC_URL
from .errors import FetchError, InputError
from .logging import get_logger
from .normalize import snake_case

_NAME_PREFIXES = ("gtk_", "gdk_")
_DOCUMENT_PREFIX = "gtk2_"

logger = get_logger("sources")


def is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https", "file"} and bool(parsed.netloc or parsed.path)


def resolve_page_url(page: str, url_template: str = DEFAULT_DOC_URL) -> str:
    """Return ``page`` when it is already a URL, else format it into ``url_template``."""
    if is_url(page):
        return page
    return url_template.format(name=page)


def fetch_page(url: str, *, timeout: Optional[float] = None) -> str:
    """Download a documentation page and decode it as UTF-8."""
    logger.debug("Fetching %s", url)
    try:
        if timeout is None:
            response = urlopen(url)
        else:
            response = urlopen(url, timeout=timeout)
        with response:
            raw = response.read()
    except HTTPError as exc:
        raise FetchError(f"failed to fetch {url}: HTTP {exc.code} {exc.reason}") from exc
    except URLError as exc:
        raise FetchError(f"failed to fetch {url}: {exc.reason}") from exc
    except (OSError, ValueError) as exc:
        # read timeouts and malformed URLs (http.client.InvalidURL)
        raise FetchError(f"failed to fetch {url}: {exc}") from exc
    return raw.decode("utf-8", errors="replace")


def read_page(path: Path) -> str:
    """Read a documentation page saved on disk."""
    path = Path(path)
    if not path.is_file():
        raise InputError(f"documentation file not found: {path}")
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputError(f"unable to read {path}: {exc}") from exc


def type_name_from_page(page: str) -> str:
    """``GtkButton`` or ``.../GtkButton.html`` -> ``button``."""
    if is_url(page):
        page = urlparse(page).path.rstrip("/").rsplit("/", 1)[-1]
    return _flat_name(page)


def type_name_from_path(path: Path) -> str:
    """``docs/gtk2-GtkButton.html`` -> ``button``."""
    return _flat_name(Path(path).name)


def _flat_name(stem: str) -> str:
    if stem.endswith(".html"):
        stem = stem[: -len(".html")]
    flat = snake_case(stem)
    if flat.startswith(_DOCUMENT_PREFIX):
        flat = flat[len(_DOCUMENT_PREFIX) :]
    for prefix in _NAME_PREFIXES:
        if flat.startswith(prefix):
            flat = flat[len(prefix) :]
            break
    return flat


__all__ = [
    "fetch_page",
    "is_url",
    "read_page",
    "resolve_page_url",
    "type_name_from_page",
    "type_name_from_path",
]
