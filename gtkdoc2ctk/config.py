"""Configuration loading for gtkdoc2ctk (.gtkdoc2ctk.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .extractors import EXTRACTOR_NAMES

CONFIG_FILENAME = ".gtkdoc2ctk.yml"
DEFAULT_PACKAGE_NAME = "ctk"
DEFAULT_DOC_URL = "https://developer.gnome.org/gtk2/stable/{name}.html"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GeneratorConfig:
    """Represents the settings defined in .gtkdoc2ctk.yml."""

    root: Path
    package_name: str = DEFAULT_PACKAGE_NAME
    include_deprecated: bool = False
    doc_url: str = DEFAULT_DOC_URL
    request_timeout: Optional[float] = None
    output_path: Optional[Path] = None
    force: bool = False
    extractors: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> GeneratorConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GeneratorConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = GeneratorConfig(root=root)

    package_name = _as_str(data.get("package_name"))
    if package_name:
        config.package_name = package_name

    include_deprecated = _as_bool(data.get("include_deprecated"))
    if include_deprecated is not None:
        config.include_deprecated = include_deprecated

    doc_url = _as_str(data.get("doc_url"))
    if doc_url:
        if "{name}" not in doc_url:
            raise ConfigError("doc_url must contain a {name} placeholder")
        config.doc_url = doc_url

    config.request_timeout = _as_float(data.get("request_timeout"))

    output_path = _as_str(data.get("output_path"))
    if output_path:
        config.output_path = root / output_path

    force = _as_bool(data.get("force"))
    if force is not None:
        config.force = force

    extractor_data = _as_dict(data.get("extractors"))
    if extractor_data:
        enabled = [name.lower() for name in _as_str_list(extractor_data.get("enabled"))]
        unknown = sorted(set(enabled) - set(EXTRACTOR_NAMES))
        if unknown:
            raise ConfigError(f"Unknown extractors in {CONFIG_FILENAME}: {', '.join(unknown)}")
        config.extractors = enabled

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_DOC_URL",
    "DEFAULT_PACKAGE_NAME",
    "GeneratorConfig",
    "load_config",
]
