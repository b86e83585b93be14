"""Go source rendering for assembled models."""

from .builder import Declaration, SourceBuilder, SourceRenderer, TEMPLATE_HELPERS

__all__ = ["Declaration", "SourceBuilder", "SourceRenderer", "TEMPLATE_HELPERS"]
