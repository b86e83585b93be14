"""Generate CTK scaffold source code from GTK2 reference documentation."""

__version__ = "0.1.0"
