"""Content build pipeline turning snippet collections into render-ready records."""

__version__ = "0.1.0"
