"""Collection registry discovery."""

from snippet_builder.registry.loader import load_collections, load_manifest

__all__ = ["load_collections", "load_manifest"]
