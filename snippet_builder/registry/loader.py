"""Collection registry loader.

Discovers manifest files under a content root and loads each one into a
typed ``CollectionManifest``. Discovery order is kept as returned by the glob:
it defines collection precedence downstream and is never re-sorted.
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from snippet_builder.common.constants import MANIFEST_GLOB
from snippet_builder.models.collection import CollectionConfig, CollectionManifest
from snippet_builder.utils.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def discover_manifests(content_root: str | Path, pattern: str = MANIFEST_GLOB) -> list[Path]:
    """Find manifest files under the content root.

    Args:
        content_root: Directory holding the content
        pattern: Glob pattern relative to the root

    Returns:
        Resolved manifest paths in enumeration order (empty if the root is missing)
    """
    root = Path(content_root)
    if not root.is_dir():
        logger.warning("content_root_not_found", content_root=str(root))
        return []

    return [match.resolve() for match in root.glob(pattern) if match.is_file()]


def load_manifest(manifest_path: Path) -> CollectionManifest:
    """Load and validate a single manifest file.

    Args:
        manifest_path: Path to a JSON manifest

    Returns:
        CollectionManifest for the file

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or does not describe a valid collection
    """
    try:
        document: Any = json.loads(manifest_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read manifest: {e}", file=str(manifest_path)
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Malformed manifest JSON: {e}", file=str(manifest_path)
        ) from e

    if not isinstance(document, dict):
        raise ConfigurationError(
            "Manifest must be a JSON object", file=str(manifest_path)
        )

    # Manifests declare the collection under "meta"; bare configs are accepted too
    meta = document.get("meta", document)

    try:
        config = CollectionConfig.model_validate(meta)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid collection config: {e}", file=str(manifest_path)
        ) from e

    return CollectionManifest(path=manifest_path, meta=config)


def load_collections(
    content_root: str | Path, pattern: str = MANIFEST_GLOB
) -> list[CollectionManifest]:
    """Load every collection manifest under the content root.

    Args:
        content_root: Directory holding the content
        pattern: Glob pattern for manifest files

    Returns:
        Collection manifests in discovery order

    Raises:
        ConfigurationError: If any manifest is malformed
    """
    manifest_paths = discover_manifests(content_root, pattern)

    collections = [load_manifest(path) for path in manifest_paths]

    logger.info(
        "collections_loaded",
        content_root=str(content_root),
        pattern=pattern,
        count=len(collections),
        slugs=[collection.slug for collection in collections],
    )
    return collections
