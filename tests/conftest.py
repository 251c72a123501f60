"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from snippet_builder.models.collection import CollectionConfig
from tests.helpers import snippet_content


@pytest.fixture
def js_config() -> CollectionConfig:
    """Configuration of a single-language code collection."""
    return CollectionConfig.model_validate(
        {
            "requirables": ["snippets.json"],
            "isBlog": False,
            "slug": "js",
            "dirName": "30code",
            "snippetPath": "snippets",
            "repoUrlPrefix": "https://github.com/example/30code/blob/master/snippets",
            "biasPenaltyMultiplier": 1.0,
            "featured": 1,
            "theme": {"backColor": "#ffdb39", "foreColor": "#000", "iconName": "js"},
            "language": {"short": "js", "long": "JavaScript"},
        }
    )


@pytest.fixture
def css_config() -> CollectionConfig:
    """Configuration of a collection with an optional style language."""
    return CollectionConfig.model_validate(
        {
            "resolver": "jsxResolver",
            "slug": "react",
            "dirName": "30react",
            "snippetPath": "snippets",
            "language": {"short": "jsx", "long": "React"},
            "optionalLanguage": {"short": "css", "long": "CSS"},
        }
    )


@pytest.fixture
def write_snippet(tmp_path: Path) -> Callable[..., Path]:
    """Write snippet files into a directory under tmp_path."""

    def _write(filename: str, content: str | None = None, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path / "snippets"
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename
        path.write_text(content if content is not None else snippet_content(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def content_root(tmp_path: Path) -> Callable[..., Path]:
    """Build a content root with manifests and snippet sources."""

    def _build(collections: dict[str, dict[str, Any]], snippets: dict[str, dict[str, str]]) -> Path:
        root = tmp_path / "content"
        configs = root / "configs"
        configs.mkdir(parents=True, exist_ok=True)
        for name, meta in collections.items():
            (configs / f"{name}.json").write_text(json.dumps({"meta": meta}), encoding="utf-8")
            source = root / "sources" / meta["dirName"] / meta["snippetPath"]
            source.mkdir(parents=True, exist_ok=True)
            for filename, content in snippets.get(name, {}).items():
                (source / filename).write_text(content, encoding="utf-8")
        return root

    return _build
