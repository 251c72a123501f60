"""Unit tests for the build pipeline."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from snippet_builder.pipeline.build_pipeline import BuildPipeline, BuildStatistics
from snippet_builder.utils.exceptions import (
    BuildError,
    CollectionReadError,
    ConfigurationError,
    ParseError,
)
from tests.helpers import snippet_content

JS_META = {
    "slug": "js",
    "dirName": "30code",
    "snippetPath": "snippets",
    "language": {"short": "js", "long": "JavaScript"},
}
CSS_META = {
    "slug": "css",
    "resolver": "cssResolver",
    "dirName": "30css",
    "snippetPath": "snippets",
    "language": {"short": "css", "long": "CSS"},
    "optionalLanguage": {"short": "js", "long": "JavaScript"},
}


@pytest.fixture
def two_collection_root(content_root: Callable[..., Path]) -> Path:
    """Content root with a js and a css collection."""
    return content_root(
        {"js": JS_META, "css": CSS_META},
        {
            "js": {"a.md": snippet_content(), "b.md": snippet_content(tags="bar,foo")},
            "css": {"c.md": snippet_content(title="Center")},
        },
    )


def make_pipeline(root: Path, **kwargs: Any) -> BuildPipeline:
    return BuildPipeline(root, history_enabled=False, show_progress=False, **kwargs)


class TestBuildPipeline:
    """Test cases for BuildPipeline."""

    def test_builds_every_collection(self, two_collection_root: Path) -> None:
        """Test that every collection is parsed into its own mapping."""
        result = make_pipeline(two_collection_root).run()

        assert {c.slug for c in result.collections} == {"js", "css"}
        assert set(result.snippets["js"]) == {"a.md", "b.md"}
        assert set(result.snippets["css"]) == {"c.md"}
        assert result.snippets["js"]["b.md"].tags.primary == "bar"
        assert result.snippets["css"]["c.md"].id == "30css/snippets/c"

    def test_collections_follow_registry_order(self, two_collection_root: Path) -> None:
        """Test that the result keeps the loader's order."""
        expected = [p.resolve() for p in (two_collection_root / "configs").glob("*.json")]

        result = make_pipeline(two_collection_root).run()

        assert [c.path for c in result.collections] == expected
        assert list(result.snippets) == [c.slug for c in result.collections]

    def test_statistics(self, two_collection_root: Path) -> None:
        """Test that statistics count collections and snippets."""
        result = make_pipeline(two_collection_root).run()

        assert result.stats.collections_processed == 2
        assert result.stats.snippets_parsed == 3
        assert result.stats.history_degraded == 0
        assert result.stats.duration_seconds >= 0

    def test_slug_filter(self, two_collection_root: Path) -> None:
        """Test building a subset of collections."""
        result = make_pipeline(two_collection_root).run(["css"])

        assert [c.slug for c in result.collections] == ["css"]
        assert list(result.snippets) == ["css"]

    def test_unknown_slug(self, two_collection_root: Path) -> None:
        """Test that an unknown slug is a configuration error."""
        with pytest.raises(ConfigurationError, match="Unknown collection"):
            make_pipeline(two_collection_root).run(["python"])

    def test_empty_registry(self, tmp_path: Path) -> None:
        """Test that a root without manifests builds nothing."""
        result = make_pipeline(tmp_path).run()

        assert result.collections == []
        assert result.snippets == {}

    def test_missing_snippet_directory_is_fatal(self, content_root: Callable[..., Path]) -> None:
        """Test that a collection pointing to a missing directory aborts the build."""
        root = content_root({"js": JS_META}, {})
        (root / "sources" / "30code" / "snippets").rmdir()

        with pytest.raises(CollectionReadError) as exc_info:
            make_pipeline(root).run()

        assert exc_info.value.collection == "js"

    def test_parse_error_aborts_build(self, content_root: Callable[..., Path]) -> None:
        """Test that one malformed snippet aborts the whole build."""
        root = content_root({"js": JS_META}, {"js": {"a.md": "---\ntitle: A\n---\n"}})

        with pytest.raises(ParseError) as exc_info:
            make_pipeline(root).run()

        assert exc_info.value.collection == "js"
        assert exc_info.value.file == "a.md"

    def test_collaborator_failure_wrapped(self, content_root: Callable[..., Path]) -> None:
        """Test that unexpected failures name the collection and the file."""
        root = content_root(
            {"js": JS_META}, {"js": {"a.md": snippet_content(), "b.md": snippet_content()}}
        )
        with patch(
            "snippet_builder.parsing.snippet_reader.SnippetReader._search_tokens",
            side_effect=RuntimeError("tokenizer exploded"),
        ):
            with pytest.raises(BuildError, match="tokenizer exploded") as exc_info:
                make_pipeline(root).run()

        assert exc_info.value.collection == "js"
        assert exc_info.value.file == "a.md"
        assert exc_info.value.describe().startswith("[collection=js, file=a.md]")

    def test_to_dict_export(self, two_collection_root: Path) -> None:
        """Test the JSON export shape."""
        data = make_pipeline(two_collection_root).run().to_dict()

        record = data["snippets"]["js"]["a.md"]
        assert record["id"] == "30code/snippets/a"
        assert record["tags"] == {"all": ["foo", "bar"], "primary": "foo"}
        assert record["updateCount"] == 0
        assert record["firstSeen"] is None
        assert "searchTokens" in record
        assert data["snippets"]["css"]["c.md"]["code"]["style"] == ""
        assert {c["slug"] for c in data["collections"]} == {"js", "css"}
        assert data["stats"]["snippets_parsed"] == 3


def test_statistics_to_dict() -> None:
    """Test statistics serialization."""
    stats = BuildStatistics(collections_processed=1, snippets_parsed=5, duration_seconds=1.23456)

    data = stats.to_dict()

    assert data["collections_processed"] == 1
    assert data["snippets_parsed"] == 5
    assert data["duration_seconds"] == 1.235
    assert "start_time" in data
