"""Typed collection configuration loaded from manifest files."""

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from snippet_builder.collaborators.resolvers import RESOLVERS
from snippet_builder.common.constants import DEFAULT_RESOLVER, SOURCES_DIR


class _ManifestModel(BaseModel):
    """Base for manifest sections: camelCase keys, frozen, unknown keys rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class Theme(_ManifestModel):
    """Colors and icon used when presenting a collection."""

    back_color: str = ""
    fore_color: str = ""
    icon_name: str = ""


class Language(_ManifestModel):
    """Language of a collection's code blocks.

    ``short`` is the fence info string (e.g. "js"), ``long`` the display name.
    """

    short: str
    long: str = ""


class CollectionConfig(_ManifestModel):
    """Static description of one content collection.

    Validated once when the manifest is loaded; an unknown resolver name or
    an unexpected key fails here rather than during the build.
    """

    name: str | None = None
    requirable_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("requirables", "requirableIds", "requirable_ids"),
        serialization_alias="requirables",
    )
    resolver_name: str = Field(
        default=DEFAULT_RESOLVER,
        validation_alias=AliasChoices("resolver", "resolverName", "resolver_name"),
        serialization_alias="resolver",
    )
    is_blog: bool = False
    slug: str
    dir_name: str
    snippet_path: str
    repo_url_prefix: str = ""
    bias_penalty_multiplier: float = 1.0
    featured: int = 0
    theme: Theme = Field(default_factory=Theme)
    language: Language | None = None
    optional_language: Language | None = None

    @field_validator("resolver_name")
    @classmethod
    def validate_resolver(cls, value: str) -> str:
        """Ensure the resolver is registered."""
        if value not in RESOLVERS:
            raise ValueError(
                f"unknown resolver '{value}' (registered: {', '.join(sorted(RESOLVERS))})"
            )
        return value

    @property
    def source_dir(self) -> str:
        """Collection source path used to compose snippet ids."""
        return f"{self.dir_name}/{self.snippet_path}"

    def snippets_directory(self, content_root: str | Path) -> Path:
        """Directory holding the collection's snippet files."""
        return Path(content_root) / SOURCES_DIR / self.dir_name / self.snippet_path

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase manifest shape for JSON export."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CollectionManifest(BaseModel):
    """A loaded manifest file and the collection it declares."""

    model_config = ConfigDict(frozen=True)

    path: Path
    meta: CollectionConfig

    @property
    def slug(self) -> str:
        """Slug of the declared collection."""
        return self.meta.slug
