"""Custom exception hierarchy for the build pipeline."""


class SnippetBuilderError(Exception):
    """Base exception for all build errors.

    Carries the collection and file being processed when the error was raised,
    so that a single diagnostic line can name the offending input.
    """

    def __init__(
        self,
        message: str,
        is_retryable: bool = False,
        collection: str | None = None,
        file: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            is_retryable: Whether the operation can be retried
            collection: Slug or manifest of the collection being built
            file: Snippet or manifest file being processed
        """
        super().__init__(message)
        self.message = message
        self.is_retryable = is_retryable
        self.collection = collection
        self.file = file

    def describe(self) -> str:
        """Render the error with its collection/file context."""
        context = []
        if self.collection:
            context.append(f"collection={self.collection}")
        if self.file:
            context.append(f"file={self.file}")
        if not context:
            return self.message
        return f"[{', '.join(context)}] {self.message}"


class ConfigurationError(SnippetBuilderError):
    """Malformed manifest, unknown resolver or invalid environment setting."""

    pass


class CollectionReadError(SnippetBuilderError):
    """Snippet directory or file could not be read."""

    pass


class ParseError(SnippetBuilderError):
    """Snippet file has a malformed header or unusable body."""

    pass


class DegradedEnrichmentError(SnippetBuilderError):
    """Version history is unavailable or timed out.

    Never fatal: the enricher logs it and falls back to empty metadata.
    """

    def __init__(
        self, message: str, collection: str | None = None, file: str | None = None
    ) -> None:
        """Initialize exception, always retryable."""
        super().__init__(message, is_retryable=True, collection=collection, file=file)


class BuildError(SnippetBuilderError):
    """Unexpected failure inside a collaborator while building a collection."""

    pass
