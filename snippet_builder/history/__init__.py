"""Version-history enrichment for snippet files."""

from snippet_builder.history.base import HistoryProvider
from snippet_builder.history.enricher import HistoryEnricher
from snippet_builder.history.git_history import GitHistoryProvider

__all__ = ["GitHistoryProvider", "HistoryEnricher", "HistoryProvider"]
