"""Filter the provider catalog against a query and rank the survivors."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from neptune_search.models import ServiceProvider
from neptune_search.search.scorer import NeptuneScorer

logger = logging.getLogger(__name__)


def _matches_location(provider: ServiceProvider, query_lower: str, location: Optional[str]) -> bool:
    if not location:
        return True
    return location.lower() in provider.location.lower() or provider.city in query_lower


def _matches_category(provider: ServiceProvider, query_lower: str, category: Optional[str]) -> bool:
    if not category:
        return True
    return (
        provider.category == category
        or any(service.lower() in query_lower for service in provider.services)
        or provider.category.replace("-", " ", 1) in query_lower
    )


def _matches_loosely(provider: ServiceProvider, query_lower: str) -> bool:
    return provider.city in query_lower or any(
        service.lower().split(" ")[0] in query_lower for service in provider.services
    )


class SearchEngine:
    """Two-pass catalog search.

    The strict pass requires both the location and category filters to
    match. Only when it finds nothing does the fallback pass keep anything
    whose city or leading service word appears in the query.
    """

    def __init__(self, catalog: Sequence[ServiceProvider], scorer: Optional[NeptuneScorer] = None) -> None:
        self.catalog = tuple(catalog)
        self.scorer = scorer or NeptuneScorer()

    def filter_strict(
        self, query: str, location: Optional[str] = None, category: Optional[str] = None
    ) -> List[ServiceProvider]:
        query_lower = query.lower()
        return [
            provider
            for provider in self.catalog
            if _matches_location(provider, query_lower, location) and _matches_category(provider, query_lower, category)
        ]

    def filter_fallback(self, query: str) -> List[ServiceProvider]:
        query_lower = query.lower()
        return [provider for provider in self.catalog if _matches_loosely(provider, query_lower)]

    def rank(
        self, candidates: Iterable[ServiceProvider], query: str, category: Optional[str] = None
    ) -> List[ServiceProvider]:
        scored = [provider.with_score(self.scorer.score(provider, query, category)) for provider in candidates]
        # sorted() is stable: equal scores keep catalog order.
        return sorted(scored, key=lambda provider: provider.neptune_score, reverse=True)

    def search(self, query: str, location: Optional[str] = None, category: Optional[str] = None) -> List[ServiceProvider]:
        candidates = self.filter_strict(query, location, category)
        if candidates:
            logger.debug("Strict pass matched %d providers for query=%s", len(candidates), query)
        else:
            candidates = self.filter_fallback(query)
            logger.debug("Strict pass empty; fallback pass matched %d providers for query=%s", len(candidates), query)
        return self.rank(candidates, query, category)
