"""Search pipeline shared by the HTTP endpoint and the CLI job."""

from __future__ import annotations

import logging
from typing import Optional

from neptune_search.core.catalog import get_catalog
from neptune_search.core.config import get_settings
from neptune_search.models import SearchResponse
from neptune_search.search.engine import SearchEngine
from neptune_search.search.intent import IntentExtractor
from neptune_search.search.summary import SummaryGenerator
from neptune_search.vendors.gemini import GeminiTextGenerator

logger = logging.getLogger(__name__)


def build_summarizer(use_ai: bool = True) -> SummaryGenerator:
    """Summary generator wired to Gemini; a missing key just means fallback summaries."""
    if not use_ai:
        return SummaryGenerator()
    settings = get_settings()
    return SummaryGenerator(
        GeminiTextGenerator(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.gemini_timeout,
        )
    )


def run_search(
    query: str,
    *,
    engine: Optional[SearchEngine] = None,
    extractor: Optional[IntentExtractor] = None,
    summarizer: Optional[SummaryGenerator] = None,
) -> SearchResponse:
    """Full pipeline: extract intent, rank the catalog, and summarise the results."""
    if not query or not query.strip():
        raise ValueError("Query is required")

    engine = engine or SearchEngine(get_catalog())
    extractor = extractor or IntentExtractor()
    summarizer = summarizer or build_summarizer()

    intent = extractor.extract(query)
    logger.info(
        "Searching query=%s location=%s category=%s max_price=%s",
        query,
        intent.location,
        intent.category,
        intent.max_price,
    )
    providers = engine.search(query, location=intent.location, category=intent.category)
    logger.info("Ranked %d providers for query=%s", len(providers), query)

    return SearchResponse(
        query=query,
        providers=providers,
        summary=summarizer.summarize(providers, intent),
        location=intent.location,
        category=intent.category,
    )
