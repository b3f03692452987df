"""Natural-language summaries for a ranked provider list.

The deterministic fallback always works offline. An optional TextGenerator
may replace it; any failure there silently selects the fallback.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from neptune_search.models import SearchIntent, ServiceProvider

logger = logging.getLogger(__name__)

PROMPT_TOP_N = 3


class SummaryServiceUnavailable(RuntimeError):
    """Raised by a TextGenerator that cannot produce text."""


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        ...


def _category_label(category: str) -> str:
    return category.replace("-", " ", 1) if category else "service"


def _availability_message(providers: Sequence[ServiceProvider]) -> str:
    if any("24/7" in p.availability or "emergency" in p.availability for p in providers):
        return "Emergency services available"
    if any("same-day" in p.availability or "Same-day" in p.availability for p in providers):
        return "Same-day service options available"
    return "Standard scheduling available"


def _distinct_price_ranges(providers: Sequence[ServiceProvider]) -> List[str]:
    seen: List[str] = []
    for provider in providers:
        if provider.price_range not in seen:
            seen.append(provider.price_range)
    return seen


def build_fallback_summary(providers: Sequence[ServiceProvider], intent: SearchIntent) -> str:
    if not providers:
        return (
            f'No service providers found matching "{intent.original_query}". Try broadening your search terms, '
            "checking the spelling of your location, or searching for related services. "
            'For example, try "plumbers in [your city]" or "appliance repair near me".'
        )

    top = providers[0]
    average = sum(p.neptune_score for p in providers) / len(providers)
    # Spread is first/last of the de-duplicated list in result order, not a numeric min/max.
    price_ranges = _distinct_price_ranges(providers)
    location_suffix = f" in {intent.location}" if intent.location else ""

    return (
        f"Found {len(providers)} {_category_label(intent.category)} providers{location_suffix}. \n\n"
        f"🏆 **Top Recommendation**: {top.name} leads with a Neptune Score of {top.neptune_score:g}/10 "
        f"and {top.rating:g}/5 stars from {top.review_count} reviews.\n\n"
        f"💰 **Pricing**: Options range from {price_ranges[-1]} to {price_ranges[0]}, "
        f"with an average Neptune Score of {average:.1f}/10.\n\n"
        f"⚡ **Availability**: {_availability_message(providers)}."
    )


def build_summary_prompt(providers: Sequence[ServiceProvider], intent: SearchIntent) -> str:
    lines = [
        "You are Neptune AI, an expert assistant for local service recommendations.",
        "Analyze the user's query and the search results to provide a helpful, concise summary.",
        "Focus on key insights about the providers found, pricing trends, and recommendations.",
        "Keep your response under 150 words and be conversational but professional.",
        "",
        f'User Query: "{intent.original_query}"',
        "",
        f"Search Results Found: {len(providers)} providers",
    ]
    if providers:
        lines.append("Top Results:")
        for p in providers[:PROMPT_TOP_N]:
            lines.append(f"- {p.name} (Neptune Score: {p.neptune_score:g}/10, Rating: {p.rating:g}/5, Price: {p.price_range})")
        lines.append("")
        lines.append(f"Location Focus: {intent.location or 'Various locations'}")
        lines.append(f"Service Category: {intent.category or 'Multiple categories'}")
    else:
        lines.append("No specific providers found for this query.")
    lines.append("")
    lines.append("Provide a helpful summary and recommendation for the user.")
    return "\n".join(lines)


class SummaryGenerator:
    """Try the external generator once, otherwise return the fallback."""

    def __init__(self, generator: Optional[TextGenerator] = None) -> None:
        self.generator = generator

    def summarize(self, providers: Sequence[ServiceProvider], intent: SearchIntent) -> str:
        if self.generator is None:
            return build_fallback_summary(providers, intent)

        prompt = build_summary_prompt(providers, intent)
        try:
            text = self.generator.generate(prompt)
        except SummaryServiceUnavailable as exc:
            logger.warning("AI summary unavailable, using fallback: %s", exc)
            return build_fallback_summary(providers, intent)
        except Exception:  # noqa: BLE001
            logger.exception("Summary generator failed unexpectedly, using fallback")
            return build_fallback_summary(providers, intent)

        if not isinstance(text, str) or not text.strip():
            logger.warning("AI summary was empty or not text, using fallback")
            return build_fallback_summary(providers, intent)
        return text.strip()
