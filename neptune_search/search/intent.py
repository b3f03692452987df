"""Turn free-text service requests into a structured SearchIntent."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from neptune_search.models import SearchIntent

# Order matters: the first pattern that matches supplies the location.
LOCATION_PATTERNS: Tuple[re.Pattern[str], ...] = (
    re.compile(r"in\s+([^,]+(?:,\s*[A-Z]{2})?)", re.IGNORECASE),
    re.compile(r"near\s+([^,]+)", re.IGNORECASE),
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z]{2})"),
    re.compile(r"(San Francisco|Austin|Chicago|Miami|Denver|Seattle|New York|Los Angeles)", re.IGNORECASE),
)

# Scanned in insertion order; the first keyword found wins, so "plumbing
# appliance" resolves to plumber.
CATEGORY_KEYWORDS: Mapping[str, str] = MappingProxyType(
    {
        "plumber": "plumber",
        "plumbing": "plumber",
        "dishwasher": "appliance-repair",
        "appliance": "appliance-repair",
        "electrician": "electrician",
        "electrical": "electrician",
        "vet": "veterinarian",
        "veterinarian": "veterinarian",
        "hvac": "hvac",
        "heating": "hvac",
        "cooling": "hvac",
        "grooming": "pet-grooming",
        "groomer": "pet-grooming",
    }
)

PRICE_PATTERN: re.Pattern[str] = re.compile(r"under\s*\$?(\d+)", re.IGNORECASE)


@dataclass(frozen=True)
class IntentRules:
    location_patterns: Tuple[re.Pattern[str], ...] = LOCATION_PATTERNS
    category_keywords: Mapping[str, str] = field(default_factory=lambda: CATEGORY_KEYWORDS)
    price_pattern: re.Pattern[str] = PRICE_PATTERN


DEFAULT_INTENT_RULES = IntentRules()


class IntentExtractor:
    """Pure, total parser: unmatched parts come back empty, never as errors."""

    def __init__(self, rules: IntentRules = DEFAULT_INTENT_RULES) -> None:
        self.rules = rules

    def extract(self, query: str) -> SearchIntent:
        return SearchIntent(
            location=self.extract_location(query),
            category=self.extract_category(query),
            max_price=self.extract_max_price(query),
            original_query=query,
        )

    def extract_location(self, query: str) -> str:
        for pattern in self.rules.location_patterns:
            match = pattern.search(query)
            if match:
                return match.group(1).strip()
        return ""

    def extract_category(self, query: str) -> str:
        query_lower = query.lower()
        for keyword, category in self.rules.category_keywords.items():
            if keyword in query_lower:
                return category
        return ""

    def extract_max_price(self, query: str) -> Optional[int]:
        match = self.rules.price_pattern.search(query)
        return int(match.group(1)) if match else None


_default_extractor = IntentExtractor()


def extract_search_intent(query: str) -> SearchIntent:
    return _default_extractor.extract(query)
