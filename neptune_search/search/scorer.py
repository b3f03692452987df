"""Neptune Score: composite 0-10 quality/relevance score for a provider.

The score is a weighted sum of five independent sub-scores:

- rating (30%): the 0-5 star rating rescaled to 0-10;
- review volume (20%): log10 of the review count, capped at 10;
- availability (25%): response-time tier read from the availability text;
- price (15%): bracket lookup on the free-text price range;
- specialization (10%): specialty/service keywords found in the query.

Weights, tiers and brackets are product rules; changing any of them changes
ranking output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from neptune_search.models import ServiceProvider

BASELINE_SCORE = 5.0


@dataclass(frozen=True)
class ScoringWeights:
    rating: float = 0.30
    reviews: float = 0.20
    availability: float = 0.25
    price: float = 0.15
    specialization: float = 0.10

    def __post_init__(self) -> None:
        if not math.isclose(self.total(), 1.0):
            raise ValueError(f"Scoring weights must sum to 1.0, got {self.total()}")

    def total(self) -> float:
        return self.rating + self.reviews + self.availability + self.price + self.specialization


@dataclass(frozen=True)
class PriceBracket:
    markers: Tuple[str, ...]
    score: float


# Checked top to bottom against the lowercased price range.
PRICE_BRACKETS: Tuple[PriceBracket, ...] = (
    PriceBracket(("$40-", "$45-", "$50-"), 9.0),
    PriceBracket(("$60-", "$65-"), 8.0),
    PriceBracket(("$75-", "$80-"), 7.0),
    PriceBracket(("$90-", "$95-"), 6.0),
)

# (keywords, score), highest tier first. Matching is case-sensitive.
AVAILABILITY_TIERS: Tuple[Tuple[Tuple[str, ...], float], ...] = (
    (("24/7", "emergency"), 10.0),
    (("same-day", "Same-day"), 8.5),
    (("next-day", "Next-day"), 7.0),
)


def _round_half_up(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


class NeptuneScorer:
    def __init__(
        self,
        weights: ScoringWeights = ScoringWeights(),
        price_brackets: Tuple[PriceBracket, ...] = PRICE_BRACKETS,
        availability_tiers: Tuple[Tuple[Tuple[str, ...], float], ...] = AVAILABILITY_TIERS,
    ) -> None:
        self.weights = weights
        self.price_brackets = price_brackets
        self.availability_tiers = availability_tiers

    def rating_score(self, provider: ServiceProvider) -> float:
        return (provider.rating / 5) * 10

    def review_score(self, provider: ServiceProvider) -> float:
        return min(math.log10(provider.review_count + 1) * 2.5, 10.0)

    def availability_score(self, provider: ServiceProvider) -> float:
        for keywords, score in self.availability_tiers:
            if any(keyword in provider.availability for keyword in keywords):
                return score
        return BASELINE_SCORE

    def price_score(self, provider: ServiceProvider) -> float:
        price_range = provider.price_range.lower()
        for bracket in self.price_brackets:
            if any(marker in price_range for marker in bracket.markers):
                return bracket.score
        return BASELINE_SCORE

    def specialization_score(
        self, provider: ServiceProvider, query: Optional[str] = None, category: Optional[str] = None
    ) -> float:
        if not query or not category:
            return BASELINE_SCORE
        query_lower = query.lower()
        if any(specialty.lower() in query_lower for specialty in provider.specialties):
            return 9.0
        if any(service.lower() in query_lower for service in provider.services):
            return 7.0
        return BASELINE_SCORE

    def score_breakdown(
        self, provider: ServiceProvider, query: Optional[str] = None, category: Optional[str] = None
    ) -> Dict[str, float]:
        """Raw (unweighted) sub-scores keyed by factor name."""
        return {
            "rating": self.rating_score(provider),
            "reviews": self.review_score(provider),
            "availability": self.availability_score(provider),
            "price": self.price_score(provider),
            "specialization": self.specialization_score(provider, query, category),
        }

    def score(self, provider: ServiceProvider, query: Optional[str] = None, category: Optional[str] = None) -> float:
        breakdown = self.score_breakdown(provider, query, category)
        total = sum(value * getattr(self.weights, factor) for factor, value in breakdown.items())
        return min(max(_round_half_up(total), 0.0), 10.0)


_default_scorer = NeptuneScorer()


def calculate_neptune_score(
    provider: ServiceProvider, query: Optional[str] = None, category: Optional[str] = None
) -> float:
    return _default_scorer.score(provider, query, category)
