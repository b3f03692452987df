"""Core data models shared by the search engine, summary and HTTP layers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

SERVICE_CATEGORIES: Tuple[str, ...] = (
    "plumber",
    "electrician",
    "veterinarian",
    "hvac",
    "appliance-repair",
    "pet-grooming",
)


@dataclass(frozen=True, slots=True)
class ServiceProvider:
    """Catalog entry for a local service business."""

    id: str
    name: str
    category: str
    location: str
    rating: float
    review_count: int
    price_range: str
    availability: str
    description: str = ""
    services: Tuple[str, ...] = ()
    specialties: Tuple[str, ...] = ()
    phone: str = ""
    website: Optional[str] = None
    neptune_score: float = 0.0

    def __post_init__(self) -> None:
        if self.category not in SERVICE_CATEGORIES:
            raise ValueError(f"Unknown category {self.category!r} for provider {self.id}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"rating must be within [0, 5], got {self.rating} for provider {self.id}")
        if self.review_count < 0:
            raise ValueError(f"review_count must be non-negative for provider {self.id}")

    @property
    def city(self) -> str:
        """Lowercased first comma segment of the location ("austin" for "Austin, TX")."""
        return self.location.lower().split(",")[0]

    def with_score(self, score: float) -> "ServiceProvider":
        return replace(self, neptune_score=score)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "location": self.location,
            "rating": self.rating,
            "reviewCount": self.review_count,
            "priceRange": self.price_range,
            "phone": self.phone,
            "services": list(self.services),
            "availability": self.availability,
            "neptuneScore": self.neptune_score,
            "description": self.description,
            "specialties": list(self.specialties),
        }
        if self.website:
            payload["website"] = self.website
        return payload


@dataclass(frozen=True, slots=True)
class SearchIntent:
    """Structured reading of a free-text query."""

    location: str
    category: str
    max_price: Optional[int]
    original_query: str


@dataclass(slots=True)
class SearchResponse:
    query: str
    providers: List[ServiceProvider] = field(default_factory=list)
    summary: str = ""
    location: str = ""
    category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "providers": [provider.to_dict() for provider in self.providers],
            "summary": self.summary,
            "query": self.query,
            "location": self.location,
            "category": self.category,
        }
