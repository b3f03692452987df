import sys
from pathlib import Path

import pytest

# Ensure `neptune_search` is importable when running pytest from the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from neptune_search.models import ServiceProvider  # noqa: E402


def make_provider(**overrides):
    fields = {
        "id": "p1",
        "name": "Test Plumbing",
        "category": "plumber",
        "location": "Austin, TX",
        "rating": 4.0,
        "review_count": 0,
        "price_range": "$200-300/hr",
        "availability": "Weekdays",
        "services": ("Drain Cleaning",),
        "specialties": ("leak detection",),
    }
    fields.update(overrides)
    return ServiceProvider(**fields)


@pytest.fixture
def provider_factory():
    return make_provider
