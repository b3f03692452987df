"""Static provider catalog.

The catalog is loaded once per process and never mutated; search results are
built from copies of these records.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Iterable, Optional, Tuple

from neptune_search.models import ServiceProvider

logger = logging.getLogger(__name__)

PROVIDER_RECORDS: Tuple[Dict[str, Any], ...] = (
    {
        "id": "1",
        "name": "Austin Pro Plumbing",
        "category": "plumber",
        "location": "Austin, TX",
        "rating": 4.8,
        "reviewCount": 342,
        "priceRange": "$75-120/hr",
        "phone": "(512) 555-0123",
        "website": "https://austinproplumbing.com",
        "services": ["Emergency Repairs", "Drain Cleaning", "Water Heater Installation", "Pipe Repair"],
        "availability": "24/7 emergency service",
        "description": "Licensed plumbers serving Austin for over 15 years with upfront pricing.",
        "specialties": ["emergency", "water heater", "leak detection"],
    },
    {
        "id": "2",
        "name": "Lone Star Drain & Pipe",
        "category": "plumber",
        "location": "Austin, TX",
        "rating": 4.6,
        "reviewCount": 189,
        "priceRange": "$45-65/hr",
        "phone": "(512) 555-0456",
        "services": ["Drain Cleaning", "Sewer Line Repair", "Fixture Installation"],
        "availability": "Same-day appointments",
        "description": "Family-owned plumbing crew focused on affordable drain and sewer work.",
        "specialties": ["drain", "sewer", "affordable"],
    },
    {
        "id": "3",
        "name": "Bay Area Plumbing Co.",
        "category": "plumber",
        "location": "San Francisco, CA",
        "rating": 4.7,
        "reviewCount": 521,
        "priceRange": "$90-150/hr",
        "phone": "(415) 555-0147",
        "website": "https://bayareaplumbingco.com",
        "services": ["Repiping", "Water Heater Repair", "Gas Line Service", "Drain Cleaning"],
        "availability": "Next-day service",
        "description": "Residential and commercial plumbing across San Francisco.",
        "specialties": ["repiping", "gas line", "older homes"],
    },
    {
        "id": "4",
        "name": "Windy City Plumbers",
        "category": "plumber",
        "location": "Chicago, IL",
        "rating": 4.4,
        "reviewCount": 98,
        "priceRange": "$60-95/hr",
        "phone": "(312) 555-0199",
        "services": ["Frozen Pipe Repair", "Sump Pump Installation", "Drain Cleaning"],
        "availability": "Same-day service available",
        "description": "Chicago plumbers who know winter pipes.",
        "specialties": ["frozen pipes", "sump pump", "basement"],
    },
    {
        "id": "5",
        "name": "FixIt Appliance Repair",
        "category": "appliance-repair",
        "location": "Austin, TX",
        "rating": 4.5,
        "reviewCount": 267,
        "priceRange": "$80-110/visit",
        "phone": "(512) 555-0789",
        "website": "https://fixitappliance.com",
        "services": ["Dishwasher Repair", "Refrigerator Repair", "Washer Repair", "Dryer Repair"],
        "availability": "Same-day service",
        "description": "Factory-trained technicians for all major appliance brands.",
        "specialties": ["dishwasher", "refrigerator", "warranty"],
    },
    {
        "id": "6",
        "name": "Golden Gate Appliance Service",
        "category": "appliance-repair",
        "location": "San Francisco, CA",
        "rating": 4.3,
        "reviewCount": 143,
        "priceRange": "$95-140/visit",
        "phone": "(415) 555-0321",
        "services": ["Dishwasher Repair", "Oven Repair", "Refrigerator Repair"],
        "availability": "Next-day appointments",
        "description": "Repairs for high-end kitchen appliances in the Bay Area.",
        "specialties": ["high-end", "oven", "dishwasher"],
    },
    {
        "id": "7",
        "name": "Miami Appliance Doctors",
        "category": "appliance-repair",
        "location": "Miami, FL",
        "rating": 4.1,
        "reviewCount": 76,
        "priceRange": "$50-90/visit",
        "phone": "(305) 555-0134",
        "services": ["Washer Repair", "Dryer Repair", "Ice Maker Repair"],
        "availability": "Weekday appointments",
        "description": "Budget-friendly appliance repair across Miami-Dade.",
        "specialties": ["ice maker", "laundry", "budget"],
    },
    {
        "id": "8",
        "name": "Bright Spark Electric",
        "category": "electrician",
        "location": "Denver, CO",
        "rating": 4.9,
        "reviewCount": 412,
        "priceRange": "$85-130/hr",
        "phone": "(303) 555-0166",
        "website": "https://brightsparkelectric.com",
        "services": ["Panel Upgrades", "EV Charger Installation", "Lighting Installation", "Wiring Repair"],
        "availability": "24/7 emergency electricians",
        "description": "Master electricians serving the Denver metro area.",
        "specialties": ["ev charger", "panel upgrade", "emergency"],
    },
    {
        "id": "9",
        "name": "Capital City Electricians",
        "category": "electrician",
        "location": "Austin, TX",
        "rating": 4.5,
        "reviewCount": 230,
        "priceRange": "$65-100/hr",
        "phone": "(512) 555-0177",
        "services": ["Outlet Installation", "Ceiling Fan Installation", "Wiring Repair"],
        "availability": "Next-day scheduling",
        "description": "Residential electrical work with a one-year workmanship guarantee.",
        "specialties": ["ceiling fan", "outlet", "smart home"],
    },
    {
        "id": "10",
        "name": "Emerald City Electric",
        "category": "electrician",
        "location": "Seattle, WA",
        "rating": 4.6,
        "reviewCount": 158,
        "priceRange": "$95-145/hr",
        "phone": "(206) 555-0112",
        "services": ["Solar Panel Wiring", "Panel Upgrades", "Generator Installation"],
        "availability": "Same-day service for urgent jobs",
        "description": "Seattle electricians specialising in solar and backup power.",
        "specialties": ["solar", "generator", "panel upgrade"],
    },
    {
        "id": "11",
        "name": "Paws & Claws Veterinary Clinic",
        "category": "veterinarian",
        "location": "Seattle, WA",
        "rating": 4.9,
        "reviewCount": 634,
        "priceRange": "$60-120/visit",
        "phone": "(206) 555-0188",
        "website": "https://pawsandclawsvet.com",
        "services": ["Wellness Exams", "Vaccinations", "Dental Care", "Surgery"],
        "availability": "24/7 emergency care",
        "description": "Full-service animal hospital with an overnight emergency team.",
        "specialties": ["emergency", "surgery", "exotic pets"],
    },
    {
        "id": "12",
        "name": "Hill Country Animal Hospital",
        "category": "veterinarian",
        "location": "Austin, TX",
        "rating": 4.7,
        "reviewCount": 298,
        "priceRange": "$75-140/visit",
        "phone": "(512) 555-0155",
        "services": ["Wellness Exams", "Vaccinations", "Spay and Neuter"],
        "availability": "Same-day sick visits",
        "description": "Compassionate care for dogs and cats in central Austin.",
        "specialties": ["dogs", "cats", "senior pets"],
    },
    {
        "id": "13",
        "name": "Sunshine Pet Vets",
        "category": "veterinarian",
        "location": "Miami, FL",
        "rating": 4.2,
        "reviewCount": 87,
        "priceRange": "$45-85/visit",
        "phone": "(305) 555-0144",
        "services": ["Vaccinations", "Microchipping", "Wellness Exams"],
        "availability": "Weekday appointments",
        "description": "Affordable preventive care for Miami pets.",
        "specialties": ["vaccinations", "affordable", "microchip"],
    },
    {
        "id": "14",
        "name": "Mile High Heating & Cooling",
        "category": "hvac",
        "location": "Denver, CO",
        "rating": 4.6,
        "reviewCount": 376,
        "priceRange": "$90-160/visit",
        "phone": "(303) 555-0191",
        "website": "https://milehighhvac.com",
        "services": ["Furnace Repair", "AC Installation", "Duct Cleaning", "Heat Pump Service"],
        "availability": "24/7 emergency heating repair",
        "description": "Heating and cooling specialists for Colorado winters.",
        "specialties": ["furnace", "heat pump", "emergency"],
    },
    {
        "id": "15",
        "name": "Cool Breeze HVAC",
        "category": "hvac",
        "location": "Miami, FL",
        "rating": 4.4,
        "reviewCount": 211,
        "priceRange": "$75-125/visit",
        "phone": "(305) 555-0162",
        "services": ["AC Repair", "AC Installation", "Duct Cleaning"],
        "availability": "Same-day AC repair",
        "description": "Keeping Miami homes cool since 2005.",
        "specialties": ["ac repair", "humidity control", "duct cleaning"],
    },
    {
        "id": "16",
        "name": "Lakeshore Climate Control",
        "category": "hvac",
        "location": "Chicago, IL",
        "rating": 4.3,
        "reviewCount": 129,
        "priceRange": "$120-180/visit",
        "phone": "(312) 555-0173",
        "services": ["Boiler Repair", "Furnace Repair", "Thermostat Installation"],
        "availability": "Next-day service",
        "description": "Boiler and furnace experts for Chicago homes and condos.",
        "specialties": ["boiler", "radiant heat", "thermostat"],
    },
    {
        "id": "17",
        "name": "Pampered Paws Grooming",
        "category": "pet-grooming",
        "location": "Los Angeles, CA",
        "rating": 4.8,
        "reviewCount": 445,
        "priceRange": "$50-95/session",
        "phone": "(213) 555-0128",
        "website": "https://pamperedpawsla.com",
        "services": ["Full Grooming", "Bath and Brush", "Nail Trimming", "Teeth Cleaning"],
        "availability": "Same-day openings",
        "description": "Fear-free grooming salon for dogs and cats.",
        "specialties": ["anxious pets", "doodles", "cats"],
    },
    {
        "id": "18",
        "name": "Sudsy Pup Mobile Grooming",
        "category": "pet-grooming",
        "location": "New York, NY",
        "rating": 4.5,
        "reviewCount": 162,
        "priceRange": "$80-130/session",
        "phone": "(212) 555-0109",
        "services": ["Mobile Grooming", "Bath and Brush", "De-shedding"],
        "availability": "Next-day appointments",
        "description": "Grooming van that comes to your door anywhere in Manhattan.",
        "specialties": ["mobile", "de-shedding", "large breeds"],
    },
)


def _to_provider(record: Dict[str, Any]) -> ServiceProvider:
    return ServiceProvider(
        id=str(record["id"]),
        name=record["name"],
        category=record["category"],
        location=record["location"],
        rating=float(record["rating"]),
        review_count=int(record["reviewCount"]),
        price_range=record["priceRange"],
        availability=record["availability"],
        description=record.get("description", ""),
        services=tuple(record.get("services", ())),
        specialties=tuple(record.get("specialties", ())),
        phone=record.get("phone", ""),
        website=record.get("website") or None,
    )


def load_catalog(records: Optional[Iterable[Dict[str, Any]]] = None) -> Tuple[ServiceProvider, ...]:
    """Validate raw records and return them as an immutable provider tuple.

    Raises ValueError for records with unknown categories, out-of-range
    ratings or duplicate ids.
    """
    providers = tuple(_to_provider(record) for record in (PROVIDER_RECORDS if records is None else records))
    ids = [provider.id for provider in providers]
    if len(ids) != len(set(ids)):
        raise ValueError("Provider ids must be unique")
    logger.debug("Loaded %d providers into the catalog", len(providers))
    return providers


@lru_cache(maxsize=1)
def get_catalog() -> Tuple[ServiceProvider, ...]:
    return load_catalog()
