"""WanderNow itinerary generator."""

from .engine import estimate_cost, generate_itinerary, match_destination, select_activities
from .models import CostEstimate, Destination, ItineraryEntry, ItineraryResult, Preference, itinerary_to_dict

__all__ = [
    "CostEstimate",
    "Destination",
    "ItineraryEntry",
    "ItineraryResult",
    "Preference",
    "estimate_cost",
    "generate_itinerary",
    "itinerary_to_dict",
    "match_destination",
    "select_activities",
]
