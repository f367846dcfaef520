"""Mock destination dataset used by the itinerary engine."""

from __future__ import annotations

from typing import Tuple

from .models import Destination


DESTINATIONS: Tuple[Destination, ...] = (
    Destination(
        name="Delhi",
        heritage=("Visit Red Fort", "Explore Qutub Minar", "Stroll in Humayun's Tomb"),
        nightlife=("Dine at Connaught Place", "Night bazaar at Chandni Chowk"),
        adventure=("Hot air balloon ride (Delhi NCR)", "Kayaking at Yamuna"),
        cost_per_day=2_500,
        base_days=2,
    ),
    Destination(
        name="Jaipur",
        heritage=("Tour the City Palace", "Admire Hawa Mahal", "Visit Amer Fort"),
        nightlife=("Evening at Chokhi Dhani", "Lively markets of Johari Bazaar"),
        adventure=("Camel safari", "Elephant ride at Amer"),
        cost_per_day=2_000,
        base_days=2,
    ),
    Destination(
        name="Goa",
        heritage=("Old Goa churches tour", "Portuguese heritage walk"),
        nightlife=("Beach club party", "Night market at Arpora"),
        adventure=("Water sports at Baga", "Dudhsagar waterfall trek"),
        cost_per_day=3_500,
        base_days=3,
    ),
    Destination(
        name="Kerala",
        heritage=("Fort Kochi heritage walk", "Kathakali performance"),
        nightlife=("Houseboat stay with music", "Local food tour in Kochi"),
        adventure=("Periyar jungle safari", "Munnar hiking trails"),
        cost_per_day=3_000,
        base_days=3,
    ),
)
