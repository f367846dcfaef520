"""Itinerary engine: destination matching, activity selection and cost estimation."""

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .data import DESTINATIONS
from .models import (
    DEFAULT_PREFERENCE,
    CostEstimate,
    Destination,
    ItineraryEntry,
    ItineraryResult,
)
from .utils import MAX_DAYS, normalize_preferences, parse_budget, parse_day_count, parse_leading_int


logger = logging.getLogger(__name__)

FREE_EXPLORATION = "Free exploration"
INTEREST_SURCHARGE = Decimal("0.2")


def match_destination(query: str, dataset: Sequence[Destination] = DESTINATIONS) -> Destination:
    if not dataset:
        raise ValueError("Destination dataset is empty.")
    needle = (query or "").strip().lower()
    for dest in dataset:
        if dest.name.lower() == needle:
            logger.debug("Exact match for %r: %s", query, dest.name)
            return dest
    for dest in dataset:
        if needle in dest.name.lower():
            logger.debug("Partial match for %r: %s", query, dest.name)
            return dest
    logger.debug("No match for %r, falling back to %s", query, dataset[0].name)
    return dataset[0]


def select_activities(destination: Destination, preferences: Sequence[str], days: int) -> List[ItineraryEntry]:
    """Assign one activity per day, cycling through the preferences in order.

    Each preference keeps its own cursor into the destination's list for that
    category, so activities only repeat once the list is exhausted. A category
    with no activities yields a free exploration day and leaves the cursors
    untouched.
    """

    prefs = list(preferences) or [DEFAULT_PREFERENCE]
    cursors: Dict[str, int] = {p: 0 for p in prefs}
    plan: List[ItineraryEntry] = []
    for d in range(max(days, 0)):
        pref = prefs[d % len(prefs)]
        activities = destination.activities_for(pref)
        if not activities:
            plan.append(ItineraryEntry(day=d + 1, preference=pref, activity=FREE_EXPLORATION))
            continue
        idx = cursors[pref] % len(activities)
        plan.append(ItineraryEntry(day=d + 1, preference=pref, activity=activities[idx]))
        cursors[pref] += 1
    return plan


def estimate_cost(destination: Destination, preference_count: int, days: int) -> CostEstimate:
    # base cost + 20% for each selected interest, at least one
    multiplier = 1 + INTEREST_SURCHARGE * max(preference_count, 1)
    per_day = int((Decimal(destination.cost_per_day) * multiplier).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return CostEstimate(per_day=per_day, total=per_day * max(days, 0))


def generate_itinerary(
    destination_query: str,
    days: Any,
    preferences: Optional[Iterable[Any]] = None,
    budget: Any = None,
    dataset: Sequence[Destination] = DESTINATIONS,
    max_days: int = MAX_DAYS,
) -> ItineraryResult:
    requested = parse_leading_int(days)
    day_count = parse_day_count(days, max_days)
    if requested is None or requested < 0:
        logger.warning("Unusable day count %r; planning 0 days", days)
    elif requested > max_days:
        logger.warning("Day count %s exceeds the limit; planning %s days", requested, max_days)
    prefs = normalize_preferences(preferences)
    place = match_destination(destination_query, dataset)

    result = ItineraryResult(
        destination=place,
        days=day_count,
        preferences=prefs,
        budget=parse_budget(budget),
    )
    result.entries = select_activities(place, prefs, day_count)
    result.cost = estimate_cost(place, len(prefs), day_count)

    logger.info(
        "Planned %s day(s) in %s for %s at %s/day",
        day_count,
        place.name,
        ", ".join(prefs),
        result.cost.per_day,
    )
    if result.over_budget:
        logger.warning(
            "Estimated total %s exceeds budget %s by %s",
            result.cost.total,
            result.budget,
            result.budget_shortfall,
        )
    return result
