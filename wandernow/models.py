"""Core data models for the itinerary generator."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Preference(str, Enum):
    HERITAGE = "heritage"
    NIGHTLIFE = "nightlife"
    ADVENTURE = "adventure"


DEFAULT_PREFERENCE = Preference.HERITAGE.value


@dataclass(frozen=True)
class Destination:
    name: str
    heritage: Tuple[str, ...] = ()
    nightlife: Tuple[str, ...] = ()
    adventure: Tuple[str, ...] = ()
    cost_per_day: int = 0
    base_days: int = 0

    def activities_for(self, preference: str) -> Tuple[str, ...]:
        """Activities listed under a preference tag, empty for unknown tags."""

        if preference not in {p.value for p in Preference}:
            return ()
        return getattr(self, preference)


@dataclass
class ItineraryEntry:
    day: int
    preference: str
    activity: str


@dataclass
class CostEstimate:
    per_day: int
    total: int


@dataclass
class ItineraryResult:
    destination: Destination
    days: int
    preferences: List[str]
    entries: List[ItineraryEntry] = field(default_factory=list)
    cost: Optional[CostEstimate] = None
    budget: Optional[int] = None

    @property
    def over_budget(self) -> bool:
        if self.budget is None or self.cost is None:
            return False
        return self.cost.total > self.budget

    @property
    def budget_shortfall(self) -> int:
        if not self.over_budget:
            return 0
        return self.cost.total - self.budget


def itinerary_to_dict(result: ItineraryResult) -> Dict[str, Any]:
    """Convenience helper for serializing itineraries in APIs."""

    cost = result.cost or CostEstimate(per_day=0, total=0)
    return {
        "destination": result.destination.name,
        "days": result.days,
        "preferences": list(result.preferences),
        "cost_per_day": cost.per_day,
        "total_cost": cost.total,
        "budget": result.budget,
        "over_budget": result.over_budget,
        "budget_shortfall": result.budget_shortfall,
        "itinerary": [asdict(entry) for entry in result.entries],
    }
