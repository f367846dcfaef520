"""FastAPI application exposing the itinerary generator."""

from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .config import get_settings
from .data import DESTINATIONS
from .engine import generate_itinerary
from .models import Preference, itinerary_to_dict
from .render import render_form_page


settings = get_settings()

app = FastAPI(title=settings.app_title, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ItineraryPayload(BaseModel):
    destination: str = ""
    days: Union[int, str, None] = 0
    budget: Union[int, str, None] = None
    preferences: List[Preference] = Field(default_factory=list)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/destinations")
def list_destinations() -> List[Dict[str, Any]]:
    return [{"name": d.name, "cost_per_day": d.cost_per_day} for d in DESTINATIONS]


@app.post("/itinerary")
def create_itinerary(payload: ItineraryPayload) -> Dict[str, Any]:
    try:
        result = generate_itinerary(
            payload.destination,
            payload.days,
            [p.value for p in payload.preferences],
            budget=payload.budget,
            max_days=settings.max_days,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return itinerary_to_dict(result)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return render_form_page(settings)


@app.get("/plan", response_class=HTMLResponse)
def plan_page(
    dest: str = "",
    days: str = "",
    budget: str = "",
    pref: Optional[List[str]] = Query(default=None),
) -> str:
    selected = pref or []
    try:
        result = generate_itinerary(dest, days, selected, budget=budget, max_days=settings.max_days)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return render_form_page(settings, result, dest=dest, days=days, budget=budget, selected=selected)
