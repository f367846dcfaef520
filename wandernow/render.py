"""HTML and plain-text renderings of a generated itinerary."""

from __future__ import annotations

from html import escape
from typing import List, Optional

from .config import Settings, get_settings
from .data import DESTINATIONS
from .models import ItineraryResult, Preference
from .utils import format_amount, preference_label

DISCLAIMER = (
    "This is a rough estimate using mock data. In a production system, costs would be fetched "
    "from live APIs (flights, hotels, experiences) and optimized using AI."
)

PAGE_CSS = """
body { font-family: system-ui, sans-serif; margin: 0 auto; max-width: 760px; padding: 1.5rem; color: #222; }
form { display: grid; gap: 0.75rem; margin-bottom: 2rem; }
label { font-weight: 600; }
.prefs label { font-weight: normal; margin-right: 1rem; }
.itinerary-day { border-left: 4px solid #2a7ae2; padding: 0.25rem 1rem; margin: 0.75rem 0; }
.budget-warning { color: #b00020; }
.cost-breakdown { font-size: 0.85rem; color: #666; }
"""


def _money(amount: int, settings: Settings) -> str:
    return f"{escape(settings.currency_symbol)}{format_amount(amount)}"


def render_itinerary_html(result: ItineraryResult, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    cost = result.cost
    parts: List[str] = [f"<h2>Suggested itinerary for {escape(result.destination.name)}</h2>"]
    parts.append(
        f"<p>Estimated total cost: <strong>{_money(cost.total, settings)}</strong> "
        f"({_money(cost.per_day, settings)} per day)</p>"
    )
    if result.over_budget:
        parts.append(
            f'<p class="budget-warning">This plan exceeds your budget of {_money(result.budget, settings)} '
            f"by {_money(result.budget_shortfall, settings)}.</p>"
        )
    parts.append('<div class="itinerary">')
    for entry in result.entries:
        parts.append(
            '<div class="itinerary-day">'
            f"<h3>Day {entry.day}: {escape(preference_label(entry.preference))}</h3>"
            f"<p>{escape(entry.activity)}</p>"
            "</div>"
        )
    parts.append("</div>")
    parts.append(f'<div class="cost-breakdown"><p>{escape(DISCLAIMER)}</p></div>')
    return "\n".join(parts)


def render_form_page(
    settings: Optional[Settings] = None,
    result: Optional[ItineraryResult] = None,
    dest: str = "",
    days: str = "3",
    budget: str = "",
    selected: Optional[List[str]] = None,
) -> str:
    """Full page with the planner form, and the itinerary below it when one was generated."""

    settings = settings or get_settings()
    chosen = set(selected or [])
    checkboxes = "\n".join(
        f'<label><input type="checkbox" name="pref" value="{p.value}"'
        f'{" checked" if p.value in chosen else ""}> {preference_label(p.value)}</label>'
        for p in Preference
    )
    options = "\n".join(f'<option value="{escape(d.name)}">' for d in DESTINATIONS)
    output = ""
    if result is not None:
        output = f'<section id="output">\n{render_itinerary_html(result, settings)}\n</section>'
    title = escape(settings.app_title)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{PAGE_CSS}</style>
</head>
<body>
<h1>{title}</h1>
<form method="get" action="/plan">
<label for="dest">Destination</label>
<input id="dest" name="dest" list="destinations" value="{escape(dest)}" placeholder="e.g. Jaipur">
<datalist id="destinations">
{options}
</datalist>
<label for="days">Number of days</label>
<input id="days" name="days" type="number" min="0" value="{escape(days)}">
<label for="budget">Budget ({escape(settings.currency_symbol)})</label>
<input id="budget" name="budget" type="number" min="0" value="{escape(budget)}">
<div class="prefs">
{checkboxes}
</div>
<button type="submit" id="generateBtn">Generate itinerary</button>
</form>
{output}
</body>
</html>
"""


def render_itinerary_text(result: ItineraryResult, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    cost = result.cost
    symbol = settings.currency_symbol
    lines = [
        f"Suggested itinerary for {result.destination.name}",
        f"Estimated total cost: {symbol}{format_amount(cost.total)} ({symbol}{format_amount(cost.per_day)} per day)",
    ]
    if result.over_budget:
        lines.append(
            f"Warning: exceeds your budget of {symbol}{format_amount(result.budget)} "
            f"by {symbol}{format_amount(result.budget_shortfall)}"
        )
    lines.append("")
    for entry in result.entries:
        lines.append(f"Day {entry.day}: {preference_label(entry.preference)} - {entry.activity}")
    if not result.entries:
        lines.append("No days planned.")
    lines.append("")
    lines.append(DISCLAIMER)
    return "\n".join(lines)
