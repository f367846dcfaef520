"""Simple CLI entry to exercise the itinerary generator."""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from wandernow import generate_itinerary, itinerary_to_dict
from wandernow.config import get_settings
from wandernow.data import DESTINATIONS
from wandernow.models import Preference
from wandernow.render import render_itinerary_html, render_itinerary_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a day-by-day itinerary from mock destination data.")
    parser.add_argument("destination", nargs="?", default="", help="Destination name or part of it")
    parser.add_argument("--days", default="3", help="Number of days to plan")
    parser.add_argument("--budget", help="Optional trip budget; a warning is shown when the estimate exceeds it")
    parser.add_argument(
        "--pref",
        action="append",
        choices=[p.value for p in Preference],
        help="Preference tag; repeat to cycle through several",
    )
    parser.add_argument("--format", choices=["text", "json", "html"], default="text", help="Output format")
    parser.add_argument("--output", type=Path, help="Optional path to save the rendering")
    parser.add_argument("--list", action="store_true", help="List known destinations and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.list:
        for dest in DESTINATIONS:
            print(f"{dest.name} ({settings.currency_symbol}{dest.cost_per_day:,} per day)")
        return

    result = generate_itinerary(
        args.destination, args.days, args.pref, budget=args.budget, max_days=settings.max_days
    )
    if args.format == "json":
        rendered = json.dumps(itinerary_to_dict(result), indent=2, ensure_ascii=False)
    elif args.format == "html":
        rendered = render_itinerary_html(result, settings)
    else:
        rendered = render_itinerary_text(result, settings)

    if args.output:
        args.output.write_text(rendered, encoding="utf-8")
        print(f"Itinerary saved to {args.output}")
    else:
        print(rendered)


if __name__ == "__main__":
    main()
