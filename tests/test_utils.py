"""Unit tests for wandernow.utils."""

from wandernow.models import Preference
from wandernow.utils import (
    MAX_DAYS,
    format_amount,
    normalize_preferences,
    parse_budget,
    parse_day_count,
    preference_label,
)


def test_parse_day_count_reads_leading_integer():
    assert parse_day_count("3 days") == 3
    assert parse_day_count("  7") == 7
    assert parse_day_count(5) == 5


def test_parse_day_count_clamps_unusable_input_to_zero():
    for value in (None, "", "abc", "-2", -4, True, float("nan")):
        assert parse_day_count(value) == 0


def test_parse_budget_treats_non_positive_as_missing():
    assert parse_budget("15000") == 15000
    assert parse_budget("0") is None
    assert parse_budget("lots") is None
    assert parse_budget(None) is None


def test_normalize_preferences_keeps_order_and_duplicates():
    prefs = normalize_preferences([" Nightlife", "heritage", "nightlife", ""])
    assert prefs == ["nightlife", "heritage", "nightlife"]


def test_normalize_preferences_accepts_enum_members_and_defaults():
    assert normalize_preferences([Preference.ADVENTURE]) == ["adventure"]
    assert normalize_preferences([]) == ["heritage"]
    assert normalize_preferences(None) == ["heritage"]


def test_formatting_helpers():
    assert format_amount(8400) == "8,400"
    assert format_amount(1234567) == "1,234,567"
    assert preference_label("heritage") == "Heritage"


def test_parse_day_count_clamps_to_maximum():
    assert parse_day_count("99999999999999999999") == MAX_DAYS
    assert parse_day_count(MAX_DAYS + 1) == MAX_DAYS
    assert parse_day_count("12", max_days=7) == 7
    assert parse_day_count(MAX_DAYS) == MAX_DAYS
