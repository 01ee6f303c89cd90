from datetime import date

from spending_analytics.dates import (
    day_from_date_str,
    day_month_label,
    days_in_month,
    is_valid_month_key,
    language_code,
    last_n_month_keys,
    month_end,
    month_key_from_date,
    month_key_from_date_str,
    month_keys_between,
    month_label,
    month_start,
    shift_month_key,
    year_to_date_month_keys,
)


def test_month_key_from_date_string_and_date():
    assert month_key_from_date_str("2025-12-31") == "2025-12"
    assert month_key_from_date(date(2026, 1, 5)) == "2026-01"


def test_month_key_rejects_malformed_input():
    assert month_key_from_date_str(None) is None
    assert month_key_from_date_str("2025") is None
    assert month_key_from_date_str("2025-13-01") is None
    assert month_key_from_date_str("25-12-01") is None
    assert not is_valid_month_key("2025-1")
    assert not is_valid_month_key("2025-00")


def test_day_extraction_one_and_zero_based():
    assert day_from_date_str("2025-12-03") == 3
    assert day_from_date_str("2025-12-03", zero_based=True) == 2
    assert day_from_date_str("2025-12-32") is None
    assert day_from_date_str("2025-12-xx") is None
    assert day_from_date_str("2025-12") is None


def test_days_in_month_handles_leap_years():
    assert days_in_month("2024-02") == 29
    assert days_in_month("2025-02") == 28
    assert days_in_month("2025-04") == 30
    assert days_in_month("2025-13") is None


def test_month_bounds():
    assert month_start("2025-02") == "2025-02-01"
    assert month_end("2025-02") == "2025-02-28"
    assert month_end("bad") is None


def test_shift_month_key_crosses_year_boundaries():
    assert shift_month_key("2026-01", -1) == "2025-12"
    assert shift_month_key("2026-01", -3) == "2025-10"
    assert shift_month_key("2025-11", 3) == "2026-02"
    assert shift_month_key("2025-11", 0) == "2025-11"
    assert shift_month_key("nope", 1) is None


def test_month_ranges():
    assert month_keys_between("2025-10", "2026-01") == ["2025-10", "2025-11", "2025-12", "2026-01"]
    assert month_keys_between("2026-01", "2025-10") == []
    assert last_n_month_keys("2026-01", 3) == ["2025-11", "2025-12", "2026-01"]
    assert last_n_month_keys("2026-01", 0) == []
    assert year_to_date_month_keys("2026-01") == ["2026-01"]
    assert year_to_date_month_keys("2026-04") == ["2026-01", "2026-02", "2026-03", "2026-04"]


def test_labels_follow_language():
    assert month_label("2026-01") == "Ene 2026"
    assert month_label("2026-01", "en-US") == "Jan 2026"
    assert month_label("2026-1") is None
    assert day_month_label("2026-02-13", "es-CO") == "13 Feb"
    assert day_month_label("2026-12-01", "es") == "01 Dic"


def test_language_code_falls_back_to_spanish():
    assert language_code("en_GB") == "en"
    assert language_code("fr-FR") == "es"
    assert language_code(None) == "es"
