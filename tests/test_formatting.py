from spending_analytics.categories import category_label
from spending_analytics.formatting import format_money, format_pct_short, round_half_up


def test_money_zero_decimal_currency():
    assert format_money(120000, "COP", "es-CO") == "$ 120.000"
    assert format_money(120000, "cop", "en") == "$120,000"


def test_money_two_decimals():
    assert format_money(1234.5, "EUR", "en") == "€1,234.50"
    assert format_money(1234.5, "EUR", "es-ES") == "1.234,50 €"
    assert format_money(99.999, "USD", "en-US") == "$100.00"


def test_money_unknown_currency_and_bad_values():
    assert format_money(10, "XYZ", "es") == "10,00 XYZ"
    assert format_money(float("nan"), "COP", "es") == "$ 0"
    assert format_money(5000, None, None) == "$ 5.000"


def test_short_percentages():
    assert format_pct_short(40.0) == "40%"
    assert format_pct_short(41.66, "es") == "41,7%"
    assert format_pct_short(41.66, "en") == "41.7%"


def test_round_half_up():
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(2.5) == 3
    assert round_half_up(54.55, 1) == 54.6
    assert round_half_up(-9.0909, 1) == -9.1


def test_category_labels():
    assert category_label("personales") == "Artículos personales"
    assert category_label("mercado", "en") == "Groceries"
    assert category_label("custom-cat") == "custom-cat"
