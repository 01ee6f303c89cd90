from datetime import date

from spending_analytics.records import ExpenseRecord, parse_expense_record, parse_expense_records


def test_parse_keeps_valid_records_and_aliases():
    records = parse_expense_records(
        [
            {"date": "2025-11-01", "categoryId": "comida", "amount": 250},
            {"date": "2025-11-02", "category_id": "hogar", "amount": "12.5", "currency": "COP"},
        ]
    )
    assert [r.category_id for r in records] == ["comida", "hogar"]
    assert records[1].amount == 12.5
    assert records[1].currency == "COP"
    assert records[0].month_key == "2025-11"
    assert records[0].day == 1


def test_parse_drops_invalid_records_silently():
    raw = [
        {"category_id": "comida", "amount": 10},
        {"date": "2025-13-01", "amount": 10},
        {"date": "not-a-date", "amount": 10},
        {"date": "2025-11-01", "amount": float("nan")},
        {"date": "2025-11-01", "amount": float("inf")},
        {"date": "2025-11-01", "amount": -5},
        {"date": "2025-11-01", "amount": None},
        {"date": "2025-11-01", "amount": True},
        {"date": "2025-11-01", "amount": False},
        "garbage",
        {"date": "2025-11-03", "amount": 7},
    ]
    records = parse_expense_records(raw)
    assert len(records) == 1
    assert records[0].date == "2025-11-03"


def test_parse_accepts_dates_and_timestamps():
    assert parse_expense_record({"date": date(2025, 1, 5), "amount": 1}).date == "2025-01-05"
    assert parse_expense_record({"date": "2025-11-01T12:00:00Z", "amount": 1}).date == "2025-11-01"


def test_missing_category_defaults_to_otros():
    assert parse_expense_record({"date": "2025-01-05", "amount": 1}).category_id == "otros"
    assert parse_expense_record({"date": "2025-01-05", "amount": 1, "categoryId": None}).category_id == "otros"


def test_parsed_records_pass_through_unchanged():
    record = ExpenseRecord(date="2025-01-05", category_id="ocio", amount=3.0)
    assert parse_expense_records([record])[0] is record


def test_empty_input():
    assert parse_expense_records(None) == []
    assert parse_expense_records([]) == []
