from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

june_report_expenses = (
    [{"date": f"2025-04-{day:02d}", "categoryId": "comida", "amount": 44000} for day in range(1, 11)]
    + [{"date": f"2025-05-{day:02d}", "categoryId": "comida", "amount": 40000} for day in range(1, 11)]
    + [{"date": f"2025-06-{day:02d}", "categoryId": "ocio", "amount": 100000} for day in range(1, 6)]
)


def test_root_and_health():
    assert client.get("/").status_code == 200

    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["pace_config"]["min_active_days"] == 8


def test_evolution_endpoint():
    response = client.post(
        "/api/performance/evolution",
        json={
            "expenses": [
                {"date": "2025-01-05", "categoryId": "comida", "amount": 100},
                {"date": "2025-02-10", "categoryId": "otros", "amount": 200},
                {"date": "bad", "amount": 10},
            ],
            "period": "last_6_months",
            "today": "2025-03-01",
        },
    )
    assert response.status_code == 200
    evolution = response.json()["evolution"]
    assert [p["month_key"] for p in evolution["series"]][-3:] == ["2025-01", "2025-02", "2025-03"]
    assert evolution["headline_comparison"]["delta_amount"] == 100
    assert evolution["headline_comparison"]["delta_pct"] == 100.0


def test_evolution_rejects_unknown_period():
    response = client.post("/api/performance/evolution", json={"expenses": [], "period": "last_3_weeks"})
    assert response.status_code == 422


def test_thirds_endpoint():
    response = client.post(
        "/api/performance/thirds",
        json={"expenses": june_report_expenses, "monthKey": "2025-06"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["metrics"]["pct_t1"] == 1.0
    assert body["ranges"]["T3"] == "21–30 Jun"
    assert body["insight"]["kind"] == "concentrated"


def test_thirds_rejects_malformed_month():
    response = client.post("/api/performance/thirds", json={"expenses": [], "monthKey": "2025-6"})
    assert response.status_code == 400


def test_pace_endpoint():
    response = client.post(
        "/api/performance/pace",
        json={"expenses": june_report_expenses, "selectedMonthKey": "2025-06", "dayLimit": 10},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["days_in_month"] == 30
    assert body["pace"]["baseline_to_day"] == 420000
    assert body["pace"]["status"] == "acelerado"
    assert body["insight"]["headline"] == (
        "Este mes tu gasto está siendo acelerado: 19% por encima de tu referencia de 2 meses."
    )


def test_pace_endpoint_config_overrides():
    response = client.post(
        "/api/performance/pace",
        json={
            "expenses": june_report_expenses,
            "selectedMonthKey": "2025-06",
            "dayLimit": 10,
            "config": {"max_baseline_months": 1},
        },
    )
    assert response.json()["pace"]["baseline_months_used"] == ["2025-05"]

    response = client.post(
        "/api/performance/pace",
        json={
            "expenses": june_report_expenses,
            "selectedMonthKey": "2025-06",
            "dayLimit": 10,
            "config": {"maxBaselineMonths": 1},
        },
    )
    assert response.status_code == 200
    assert response.json()["pace"]["baseline_months_used"] == ["2025-05"]

    response = client.post(
        "/api/performance/pace",
        json={
            "expenses": [],
            "selectedMonthKey": "2025-06",
            "dayLimit": 10,
            "config": {"threshold_contenido": 2.0},
        },
    )
    assert response.status_code == 422


def test_pace_rejects_unknown_config_keys():
    response = client.post(
        "/api/performance/pace",
        json={
            "expenses": june_report_expenses,
            "selectedMonthKey": "2025-06",
            "dayLimit": 10,
            "config": {"maxMonths": 1},
        },
    )
    assert response.status_code == 422


def test_pace_rejects_malformed_month():
    response = client.post(
        "/api/performance/pace",
        json={"expenses": [], "selectedMonthKey": "2025-13", "dayLimit": 10},
    )
    assert response.status_code == 400


def test_bundle_endpoint():
    response = client.post(
        "/api/performance/bundle",
        json={"expenses": june_report_expenses, "today": "2025-06-10", "period": "previous_month"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["selected_month_key"] == "2025-05"
    assert body["pace"]["confidence"] == "preliminar"
    assert set(body["insights"]) == {"evolution", "thirds", "pace", "summary"}


def test_month_insight_endpoint():
    response = client.post(
        "/api/insights/month",
        json={
            "expenses": [
                {"date": "2026-02-03", "categoryId": "comida", "amount": 50000},
                {"date": "2026-02-05", "categoryId": "transporte", "amount": 30000},
            ],
            "today": "2026-02-21",
            "currency": "COP",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "summary"
    assert body["confidence"] == "medium"
    assert body["message"].startswith("A hoy 21 Feb: $ 80.000")
