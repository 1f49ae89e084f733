"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def forecast_body():
    """Retainer-only request: one active private contract of 3000"""
    return {
        "ledger": [],
        "contracts": [{"client_type": "private", "is_active": True, "retainer_fee": 3000}],
        "now": "2026-03-15",
        "horizon_months": 3,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "legalflow_forecast_total" in response.text


def test_request_id_is_echoed(client: TestClient):
    """Test caller-supplied request IDs are propagated"""
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    generated = client.get("/health")
    assert generated.headers["X-Request-ID"]


def test_forecast_endpoint(client: TestClient, forecast_body: dict):
    """Test POST /v1/forecast with a retainer-only office"""
    response = client.post("/v1/forecast", json=forecast_body)

    assert response.status_code == 200
    data = response.json()
    assert [m["month_label"] for m in data["months"]] == ["April/2026", "May/2026", "June/2026"]
    assert data["months"][0]["month_start_date"] == "2026-04-01"
    assert all(m["projected_revenue"] == 3000 for m in data["months"])
    assert all(m["confidence"] == "high" for m in data["months"])
    assert data["summary"] == {
        "months": 3,
        "total_revenue": 9000,
        "total_expenses": 7500,
        "total_balance": 1500,
    }
    assert data["alerts"] == []


def test_forecast_endpoint_defaults(client: TestClient):
    """Test default horizon and the pinned evaluation date"""
    response = client.post("/v1/forecast", json={})

    assert response.status_code == 200
    data = response.json()
    assert len(data["months"]) == 6
    assert data["months"][0]["month_label"] == "April/2026"
    # No revenue at all: deficit every month, no trend alert
    assert [a["severity"] for a in data["alerts"]] == ["danger"]


def test_forecast_endpoint_rejects_negative_amount(client: TestClient, forecast_body: dict):
    """Test ledger validation at ingestion"""
    forecast_body["ledger"] = [
        {
            "kind": "revenue",
            "category": "Success Fee",
            "amount": -10,
            "due_date": "2026-02-01",
            "paid_date": "2026-02-01",
            "status": "paid",
        }
    ]
    response = client.post("/v1/forecast", json=forecast_body)
    assert response.status_code == 422


def test_forecast_endpoint_rejects_inconsistent_paid_date(client: TestClient, forecast_body: dict):
    """Test paid_date must be present exactly for paid entries"""
    forecast_body["ledger"] = [
        {"kind": "revenue", "category": "Success Fee", "amount": 10, "due_date": "2026-02-01", "status": "paid"}
    ]
    assert client.post("/v1/forecast", json=forecast_body).status_code == 422

    forecast_body["ledger"] = [
        {
            "kind": "revenue",
            "category": "Success Fee",
            "amount": 10,
            "due_date": "2026-02-01",
            "paid_date": "2026-02-03",
            "status": "pending",
        }
    ]
    assert client.post("/v1/forecast", json=forecast_body).status_code == 422


def test_forecast_endpoint_rejects_negative_horizon(client: TestClient, forecast_body: dict):
    """Test horizon validation"""
    forecast_body["horizon_months"] = -1
    assert client.post("/v1/forecast", json=forecast_body).status_code == 422


def test_forecast_alerts_endpoint(client: TestClient, forecast_body: dict):
    """Test POST /v1/forecast/alerts re-evaluates a stored forecast"""
    months = client.post("/v1/forecast", json=forecast_body).json()["months"]
    months[1]["projected_balance"] = -500
    months[-1]["projected_revenue"] = 1000

    response = client.post("/v1/forecast/alerts", json={"months": months})

    assert response.status_code == 200
    alerts = response.json()["alerts"]
    assert [a["severity"] for a in alerts] == ["danger", "warning"]
    assert "May/2026" in alerts[0]["message"]
    assert len(alerts[0]["recommendations"]) == 3


def test_forecast_alerts_endpoint_empty(client: TestClient):
    """Test empty forecast gives no alerts"""
    response = client.post("/v1/forecast/alerts", json={"months": []})
    assert response.status_code == 200
    assert response.json() == {"alerts": []}


def test_health_metrics_endpoint(client: TestClient):
    """Test POST /v1/health-metrics"""
    ledger = [
        {"kind": "revenue", "category": "Success Fee", "amount": 400, "due_date": "2026-03-20", "status": "pending"},
        {"kind": "revenue", "category": "Success Fee", "amount": 600, "due_date": "2026-02-20", "status": "overdue"},
        {
            "kind": "revenue",
            "category": "Consulting",
            "amount": 2000,
            "due_date": "2026-03-01",
            "paid_date": "2026-03-03",
            "status": "paid",
        },
        {
            "kind": "expense",
            "category": "Court Fees",
            "amount": 500,
            "due_date": "2026-03-04",
            "paid_date": "2026-03-04",
            "status": "paid",
        },
    ]

    response = client.post("/v1/health-metrics", json={"ledger": ledger})

    assert response.status_code == 200
    data = response.json()
    assert data["receivable_30d"] == 400
    assert data["receivable_30d_count"] == 1
    assert data["default_rate"] == 50.0
    assert data["default_rate_by_amount"] == pytest.approx(60.0)
    assert data["overdue_amount"] == 600
    assert data["realized_profitability"] == 1500
    assert data["profit_margin"] == pytest.approx(75.0)


def test_health_metrics_endpoint_empty(client: TestClient):
    """Test empty ledger"""
    response = client.post("/v1/health-metrics", json={"now": "2026-03-15"})
    assert response.status_code == 200
    assert response.json()["default_rate"] == 0
