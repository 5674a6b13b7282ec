from __future__ import annotations

from datetime import date

import pytest

from src.timekeeping.timekeeping.common.datetime_utils import now_local
from src.timekeeping.timekeeping.container import build_services
from src.timekeeping.timekeeping.main import create_app


@pytest.fixture
def container(punch_repo, contract_repo, employee_repo, employees, work_day, weekly_40):
    events = work_day(date(2026, 1, 2)) + work_day(date(2026, 3, 2), employee_id=2, pause_minutes=15)
    return build_services(
        punches_repo=punch_repo(events),
        contracts_repo=contract_repo({1: weekly_40}),
        employees_repo=employee_repo(employees),
        cache_enabled=True,
    )


@pytest.fixture
def client(container):
    app = create_app(container, settings_module="config.testing")
    return app.test_client()


def test_record_punch_and_next_actions(client):
    resp = client.post("/api/punches", json={"employee_id": 3, "kind": "clock_in", "location_present": True})

    assert resp.status_code == 201
    event = resp.get_json()["event"]
    assert event["kind"] == "clock_in"
    assert event["location_present"] is True

    today = now_local().date().isoformat()
    actions = client.get(f"/api/employees/3/actions?date={today}").get_json()
    assert actions["actions"] == ["clock_out", "pause_start"]


def test_disallowed_punch_is_a_bad_request(client):
    resp = client.post("/api/punches", json={"employee_id": 3, "kind": "pause_end"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_punch_for_unknown_employee_is_not_found(client):
    assert client.post("/api/punches", json={"employee_id": 99, "kind": "clock_in"}).status_code == 404
    assert client.post("/api/punches", json={"kind": "clock_in"}).status_code == 400


def test_daily_record(client):
    body = client.get("/api/employees/2/day?date=2026-03-02").get_json()

    assert body["worked_ms"] == 8 * 3_600_000
    assert body["paused_ms"] == 15 * 60_000
    assert len(body["source_events"]) == 4

    empty = client.get("/api/employees/2/day?date=2026-03-03").get_json()
    assert empty["net_ms"] == 0


def test_balance_endpoints(client):
    balance = client.get("/api/employees/1/balance?as_of=2026-01-08").get_json()
    assert balance["applicable"] is True
    assert balance["balance_hours"] == pytest.approx(-32)
    assert balance["label"] == "en contra"

    progress = client.get("/api/employees/1/progress?as_of=2026-01-02").get_json()
    assert progress["range_start"] == "2025-12-29"
    assert progress["progress_percent"] == pytest.approx(20)


def test_uncontracted_employee_is_not_applicable(client):
    assert client.get("/api/employees/2/balance?as_of=2026-03-02").get_json() == {
        "employee_id": 2,
        "applicable": False,
    }
    assert client.get("/api/employees/2/progress").get_json()["applicable"] is False


def test_bad_date_is_a_bad_request(client):
    resp = client.get("/api/employees/1/balance?as_of=08/01/2026")

    assert resp.status_code == 400
    assert "YYYY-MM-DD" in resp.get_json()["message"]


def test_team_balances(client):
    body = client.get("/api/balances?as_of=2026-01-08").get_json()

    assert [b["employee_name"] for b in body["balances"]] == ["María"]


def test_contract_update_changes_balance(client):
    resp = client.put("/api/employees/2/contract", json={"hours_per_period": 160, "period_kind": "monthly"})
    assert resp.status_code == 200
    assert client.get("/api/employees/2/contract").get_json()["period_kind"] == "monthly"

    assert client.get("/api/employees/2/balance?as_of=2026-03-02").get_json()["applicable"] is True
    assert client.put("/api/employees/2/contract", json={"hours_per_period": 160}).status_code == 400


def test_report_json_and_downloads(client):
    body = client.get("/api/reports?employee=all&month=2026-03").get_json()
    assert [r["employee_name"] for r in body["rows"]] == ["Juan"]
    assert body["rows"][0]["worked"] == "7h 45m"

    csv_resp = client.get("/api/reports.csv?employee=2&month=2026-03")
    assert csv_resp.mimetype == "text/csv"
    assert "timesheet_2_2026-03.csv" in csv_resp.headers["Content-Disposition"]

    xlsx_resp = client.get("/api/reports.xlsx?month=2026-01")
    assert xlsx_resp.status_code == 200
    assert xlsx_resp.data[:2] == b"PK"


def test_report_with_bad_month(client):
    assert client.get("/api/reports?month=2026-13").status_code == 400


@pytest.mark.parametrize("flag", ["false", "true", 1, None])
def test_location_flag_must_be_a_json_boolean(client, flag):
    resp = client.post("/api/punches", json={"employee_id": 3, "kind": "clock_in", "location_present": flag})

    assert resp.status_code == 400
    assert client.get("/api/employees/3/day").get_json()["source_events"] == []


def test_empty_day_has_the_same_shape_as_a_worked_day(client):
    worked = client.get("/api/employees/2/day?date=2026-03-02").get_json()
    empty = client.get("/api/employees/2/day?date=2026-03-03").get_json()

    assert set(empty) == set(worked)
    assert empty["calendar_date"] == "2026-03-03"
    assert (empty["worked_ms"], empty["paused_ms"]) == (0, 0)


def test_container_bounds_the_daily_cache(punch_repo, contract_repo, employee_repo):
    container = build_services(
        punches_repo=punch_repo(),
        contracts_repo=contract_repo(),
        employees_repo=employee_repo(),
        cache_size=10,
    )

    assert container.cache.max_entries == 10
