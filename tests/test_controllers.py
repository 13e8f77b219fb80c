from __future__ import annotations

from datetime import datetime

import pytest

from src.staff_scheduling.staff_scheduling.attendance import service as attendance_service_module
from src.staff_scheduling.staff_scheduling.container import build_services
from src.staff_scheduling.staff_scheduling.main import create_app


@pytest.fixture
def clock():
    return {"now": datetime(2024, 3, 4, 8, 55)}


@pytest.fixture
def client(monkeypatch, clock, staff_repo, attendance_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(attendance_service_module, "now_local", lambda: clock["now"])

    container = build_services(staff_repo=staff_repo, attendance_repo=attendance_repo)
    app = create_app(container=container)
    return app.test_client()


def test_checkin_checkout_flow(client, clock):
    r = client.post("/api/attendance/1/checkin")
    assert r.status_code == 201
    assert r.get_json()["success"] is True

    r = client.post("/api/attendance/1/checkin")
    assert r.status_code == 409
    assert r.get_json()["success"] is False

    r = client.get("/api/attendance/today")
    rows = {row["staff_id"]: row for row in r.get_json()["staff"]}
    assert rows[1]["state"] == "checked-in"
    assert rows[2]["state"] == "absent"
    assert 3 not in rows

    clock["now"] = datetime(2024, 3, 4, 15, 30)
    r = client.post("/api/attendance/1/checkout")
    assert r.status_code == 200
    assert r.get_json()["check_out"] == "15:30"


def test_checkin_unknown_staff_is_404(client):
    r = client.post("/api/attendance/42/checkin")
    assert r.status_code == 404


def test_manual_record_lifecycle(client):
    r = client.post(
        "/api/attendance/records",
        json={"staff_id": 2, "start_time": "2024-03-01T10:00", "end_time": "2024-03-01T19:00", "status": "normal"},
    )
    assert r.status_code == 201
    record_id = r.get_json()["record_id"]

    r = client.patch(f"/api/attendance/records/{record_id}", json={"end_time": "2024-03-01T09:00"})
    assert r.status_code == 400

    r = client.patch(f"/api/attendance/records/{record_id}", json={"status": "late"})
    assert r.status_code == 200

    assert client.delete(f"/api/attendance/records/{record_id}").status_code == 200
    assert client.delete(f"/api/attendance/records/{record_id}").status_code == 404


def test_bad_payload_is_400(client):
    r = client.post("/api/attendance/records", json={"staff_id": 2, "start_time": "yesterday", "end_time": ""})
    assert r.status_code == 400

    r = client.post("/api/schedules/quick", json={"staff_id": "abc", "date": "2024-03-05", "start": "09:00", "end": "18:00"})
    assert r.status_code == 400


def test_schedule_routes(client, attendance_repo):
    r = client.get("/api/schedules/templates")
    assert [t["name"] for t in r.get_json()["templates"]] == ["standard", "weekend", "shift_a", "shift_b"]

    r = client.post(
        "/api/schedules",
        json={"staff_id": 1, "start_time": "2024-03-04T09:00", "end_time": "2024-03-04T18:00", "repeat_days": [1, 3]},
    )
    assert r.status_code == 201
    assert r.get_json()["created"] == 8

    r = client.post("/api/schedules/template", json={"template": "standard", "staff_ids": [1, 2], "week_of": "2024-03-04"})
    assert r.get_json() == {"success": True, "created": 8, "skipped": 2}

    r = client.post(
        "/api/schedules/bulk",
        json={"staff_ids": [2], "dates": ["2024-03-09", "2024-03-10"], "start": "10:00", "end": "16:00"},
    )
    assert r.get_json()["created"] == 2

    r = client.post("/api/schedules/quick", json={"staff_id": 2, "date": "2024-03-09", "start": "09:00", "end": "12:00"})
    assert r.status_code == 409

    scheduled = attendance_repo.all()
    assert len(scheduled) == 18
    assert client.delete(f"/api/schedules/{scheduled[0].record_id}").status_code == 200


def test_batch_failure_reports_partial_result(monkeypatch, staff_repo, failing_attendance):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = failing_attendance(fail_on=2)
    client = create_app(container=build_services(staff_repo=staff_repo, attendance_repo=repo)).test_client()

    r = client.post("/api/schedules/template", json={"template": "weekend", "staff_ids": [1], "week_of": "2024-03-04"})

    assert r.status_code == 502
    body = r.get_json()
    assert body["success"] is False
    assert (body["created"], body["pending"]) == (1, 0)


def test_timeline_route(client, attendance_repo):
    client.post("/api/attendance/2/checkin")

    r = client.get("/api/timeline?view=today&date=2024-03-04")
    groups = r.get_json()["groups"]
    assert [g["staff_id"] for g in groups] == [1, 2, 3]
    assert groups[1]["items"][0]["classification"] == "actual-on-time"

    assert client.get("/api/timeline?view=year&date=2024-03-04").status_code == 400


def test_unknown_route_stays_404(client):
    assert client.get("/api/nothing-here").status_code == 404


@pytest.mark.parametrize(
    "method,url",
    [
        ("post", "/api/schedules/bulk"),
        ("post", "/api/schedules"),
        ("post", "/api/schedules/template"),
        ("post", "/api/schedules/quick"),
        ("post", "/api/attendance/records"),
        ("patch", "/api/attendance/records/1"),
    ],
)
def test_non_object_body_is_400(client, attendance_repo, method, url):
    r = getattr(client, method)(url, json=[1, 2])

    assert r.status_code == 400
    assert r.get_json()["success"] is False
    assert attendance_repo.create_calls == 0


def test_malformed_record_id_is_400(client, attendance_repo):
    r = client.post(
        "/api/schedules",
        json={"record_id": "abc", "staff_id": 1, "start_time": "2024-03-04T09:00", "end_time": "2024-03-04T18:00"},
    )

    assert r.status_code == 400
    assert attendance_repo.all() == []
