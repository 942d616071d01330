"""API tests for availability checks, calendars and block management."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

BASE = "/api/v1/vehicle-availability"


def _today():
    return datetime.now(UTC).date()


async def _create_block(
    client: AsyncClient, vehicle_id: object, day, **extra: object
):
    payload = {
        "vehicle_id": str(vehicle_id),
        "date": day.isoformat(),
        "reason": "maintenance",
        **extra,
    }
    return await client.post(f"{BASE}/block", json=payload)


async def test_check_reports_free_vehicle(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(
        f"{BASE}/check",
        params={"vehicle_id": str(app_context["sedan_id"]), "date": "2026-03-10"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "available": True,
        "blocked_by": None,
        "details": None,
        "units_available": 2,
        "units_total": 2,
    }


async def test_check_unknown_vehicle_is_404(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(
        f"{BASE}/check",
        params={"vehicle_id": str(uuid.uuid4()), "date": "2026-03-10"},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Vehicle not found"


async def test_check_rejects_malformed_date(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(
        f"{BASE}/check",
        params={"vehicle_id": str(app_context["sedan_id"]), "date": "10/03/2026"},
    )
    assert response.status_code == 422


async def test_fleet_calendar_sums_active_vehicles(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(f"{BASE}/calendar", params={"year": 2026, "month": 2})
    assert response.status_code == 200
    payload = response.json()
    assert payload["vehicle_id"] is None
    assert payload["total_vehicles"] == 2
    assert payload["total_units"] == 3
    assert len(payload["days"]) == 28
    first = payload["days"][0]
    assert first["date"] == "2026-02-01"
    assert first["color"] == "green"
    assert first["status_label"] == "Available"
    assert [entry["name"] for entry in first["vehicles"]] == [
        "Cadillac Escalade",
        "Mercedes-Benz S-Class",
    ]
    assert first["reservations"] == []


async def test_calendar_for_one_vehicle(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    sedan_id = str(app_context["sedan_id"])

    unified = await client.get(
        f"{BASE}/calendar",
        params={"year": 2026, "month": 4, "vehicle_id": sedan_id},
    )
    legacy = await client.get(
        f"{BASE}/{sedan_id}/calendar", params={"year": 2026, "month": 4}
    )

    assert unified.status_code == legacy.status_code == 200
    assert unified.json() == legacy.json()
    payload = unified.json()
    assert payload["vehicle_id"] == sedan_id
    assert payload["total_units"] == 2
    assert payload["total_vehicles"] is None
    assert len(payload["days"]) == 30
    assert payload["days"][0]["vehicles"] is None


async def test_calendar_rejects_out_of_range_month(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(f"{BASE}/calendar", params={"year": 2026, "month": 13})
    assert response.status_code == 422


async def test_calendar_unknown_vehicle_is_404(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(
        f"{BASE}/{uuid.uuid4()}/calendar", params={"year": 2026, "month": 4}
    )
    assert response.status_code == 404


async def test_block_lifecycle(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    sedan_id = app_context["sedan_id"]
    target = _today() + timedelta(days=10)

    created = await _create_block(
        client, sedan_id, target, details="Detailing", created_by="ops@example.com"
    )
    assert created.status_code == 201
    block = created.json()
    assert block["date"] == target.isoformat()
    assert block["reason"] == "maintenance"
    assert block["details"] == "Detailing"
    assert block["vehicle_id"] == str(sedan_id)

    check = await client.get(
        f"{BASE}/check",
        params={"vehicle_id": str(sedan_id), "date": target.isoformat()},
    )
    assert check.json()["available"] is False
    assert check.json()["blocked_by"] == "maintenance"
    assert check.json()["units_available"] == 0

    duplicate = await _create_block(client, sedan_id, target)
    assert duplicate.status_code == 409

    upcoming = await client.get(f"{BASE}/{sedan_id}/blocks")
    assert upcoming.status_code == 200
    assert [item["id"] for item in upcoming.json()] == [block["id"]]

    on_day = await client.get(
        f"{BASE}/{sedan_id}/blocks", params={"date": target.isoformat()}
    )
    assert [item["date"] for item in on_day.json()] == [target.isoformat()]

    deleted = await client.delete(f"{BASE}/block/{block['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Block deleted"}

    check = await client.get(
        f"{BASE}/check",
        params={"vehicle_id": str(sedan_id), "date": target.isoformat()},
    )
    assert check.json()["available"] is True
    assert check.json()["units_available"] == 2

    upcoming = await client.get(f"{BASE}/{sedan_id}/blocks")
    assert upcoming.json() == []


async def test_block_today_is_rejected(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await _create_block(client, app_context["suv_id"], _today())
    assert response.status_code == 400
    assert response.json()["detail"] == "Only future dates can be blocked"


async def test_block_unknown_vehicle_is_404(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await _create_block(
        client, uuid.uuid4(), _today() + timedelta(days=3)
    )
    assert response.status_code == 404


async def test_block_rejects_unknown_reason(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await _create_block(
        client,
        app_context["suv_id"],
        _today() + timedelta(days=3),
        reason="holiday",
    )
    assert response.status_code == 422


async def test_blocked_day_shows_in_fleet_calendar(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    target = _today() + timedelta(days=5)
    created = await _create_block(client, app_context["suv_id"], target)
    assert created.status_code == 201

    response = await client.get(
        f"{BASE}/calendar", params={"year": target.year, "month": target.month}
    )
    day = response.json()["days"][target.day - 1]
    assert day["color"] == "red"
    assert day["status_label"] == "Blocked"
    assert day["blocked_units"] == 1
    assert day["units_available"] == 2


async def test_delete_unknown_block_is_404(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.delete(f"{BASE}/block/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Block not found"


async def test_blocks_for_unknown_vehicle_is_404(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    response = await client.get(f"{BASE}/{uuid.uuid4()}/blocks")
    assert response.status_code == 404


async def test_calendar_for_last_representable_month(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    sedan_id = str(app_context["sedan_id"])

    fleet = await client.get(f"{BASE}/calendar", params={"year": 9999, "month": 12})
    single = await client.get(
        f"{BASE}/{sedan_id}/calendar", params={"year": 9999, "month": 12}
    )

    for response in (fleet, single):
        assert response.status_code == 200
        days = response.json()["days"]
        assert len(days) == 31
        assert days[-1]["date"] == "9999-12-31"
        assert "day" not in days[-1]
