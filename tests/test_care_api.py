from datetime import datetime, timedelta, timezone

CARE_LOGS = "/api/v1/care-logs"
REMINDERS = "/api/v1/reminders"


async def _create_plant(client, headers, **overrides) -> dict:
    payload = {"name": "Monstera", "light_needs": "medium", "water_frequency": 7}
    payload.update(overrides)
    response = await client.post("/api/v1/plants", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _iso(value: datetime) -> str:
    return value.isoformat()


# =============================== Care Logs =================================


async def test_watering_log_updates_plant_and_schedules_reminder(client, alice):
    plant = await _create_plant(client, alice)

    response = await client.post(
        CARE_LOGS,
        json={"plant_id": plant["id"], "activity_type": "watering", "notes": "Soil was dry"},
        headers=alice,
    )

    assert response.status_code == 201
    assert response.json()["activity_type"] == "watering"

    refreshed = (await client.get(f"/api/v1/plants/{plant['id']}", headers=alice)).json()
    assert refreshed["last_watered"] is not None
    assert refreshed["days_since_watered"] == 0
    assert refreshed["watering_status"] == "ok"

    reminders = (await client.get(f"/api/v1/plants/{plant['id']}/reminders", headers=alice)).json()
    assert len(reminders) == 2
    assert all(reminder["reminder_type"] == "watering" for reminder in reminders)


async def test_backdated_watering_sets_last_watered(client, alice):
    plant = await _create_plant(client, alice)
    three_days_ago = datetime.now(timezone.utc) - timedelta(days=3)

    await client.post(
        CARE_LOGS,
        json={"plant_id": plant["id"], "activity_type": "watering", "performed_at": _iso(three_days_ago)},
        headers=alice,
    )

    refreshed = (await client.get(f"/api/v1/plants/{plant['id']}", headers=alice)).json()
    assert refreshed["days_since_watered"] == 3


async def test_non_watering_log_leaves_plant_untouched(client, alice):
    plant = await _create_plant(client, alice)

    response = await client.post(
        CARE_LOGS, json={"plant_id": plant["id"], "activity_type": "fertilizing"}, headers=alice
    )

    assert response.status_code == 201
    refreshed = (await client.get(f"/api/v1/plants/{plant['id']}", headers=alice)).json()
    assert refreshed["last_watered"] is None
    reminders = (await client.get(f"/api/v1/plants/{plant['id']}/reminders", headers=alice)).json()
    assert len(reminders) == 1


async def test_care_logs_are_listed_newest_first(client, alice):
    plant = await _create_plant(client, alice)
    now = datetime.now(timezone.utc)
    for days_ago, activity in ((5, "pruning"), (1, "misting"), (3, "repotting")):
        await client.post(
            CARE_LOGS,
            json={
                "plant_id": plant["id"],
                "activity_type": activity,
                "performed_at": _iso(now - timedelta(days=days_ago)),
            },
            headers=alice,
        )

    all_logs = (await client.get(CARE_LOGS, headers=alice)).json()
    plant_logs = (await client.get(f"/api/v1/plants/{plant['id']}/care-logs", headers=alice)).json()

    assert [log["activity_type"] for log in all_logs] == ["misting", "repotting", "pruning"]
    assert plant_logs == all_logs


async def test_care_log_for_foreign_plant_is_forbidden(client, alice, bob):
    plant = await _create_plant(client, alice)

    create = await client.post(
        CARE_LOGS, json={"plant_id": plant["id"], "activity_type": "watering"}, headers=bob
    )
    listing = await client.get(f"/api/v1/plants/{plant['id']}/care-logs", headers=bob)

    assert create.status_code == 403
    assert listing.status_code == 403


async def test_care_log_for_missing_plant(client, alice):
    response = await client.post(
        CARE_LOGS, json={"plant_id": 9999, "activity_type": "watering"}, headers=alice
    )
    assert response.status_code == 404


async def test_unknown_activity_type_is_rejected(client, alice):
    plant = await _create_plant(client, alice)

    response = await client.post(
        CARE_LOGS, json={"plant_id": plant["id"], "activity_type": "singing"}, headers=alice
    )

    assert response.status_code == 422
    fields = [error["field"] for error in response.json()["error"]["details"]["validation_errors"]]
    assert "body.activity_type" in fields


# =============================== Reminders =================================


async def test_overdue_reminder_is_completed(client, alice):
    plant = await _create_plant(client, alice)
    yesterday = datetime.now(timezone.utc) - timedelta(days=1)
    created = await client.post(
        REMINDERS,
        json={"plant_id": plant["id"], "reminder_type": "pruning", "due_date": _iso(yesterday)},
        headers=alice,
    )
    reminder = created.json()

    overdue = (await client.get(f"{REMINDERS}/overdue", headers=alice)).json()
    assert [r["id"] for r in overdue] == [reminder["id"]]

    first = await client.post(f"{REMINDERS}/{reminder['id']}/complete", headers=alice)
    second = await client.post(f"{REMINDERS}/{reminder['id']}/complete", headers=alice)

    assert first.status_code == 200
    assert first.json()["completed"] is True
    assert first.json()["completed_at"] is not None
    assert second.json()["completed_at"] == first.json()["completed_at"]
    assert (await client.get(f"{REMINDERS}/overdue", headers=alice)).json() == []


async def test_upcoming_reminders_window(client, alice):
    plant = await _create_plant(client, alice)
    in_two_days = datetime.now(timezone.utc) + timedelta(days=2)
    soon = (
        await client.post(
            REMINDERS,
            json={"plant_id": plant["id"], "reminder_type": "fertilizing", "due_date": _iso(in_two_days)},
            headers=alice,
        )
    ).json()

    everything = (await client.get(f"{REMINDERS}/upcoming", headers=alice)).json()
    within_three_days = (await client.get(f"{REMINDERS}/upcoming", params={"days": 3}, headers=alice)).json()

    # The watering reminder from plant creation is due in 7 days
    assert [r["reminder_type"] for r in everything] == ["fertilizing", "watering"]
    assert [r["id"] for r in within_three_days] == [soon["id"]]


async def test_complete_foreign_or_missing_reminder(client, alice, bob):
    await _create_plant(client, alice)
    reminder = (await client.get(REMINDERS, headers=alice)).json()[0]

    foreign = await client.post(f"{REMINDERS}/{reminder['id']}/complete", headers=bob)
    missing = await client.post(f"{REMINDERS}/9999/complete", headers=alice)

    assert foreign.status_code == 403
    assert missing.status_code == 404


async def test_reminder_for_foreign_plant_is_forbidden(client, alice, bob):
    plant = await _create_plant(client, alice)

    response = await client.post(
        REMINDERS,
        json={
            "plant_id": plant["id"],
            "reminder_type": "other",
            "due_date": _iso(datetime.now(timezone.utc)),
        },
        headers=bob,
    )

    assert response.status_code == 403


async def test_reminder_calendar(client, alice):
    plant = await _create_plant(client, alice)
    await client.post(
        REMINDERS,
        json={"plant_id": plant["id"], "reminder_type": "repotting", "due_date": "2030-06-15T10:00:00Z"},
        headers=alice,
    )

    response = await client.get(f"{REMINDERS}/calendar", params={"year": 2030, "month": 6}, headers=alice)
    calendar = response.json()

    assert response.status_code == 200
    assert calendar["year"] == 2030 and calendar["month"] == 6
    assert calendar["weeks"][0][0]["day"] == "2030-05-26"
    assert calendar["weeks"][0][0]["in_month"] is False
    june_15 = calendar["weeks"][2][6]
    assert june_15["day"] == "2030-06-15"
    assert [r["reminder_type"] for r in june_15["reminders"]] == ["repotting"]


async def test_reminder_calendar_defaults_to_current_month(client, alice):
    today = datetime.now(timezone.utc).date()

    calendar = (await client.get(f"{REMINDERS}/calendar", headers=alice)).json()

    assert (calendar["year"], calendar["month"]) == (today.year, today.month)
    days = [day for week in calendar["weeks"] for day in week if day["is_today"]]
    assert [day["day"] for day in days] == [today.isoformat()]


async def test_reminder_calendar_rejects_invalid_month(client, alice):
    response = await client.get(f"{REMINDERS}/calendar", params={"year": 2030, "month": 13}, headers=alice)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
