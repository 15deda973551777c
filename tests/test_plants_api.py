from datetime import datetime, timedelta, timezone

from app.shared.config.settings import get_settings

PLANTS = "/api/v1/plants"


async def _create_plant(client, headers, **overrides) -> dict:
    payload = {"name": "Living room monstera", "light_needs": "bright-indirect"}
    payload.update(overrides)
    response = await client.post(PLANTS, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_plant_suggests_frequency_and_schedules_reminder(client, alice):
    plant = await _create_plant(client, alice, name="Snake plant", light_needs="low")

    assert plant["water_frequency"] == 21
    assert plant["watering_status"] == "unknown"
    assert plant["days_since_watered"] is None
    assert plant["next_watering_date"] is None

    response = await client.get(f"{PLANTS}/{plant['id']}/reminders", headers=alice)
    reminders = response.json()
    assert response.status_code == 200
    assert len(reminders) == 1
    assert reminders[0]["reminder_type"] == "watering"
    assert reminders[0]["completed"] is False


async def test_create_plant_keeps_explicit_frequency(client, alice):
    plant = await _create_plant(client, alice, water_frequency=4)
    assert plant["water_frequency"] == 4


async def test_create_plant_requires_authentication(client):
    response = await client.post(PLANTS, json={"name": "Fern", "light_needs": "low"})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_invalid_token_is_rejected(client):
    response = await client.get(PLANTS, headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401


async def test_create_plant_validation_error_envelope(client, alice):
    response = await client.post(
        PLANTS,
        json={"name": "Fern", "light_needs": "low", "water_frequency": 0},
        headers=alice,
    )

    body = response.json()
    assert response.status_code == 422
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["request_id"]


async def test_list_plants_is_scoped_to_user(client, alice, bob):
    await _create_plant(client, alice, name="Alice fern")
    await _create_plant(client, bob, name="Bob cactus")

    response = await client.get(PLANTS, headers=alice)

    assert [plant["name"] for plant in response.json()] == ["Alice fern"]


async def test_list_plants_filters_by_watering_status(client, alice):
    long_ago = (datetime.now(timezone.utc) - timedelta(days=10)).isoformat()
    thirsty = await _create_plant(client, alice, name="Thirsty", water_frequency=7, last_watered=long_ago)
    await _create_plant(client, alice, name="New")

    response = await client.get(PLANTS, params={"status": "overdue"}, headers=alice)

    assert [plant["id"] for plant in response.json()] == [thirsty["id"]]
    assert response.json()[0]["days_since_watered"] == 10


async def test_watering_summary(client, alice):
    long_ago = (datetime.now(timezone.utc) - timedelta(days=10)).isoformat()
    await _create_plant(client, alice, name="Thirsty", water_frequency=7, last_watered=long_ago)
    await _create_plant(client, alice, name="New")

    response = await client.get(f"{PLANTS}/watering-summary", headers=alice)
    summary = response.json()

    assert response.status_code == 200
    assert summary["total"] == 2
    assert summary["counts"]["overdue"] == 1
    assert summary["counts"]["unknown"] == 1
    assert summary["counts"]["ok"] == 0


async def test_watering_frequency_suggestion(client, alice):
    response = await client.get(
        f"{PLANTS}/watering-frequency", params={"name": "Boston fern"}, headers=alice
    )
    assert response.json()["water_frequency"] == 3


async def test_get_plant_ownership(client, alice, bob):
    plant = await _create_plant(client, alice)

    own = await client.get(f"{PLANTS}/{plant['id']}", headers=alice)
    foreign = await client.get(f"{PLANTS}/{plant['id']}", headers=bob)
    missing = await client.get(f"{PLANTS}/9999", headers=alice)

    assert own.status_code == 200
    assert foreign.status_code == 403
    assert foreign.json()["error"]["code"] == "AUTHORIZATION_ERROR"
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"


async def test_update_plant_is_partial(client, alice):
    plant = await _create_plant(client, alice, care_notes="Wipe leaves")

    response = await client.put(
        f"{PLANTS}/{plant['id']}", json={"water_frequency": 9}, headers=alice
    )
    updated = response.json()

    assert response.status_code == 200
    assert updated["water_frequency"] == 9
    assert updated["name"] == plant["name"]
    assert updated["care_notes"] == "Wipe leaves"


async def test_update_plant_rejects_null_required_field(client, alice):
    plant = await _create_plant(client, alice)

    response = await client.put(f"{PLANTS}/{plant['id']}", json={"name": None}, headers=alice)

    assert response.status_code == 422


async def test_update_foreign_plant_is_forbidden(client, alice, bob):
    plant = await _create_plant(client, alice)

    response = await client.put(f"{PLANTS}/{plant['id']}", json={"name": "Mine now"}, headers=bob)

    assert response.status_code == 403


async def test_delete_plant_removes_logs_and_reminders_keeps_recommendations(client, alice):
    plant = await _create_plant(client, alice)
    await client.post(
        "/api/v1/care-logs", json={"plant_id": plant["id"], "activity_type": "watering"}, headers=alice
    )
    generated = await client.post(
        "/api/v1/ai-recommendations/generate",
        json={"plant_id": plant["id"], "plant_name": "Monstera"},
        headers=alice,
    )
    assert generated.status_code == 201

    response = await client.delete(f"{PLANTS}/{plant['id']}", headers=alice)

    assert response.status_code == 204
    assert (await client.get(f"{PLANTS}/{plant['id']}", headers=alice)).status_code == 404
    assert (await client.get("/api/v1/care-logs", headers=alice)).json() == []
    assert (await client.get("/api/v1/reminders", headers=alice)).json() == []

    recommendations = (await client.get("/api/v1/ai-recommendations", headers=alice)).json()
    assert len(recommendations) == 1
    assert recommendations[0]["plant_id"] is None


async def test_delete_foreign_plant_is_forbidden(client, alice, bob):
    plant = await _create_plant(client, alice)

    response = await client.delete(f"{PLANTS}/{plant['id']}", headers=bob)

    assert response.status_code == 403
    assert (await client.get(f"{PLANTS}/{plant['id']}", headers=alice)).status_code == 200


async def test_create_plant_rejects_blank_name(client, alice):
    response = await client.post(PLANTS, json={"name": "   ", "light_needs": "low"}, headers=alice)

    body = response.json()
    assert response.status_code == 422
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = [e["field"] for e in body["error"]["details"]["validation_errors"]]
    assert "body.name" in fields


async def test_create_plant_strips_name(client, alice):
    plant = await _create_plant(client, alice, name="  Pothos  ")
    assert plant["name"] == "Pothos"


async def test_update_plant_rejects_blank_name(client, alice):
    plant = await _create_plant(client, alice)

    response = await client.put(f"{PLANTS}/{plant['id']}", json={"name": "  "}, headers=alice)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    unchanged = await client.get(f"{PLANTS}/{plant['id']}", headers=alice)
    assert unchanged.json()["name"] == plant["name"]


async def test_default_water_frequency_comes_from_settings(client, alice, monkeypatch):
    monkeypatch.setattr(get_settings(), "DEFAULT_WATER_FREQUENCY_DAYS", 4)

    plant = await _create_plant(client, alice, name="Mystery cutting", light_needs="medium")
    suggestion = await client.get(
        f"{PLANTS}/watering-frequency", params={"name": "Mystery cutting"}, headers=alice
    )

    assert plant["water_frequency"] == 4
    assert suggestion.json()["water_frequency"] == 4
