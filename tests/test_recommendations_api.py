import pytest

from app.shared.config.settings import get_settings
from app.shared.core.rate_limiter import limiter

RECOMMENDATIONS = "/api/v1/ai-recommendations"


async def _create_plant(client, headers, name="Monstera") -> dict:
    response = await client.post(
        "/api/v1/plants", json={"name": name, "light_needs": "bright-indirect"}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _generate(client, headers, **payload):
    return await client.post(f"{RECOMMENDATIONS}/generate", json=payload, headers=headers)


async def test_generate_recommendation_for_issue(client, alice):
    plant = await _create_plant(client, alice)

    response = await _generate(
        client,
        alice,
        plant_id=plant["id"],
        plant_name="Monstera",
        plant_species="Monstera deliciosa",
        care_issue="yellow leaves",
    )
    recommendation = response.json()

    assert response.status_code == 201
    assert recommendation["title"] == "Monstera: Yellow leaves"
    assert recommendation["plant_id"] == plant["id"]
    assert recommendation["read"] is False
    assert "propagation" in recommendation["tags"]
    assert "## Specific Issue: yellow leaves" in recommendation["content"]


async def test_generate_recommendation_without_plant(client, alice):
    response = await _generate(client, alice, plant_name="Mystery plant")
    recommendation = response.json()

    assert response.status_code == 201
    assert recommendation["plant_id"] is None
    assert recommendation["title"] == "Care tips for your Mystery plant"
    assert recommendation["content"].startswith("# Care Guide for Mystery plant")


async def test_generate_for_foreign_plant_is_forbidden(client, alice, bob):
    plant = await _create_plant(client, alice)

    response = await _generate(client, bob, plant_id=plant["id"], plant_name="Monstera")

    assert response.status_code == 403


async def test_generate_requires_plant_name(client, alice):
    response = await _generate(client, alice, care_issue="brown tips")
    assert response.status_code == 422


async def test_list_recommendations_filters_by_plant(client, alice, bob):
    plant = await _create_plant(client, alice)
    await _generate(client, alice, plant_id=plant["id"], plant_name="Monstera")
    await _generate(client, alice, plant_name="Pothos")
    await _generate(client, bob, plant_name="Fern")

    everything = (await client.get(RECOMMENDATIONS, headers=alice)).json()
    for_plant = (await client.get(RECOMMENDATIONS, params={"plant_id": plant["id"]}, headers=alice)).json()

    assert len(everything) == 2
    assert [r["plant_id"] for r in for_plant] == [plant["id"]]


async def test_mark_recommendation_read(client, alice, bob):
    recommendation = (await _generate(client, alice, plant_name="Pothos")).json()

    read = await client.post(f"{RECOMMENDATIONS}/{recommendation['id']}/read", headers=alice)
    again = await client.post(f"{RECOMMENDATIONS}/{recommendation['id']}/read", headers=alice)
    foreign = await client.post(f"{RECOMMENDATIONS}/{recommendation['id']}/read", headers=bob)
    missing = await client.post(f"{RECOMMENDATIONS}/9999/read", headers=alice)

    assert read.status_code == 200
    assert read.json()["read"] is True
    assert again.json()["read"] is True
    assert foreign.status_code == 403
    assert missing.status_code == 404


async def test_care_instructions(client, alice):
    response = await client.get(
        f"{RECOMMENDATIONS}/care-instructions", params={"plant_name": "Golden Pothos"}, headers=alice
    )
    body = response.json()

    assert response.status_code == 200
    assert body["plant_name"] == "Golden Pothos"
    assert "## Watering" in body["instructions"]
    assert "## Propagation" not in body["instructions"]


@pytest.fixture()
def tight_rate_limit(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    monkeypatch.setattr(get_settings(), "RECOMMENDATION_RATE_LIMIT", "1/minute")
    limiter.reset()
    yield
    limiter.reset()


async def test_generate_is_rate_limited(client, alice, tight_rate_limit):
    first = await _generate(client, alice, plant_name="Monstera")
    second = await _generate(client, alice, plant_name="Monstera")

    assert first.status_code == 201
    assert second.status_code == 429
    assert second.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert second.json()["error"]["request_id"]
    assert second.headers["Retry-After"] == "60"


async def test_rate_limit_does_not_apply_to_listing(client, alice, tight_rate_limit):
    await _generate(client, alice, plant_name="Monstera")

    for _ in range(3):
        response = await client.get(RECOMMENDATIONS, headers=alice)
        assert response.status_code == 200
