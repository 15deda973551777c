async def test_health(client):
    response = await client.get("/health")
    body = response.json()

    assert response.status_code == 200
    assert body["status"] == "healthy"
    assert body["service"] == "plant-care-tracker"


async def test_detailed_health_reports_database(client):
    response = await client.get("/health/detailed")
    body = response.json()

    assert response.status_code == 200
    assert body["components"]["database"]["status"] == "healthy"


async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "HTTP_404"


async def test_api_info(client):
    response = await client.get("/api/v1/")

    assert response.status_code == 200
    assert response.json()["endpoints"]["plants"] == "/api/v1/plants"
