async def test_me_provisions_user_on_first_request(client, alice):
    response = await client.get("/api/v1/users/me", headers=alice)
    user = response.json()

    assert response.status_code == 200
    assert user["username"] == "alice"
    assert user["email"] == "alice@example.com"


async def test_me_is_stable_across_requests(client, alice):
    first = (await client.get("/api/v1/users/me", headers=alice)).json()
    second = (await client.get("/api/v1/users/me", headers=alice)).json()

    assert first["id"] == second["id"]


async def test_me_requires_token(client):
    response = await client.get("/api/v1/users/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"
    assert response.headers["X-Request-ID"]


async def test_request_id_is_echoed(client, alice):
    response = await client.get("/api/v1/users/me", headers={**alice, "X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Response-Time" in response.headers
