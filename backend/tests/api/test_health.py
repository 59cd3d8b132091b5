"""Health probe returns service identity from settings."""


async def test_health_returns_200(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Defense Desk API"
