from registry.config import get_settings


async def test_metrics_endpoint_returns_snapshot_and_counts_requests(api_client) -> None:
    m1 = await api_client.get("/api/metrics")
    assert m1.status_code == 200
    payload1 = m1.json()
    assert "counters" in payload1
    assert "latency_ms" in payload1

    # /api/metrics itself should NOT affect http_requests_total.
    m1b = await api_client.get("/api/metrics")
    assert m1b.json()["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"]

    health = await api_client.get("/health")
    assert health.status_code == 200

    payload2 = (await api_client.get("/api/metrics")).json()
    assert payload2["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"] + 1


async def test_user_outcomes_are_counted(api_client) -> None:
    ada = {"firstName": "Ada", "lastName": "Lovelace"}
    assert (await api_client.post("/users", json=ada)).status_code == 201
    assert (await api_client.post("/users", json=ada)).status_code == 400
    assert (await api_client.post("/users", json={"firstName": "Ada"})).status_code == 400

    counters = (await api_client.get("/api/metrics")).json()["counters"]
    assert counters["users_created_total"] == 1
    assert counters["users_rejected_total"] == 2


async def test_metrics_endpoint_can_be_disabled(api_client, monkeypatch) -> None:
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "false")
    get_settings.cache_clear()

    resp = await api_client.get("/api/metrics")
    assert resp.status_code == 404


async def test_malformed_bodies_count_as_rejected(api_client) -> None:
    resp = await api_client.post("/users", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400

    counters = (await api_client.get("/api/metrics")).json()["counters"]
    assert counters["users_rejected_total"] == 1
    assert counters["users_created_total"] == 0
