def test_health_probe(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.text == "Healthy"


def test_api_health(client):
    body = client.get("/api/health").json()

    assert body["status"] == "Healthy"
    assert body["timestamp"]


def test_api_info(client):
    body = client.get("/api/info").json()

    assert body["application"] == "VK API"
    assert body["version"] == "1.0.0"
    assert body["environment"] == "development"


def test_docs_served_in_development(client):
    assert client.get("/swagger/v1/swagger.json").status_code == 200
