"""
tests/test_integrations.py - integration settings
"""

import json


def _payload(**overrides):
    payload = {
        "name": "Company Slack",
        "type": "Communication",
        "enabled": True,
        "config": json.dumps({"channel": "#growth"}),
    }
    payload.update(overrides)
    return payload


def test_create_and_list(client):
    response = client.post("/api/v1/integrations", json=_payload())
    assert response.status_code == 201
    assert response.json()["type"] == "Communication"

    client.post("/api/v1/integrations", json=_payload(name="HRIS", type="HRIS", enabled=False))

    integrations = client.get("/api/v1/integrations").json()
    assert [i["name"] for i in integrations] == ["Company Slack", "HRIS"]


def test_enabled_defaults_to_false(client):
    payload = _payload()
    del payload["enabled"]
    assert client.post("/api/v1/integrations", json=payload).json()["enabled"] is False


def test_config_must_be_json(client):
    assert client.post("/api/v1/integrations", json=_payload(config="{not json")).status_code == 422


def test_unknown_type(client):
    assert client.post("/api/v1/integrations", json=_payload(type="Jira")).status_code == 422


class TestUpdateIntegration:

    def test_partial_update(self, client):
        created = client.post("/api/v1/integrations", json=_payload()).json()

        response = client.put(f"/api/v1/integrations/{created['id']}", json={"enabled": False})
        assert response.status_code == 200
        body = response.json()
        assert body["enabled"] is False
        assert body["name"] == "Company Slack"
        assert body["type"] == "Communication"

    def test_config_replaced(self, client):
        created = client.post("/api/v1/integrations", json=_payload()).json()
        new_config = json.dumps({"channel": "#wins"})

        body = client.put(f"/api/v1/integrations/{created['id']}", json={"config": new_config}).json()
        assert json.loads(body["config"]) == {"channel": "#wins"}

    def test_invalid_config_rejected(self, client):
        created = client.post("/api/v1/integrations", json=_payload()).json()
        response = client.put(f"/api/v1/integrations/{created['id']}", json={"config": "nope"})
        assert response.status_code == 422

    def test_null_rejected(self, client):
        created = client.post("/api/v1/integrations", json=_payload()).json()
        assert client.put(f"/api/v1/integrations/{created['id']}", json={"name": None}).status_code == 422

    def test_missing(self, client):
        response = client.put("/api/v1/integrations/999", json={"enabled": True})
        assert response.status_code == 404
        assert response.json()["detail"] == "Integration with id 999 not found"
