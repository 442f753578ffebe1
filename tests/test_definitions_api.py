"""HTTP surface for rendering definitions."""

from fastapi.testclient import TestClient

from indexdef.controllers.routes import definitions as definitions_routes
from indexdef.main import app

client = TestClient(app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_profiles():
    r = client.get("/definitions/profiles")
    assert r.status_code == 200, r.text
    assert "fulltext_default" in r.json()["profiles"]


def test_get_profile():
    r = client.get("/definitions/fulltext_default")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["profile"] == "fulltext_default"
    rule = data["definition"]["indexRules"]["nt:base"]
    assert rule["properties"]["prop0"]["name"] == "jcr:title"
    assert data["definition"]["aggregates"]["nt:file"]["include0"]["path"] == "jcr:content"


def test_get_unknown_profile():
    r = client.get("/definitions/nope")
    assert r.status_code == 404


def test_post_profile_name():
    r = client.post("/definitions", json={"definition": "property_lookup"})
    assert r.status_code == 200, r.text
    assert r.json()["profile"] == "property_lookup"


def test_post_inline():
    payload = {
        "definition": {
            "included_paths": ["/content"],
            "index_rules": [{"type_name": "nt:base", "properties": [{"name": "x", "type": "Long"}]}],
        }
    }
    r = client.post("/definitions", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["profile"] is None
    assert data["definition"]["includedPaths"] == ["/content"]
    assert data["definition"]["indexRules"]["nt:base"]["properties"]["prop0"]["type"] == "Long"


def test_post_inline_with_invalid_type():
    payload = {"definition": {"index_rules": [{"type_name": "nt:base", "properties": [{"name": "x", "type": "Nope"}]}]}}
    r = client.post("/definitions", json=payload)
    assert r.status_code == 422, r.text
    assert "Unknown value type name" in r.json()["detail"]


def test_post_inline_with_missing_rule_type():
    r = client.post("/definitions", json={"definition": {"index_rules": [{"index_node_name": True}]}})
    assert r.status_code == 422, r.text


def test_post_unknown_profile():
    r = client.post("/definitions", json={"definition": "nope"})
    assert r.status_code == 404, r.text
    assert "Unknown index definition profile" in r.json()["detail"]


def test_unexpected_error_does_not_leak_details(monkeypatch):
    def broken(_profile_or_inline):
        raise RuntimeError("secret internal state")

    monkeypatch.setattr(definitions_routes, "render_definition", broken)
    unsafe_client = TestClient(app, raise_server_exceptions=False)
    r = unsafe_client.post("/definitions", json={"definition": "fulltext_default"})
    assert r.status_code == 500
    assert r.json() == {"detail": "An internal error occurred."}
    assert "secret" not in r.text
