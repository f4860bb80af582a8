"""Tests for the HTTP API"""

import pytest
from fastapi.testclient import TestClient

from artist_contracts.api.app import create_app
from artist_contracts.data.templates import ARTIST_AGREEMENT_SAMPLE_DATA
from artist_contracts.db import SQLiteClient

SAMPLE = ARTIST_AGREEMENT_SAMPLE_DATA.model_dump(mode="json")


@pytest.fixture
def client(seeded_db):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def artist_id(artist_template):
    return artist_template.id


class TestTemplatesApi:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_list(self, client):
        response = client.get("/api/templates")
        assert response.status_code == 200
        templates = response.json()["templates"]
        assert len(templates) == 5
        assert templates[0]["name"] == "Artist Collaboration Agreement"
        assert templates[0]["clause_count"] == 3

    def test_list_by_category(self, client):
        templates = client.get("/api/templates", params={"category": "touring"}).json()["templates"]
        assert [t["name"] for t in templates] == ["Tour/Performance Agreement"]

    def test_list_bad_category(self, client):
        assert client.get("/api/templates", params={"category": "opera"}).status_code == 422

    def test_search(self, client):
        templates = client.get("/api/templates", params={"search": "sample"}).json()["templates"]
        assert [t["name"] for t in templates] == ["Sample Clearance Agreement"]

    def test_get_template(self, client, artist_id):
        response = client.get(f"/api/templates/{artist_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["content"]["title"] == "ARTIST COLLABORATION AGREEMENT"
        assert len(body["optional_clauses"]) == 3

    def test_get_unknown_template(self, client):
        assert client.get("/api/templates/nope").status_code == 404

    def test_variables(self, client, artist_id):
        variables = client.get(f"/api/templates/{artist_id}/variables").json()["variables"]
        assert variables[0] == "effective_date"
        assert "exclusivity_period" in variables

    def test_validate_invalid(self, client, artist_id):
        response = client.post(f"/api/templates/{artist_id}/validate", json={"form_data": {}})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["errors"]["party_a_name"] == "Party A Name is required"

    def test_validate_boolean_rejected(self, client, artist_id):
        response = client.post(
            f"/api/templates/{artist_id}/validate",
            json={"form_data": {"fields": {"advance_amount": True}}},
        )
        assert response.status_code == 422

    def test_validate_sample(self, client, artist_id):
        body = client.post(f"/api/templates/{artist_id}/validate", json={"form_data": SAMPLE}).json()
        assert body == {"valid": True, "errors": {}}

    def test_render(self, client, artist_id):
        response = client.post(
            f"/api/templates/{artist_id}/render",
            json={"form_data": SAMPLE, "include_styles": False},
        )
        assert response.status_code == 200
        body = response.json()
        assert len(body["sections"]) == 8
        assert "15 January 2025" in body["text"]
        assert "<style>" not in body["html"]
        assert body["missing_variables"] == []

    def test_validate_unknown_template(self, client):
        assert client.post("/api/templates/nope/validate", json={}).status_code == 404

    def test_render_loads_template_once(self, client, artist_id, monkeypatch):
        calls = []
        original = SQLiteClient.get_template

        def counting(self, template_id):
            calls.append(template_id)
            return original(self, template_id)

        monkeypatch.setattr(SQLiteClient, "get_template", counting)
        response = client.post(f"/api/templates/{artist_id}/render", json={"form_data": SAMPLE})
        assert response.status_code == 200
        assert calls == [artist_id]

    def test_render_unknown_template(self, client):
        assert client.post("/api/templates/nope/render", json={}).status_code == 404


class TestDraftsApi:

    def _create(self, client, artist_id) -> dict:
        response = client.post("/api/drafts", json={"template_id": artist_id})
        assert response.status_code == 201
        return response.json()

    def test_create_and_get(self, client, artist_id):
        draft = self._create(client, artist_id)
        assert draft["version"] == 1
        assert draft["form_data"]["enabled_clauses"] == ["credit_requirements", "termination"]

        fetched = client.get(f"/api/drafts/{draft['id']}").json()
        assert fetched["id"] == draft["id"]

    def test_create_for_unknown_template(self, client):
        assert client.post("/api/drafts", json={"template_id": "nope"}).status_code == 404

    def test_patch_fields(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.patch(
            f"/api/drafts/{draft['id']}/fields",
            json={"fields": {"party_a_name": "Jane", "party_b_name": "John"}, "expected_version": 1},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == 2
        assert body["form_data"]["fields"]["party_a_name"] == "Jane"
        assert body["form_data"]["fields"]["party_b_name"] == "John"

    def test_patch_conflict(self, client, artist_id):
        draft = self._create(client, artist_id)
        url = f"/api/drafts/{draft['id']}/fields"
        client.patch(url, json={"fields": {"party_a_name": "Jane"}, "expected_version": 1})

        response = client.patch(url, json={"fields": {"party_a_name": "Janet"}, "expected_version": 1})
        assert response.status_code == 409

    def test_patch_unknown_field(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.patch(f"/api/drafts/{draft['id']}/fields", json={"fields": {"ghost": "x"}})
        assert response.status_code == 400

    def test_patch_unknown_field_leaves_draft_untouched(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.patch(
            f"/api/drafts/{draft['id']}/fields",
            json={"fields": {"party_a_name": "Mallory", "ghost": "x"}},
        )
        assert response.status_code == 400

        stored = client.get(f"/api/drafts/{draft['id']}").json()
        assert stored["version"] == 1
        assert "party_a_name" not in stored["form_data"]["fields"]

    def test_patch_boolean_rejected(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.patch(
            f"/api/drafts/{draft['id']}/fields",
            json={"fields": {"advance_amount": True}},
        )
        assert response.status_code == 422

    def test_toggle_clause(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.post(
            f"/api/drafts/{draft['id']}/clauses/exclusivity/toggle",
            json={"expected_version": 1},
        )
        assert response.status_code == 200
        assert "exclusivity" in response.json()["form_data"]["enabled_clauses"]

    def test_toggle_unknown_clause(self, client, artist_id):
        draft = self._create(client, artist_id)
        response = client.post(f"/api/drafts/{draft['id']}/clauses/ghost/toggle", json={})
        assert response.status_code == 400

    def test_delete(self, client, artist_id):
        draft = self._create(client, artist_id)
        assert client.delete(f"/api/drafts/{draft['id']}").status_code == 204
        assert client.get(f"/api/drafts/{draft['id']}").status_code == 404
        assert client.delete(f"/api/drafts/{draft['id']}").status_code == 404


class TestContractsApi:

    def test_create_invalid(self, client, artist_id):
        response = client.post(
            "/api/contracts/from-template",
            json={"template_id": artist_id, "form_data": {"fields": {"party_a_split": 150}}},
        )
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["message"] == "Validation failed"
        assert detail["errors"]["party_a_split"] == "Party A Revenue Share (%) must be at most 100"

    def test_create_and_fetch(self, client, artist_id):
        response = client.post(
            "/api/contracts/from-template",
            json={"template_id": artist_id, "form_data": SAMPLE},
        )
        assert response.status_code == 201
        contract = response.json()
        assert contract["title"] == "ARTIST COLLABORATION AGREEMENT"
        assert "Party A: 50%" in contract["text"]

        fetched = client.get(f"/api/contracts/{contract['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["html"] == contract["html"]

    def test_create_from_draft_discards_it(self, client, artist_id):
        draft = client.post("/api/drafts", json={"template_id": artist_id}).json()
        response = client.post(
            "/api/contracts/from-template",
            json={"template_id": artist_id, "form_data": SAMPLE, "draft_id": draft["id"]},
        )
        assert response.status_code == 201
        assert client.get(f"/api/drafts/{draft['id']}").status_code == 404

    def test_unknown_template(self, client):
        response = client.post(
            "/api/contracts/from-template",
            json={"template_id": "nope", "form_data": SAMPLE},
        )
        assert response.status_code == 404

    def test_unknown_contract(self, client):
        assert client.get("/api/contracts/nope").status_code == 404
