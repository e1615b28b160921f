"""
HTTP tests through FastAPI's TestClient.

The client fixture starts the app against an in-memory store, so every test
begins with a freshly seeded sample dataset.
"""

import pytest
from fastapi.testclient import TestClient

from partnerhub.main import create_app
from partnerhub.storage.store import PrototypeStore


class TestHealth:

    def test_health(self, client):
        resp = client.get("/v1/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["storage_backend"] == "memory"
        assert body["storage_key"] == "test_db"
        assert body["tables"]["programs"] == 4
        assert body["seeded_at"] is not None


class TestStoreEndpoints:

    def test_snapshot(self, client):
        body = client.get("/v1/store").json()
        assert len(body["partners"]) == 7
        assert body["metadata"]["version"] == 1

    def test_seed_is_noop_on_seeded_store(self, client):
        body = client.post("/v1/store/seed").json()
        assert body["seeded"] is False
        assert body["counts"]["resources"] == 6

    def test_forced_seed(self, client):
        client.delete("/v1/tables/resources/resource-stc-it-toolkit")
        body = client.post("/v1/store/seed", params={"force": True}).json()
        assert body["seeded"] is True
        assert body["counts"]["resources"] == 6

    def test_reset_without_reseed(self, client):
        body = client.post("/v1/store/reset", params={"reseed": False}).json()
        assert all(count == 0 for count in body["counts"].values())
        assert client.get("/v1/programs/catalog").json() == []

    def test_reset_with_reseed(self, client):
        client.delete("/v1/programs/program-build-the-change")
        body = client.post("/v1/store/reset").json()
        assert body["seeded"] is True
        assert body["counts"]["programs"] == 4


class TestRecordEndpoints:

    def test_list_and_get(self, client):
        rows = client.get("/v1/tables/coordinators").json()
        assert len(rows) == 5
        one = client.get("/v1/tables/coordinators/coord-gb-sarah").json()
        assert one["first_name"] == "Sarah"

    def test_get_missing(self, client):
        assert client.get("/v1/tables/coordinators/coord-nope").status_code == 404

    def test_unknown_table(self, client):
        assert client.get("/v1/tables/gradebooks").status_code == 422

    def test_create(self, client):
        resp = client.post("/v1/tables/partners", json={"organization_name": "Green Schools Trust"})
        assert resp.status_code == 201
        created = resp.json()
        assert created["id"]
        assert created["created_at"] == created["updated_at"]
        assert client.get(f"/v1/tables/partners/{created['id']}").status_code == 200

    def test_create_duplicate_id(self, client):
        resp = client.post("/v1/tables/partners", json={"id": "partner-unicef", "organization_name": "Copy"})
        assert resp.status_code == 409

    def test_create_invalid(self, client):
        resp = client.post("/v1/tables/programs", json={"name": "No owner"})
        assert resp.status_code == 422

    def test_update(self, client):
        resp = client.patch("/v1/tables/programs/program-climate-voices", json={"status": "completed"})
        assert resp.status_code == 200
        assert resp.json()["status"] == "completed"
        assert resp.json()["id"] == "program-climate-voices"

    def test_update_missing(self, client):
        assert client.patch("/v1/tables/programs/program-nope", json={"status": "x"}).status_code == 404

    def test_delete(self, client):
        assert client.delete("/v1/tables/invitations/invite-coord-dk").status_code == 204
        assert client.delete("/v1/tables/invitations/invite-coord-dk").status_code == 404


class TestProgramEndpoints:

    def test_catalog(self, client):
        catalog = client.get("/v1/programs/catalog").json()
        assert [item["program_id"] for item in catalog] == [
            "program-build-the-change", "program-climate-voices", "program-play-to-learn",
        ]
        assert catalog[0]["metrics"]["students"] == 800

    def test_catalog_with_private(self, client):
        catalog = client.get("/v1/programs/catalog", params={"include_private": True}).json()
        assert len(catalog) == 4

    def test_summary(self, client):
        body = client.get("/v1/programs/program-climate-voices").json()
        assert body["metrics"]["pending_invitations"] == 2
        assert body["co_partners"][0]["partner"]["id"] == "partner-unicef-denmark"

    def test_summary_missing(self, client):
        assert client.get("/v1/programs/program-nope").status_code == 404

    def test_invitations_by_type(self, client):
        rows = client.get(
            "/v1/programs/program-climate-voices/invitations", params={"invitation_type": "coordinator"},
        ).json()
        assert [r["id"] for r in rows] == ["invite-coord-dk"]

    def test_cascade_delete(self, client):
        resp = client.delete("/v1/programs/program-build-the-change")
        assert resp.json() == {"program_id": "program-build-the-change", "records_removed": 14}
        assert client.get("/v1/programs/program-build-the-change").status_code == 404
        remaining = client.get("/v1/tables/institutions").json()
        assert all(row["program_id"] != "program-build-the-change" for row in remaining)

    def test_cascade_delete_missing(self, client):
        assert client.delete("/v1/programs/program-nope").status_code == 404


class TestPartnerEndpoints:

    def test_resolve(self, client):
        body = client.get("/v1/partners/resolve", params={"email": "anna.bianchi@savethechildren.it"}).json()
        assert body["partner_id"] == "partner-save-the-children-italy"
        assert body["partner_user"]["id"] == "puser-anna-bianchi"

    def test_programs_with_related(self, client):
        rows = client.get(
            "/v1/partners/partner-lego-foundation/programs", params={"include_related": True},
        ).json()
        assert [r["program"]["id"] for r in rows] == ["program-build-the-change", "program-play-to-learn"]

    def test_metrics(self, client):
        body = client.get("/v1/partners/partner-unicef-england/metrics").json()
        assert body["total_programs"] == 1
        assert body["students"] == 950

    def test_resources(self, client):
        rows = client.get("/v1/partners/partner-save-the-children-italy/resources").json()
        assert [r["id"] for r in rows] == [
            "resource-stc-italy-briefing", "resource-stc-it-toolkit", "resource-stc-safeguarding",
        ]


class TestContextEndpoints:

    def test_parent_context(self, client):
        body = client.get("/v1/parents/context", params={"organization": "UNICEF World Organization"}).json()
        assert body["network"] == "unicef"
        assert body["partner_ids"] == ["partner-unicef-england", "partner-unicef-denmark"]
        assert [p["program_id"] for p in body["programs"]] == ["program-climate-voices"]

    def test_parent_resources(self, client):
        assert len(client.get("/v1/parents/resources").json()) == 6

    def test_teacher_context(self, client):
        body = client.get("/v1/teachers/context", params={"email": "maria.lopez@esbj.edu.mx"}).json()
        assert body["program_ids"] == ["program-build-the-change", "program-rights-classroom"]

    def test_coordinator_context(self, client):
        body = client.get("/v1/coordinators/context", params={"email": "sarah.jones@unicef.org.uk"}).json()
        assert body["program_ids"] == ["program-climate-voices"]

    def test_school_context_unknown(self, client):
        body = client.get("/v1/schools/context", params={"email": "nobody@example.org"}).json()
        assert body["institutions"] == []


class TestCrossProcessWrites:

    def test_request_sees_write_from_another_store(self, client, backend):
        outsider = PrototypeStore(backend, key="test_db")
        outsider.create("partners", {"id": "partner-remote", "organization_name": "Remote Office"})
        assert client.get("/v1/tables/partners/partner-remote").status_code == 200


class TestStorageFailure:

    @pytest.fixture
    def flaky_client(self, settings, flaky_backend):
        app = create_app(settings=settings, prototype_store=PrototypeStore(flaky_backend, key="test_db"))
        with TestClient(app) as test_client:
            flaky_backend.fail_writes = True
            yield test_client

    def test_create_reports_unavailable(self, flaky_client):
        resp = flaky_client.post("/v1/tables/partners", json={"organization_name": "Green Schools Trust"})
        assert resp.status_code == 503

    def test_update_reports_unavailable(self, flaky_client):
        resp = flaky_client.patch("/v1/tables/programs/program-climate-voices", json={"status": "completed"})
        assert resp.status_code == 503

    def test_delete_reports_unavailable(self, flaky_client):
        assert flaky_client.delete("/v1/tables/invitations/invite-coord-dk").status_code == 503
        assert flaky_client.get("/v1/tables/invitations/invite-coord-dk").status_code == 200
