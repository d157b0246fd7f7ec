"""
Name: Facility Endpoint Tests

Responsibilities:
  - Validate /v1/facilities CRUD, deactivate, list ordering and CSV export
  - Validate RFC 7807 error bodies (422/404/409)
"""

from uuid import uuid4

import pytest

pytestmark = pytest.mark.unit


class TestCreateFacility:
    def test_create_parses_form_values(self, client):
        response = client.post(
            "/v1/facilities",
            json={
                "code": "OSK-01",
                "name": "Osaka Branch",
                "category": "BRANCH",
                "status": "ACTIVE",
                "latitude": "34.69",
                "capacity": 40,
                "start_date": "2024-04-01",
                "is_integrated": "yes",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["latitude"] == 34.69
        assert body["capacity"] == 40
        assert body["start_date"].startswith("2024-04-01T00:00:00")
        assert body["is_integrated"] is True
        assert body["country"] == "JP"

    def test_field_errors(self, client):
        response = client.post(
            "/v1/facilities",
            json={
                "code": "bad code",
                "name": "X",
                "category": "HEAD",
                "status": "ACTIVE",
                "postal_code": "12345",
            },
        )

        assert response.status_code == 422
        errors = [e for e in response.json()["errors"] if "field" in e]
        assert errors == [
            {"field": "code", "msg": "may only contain letters, digits and hyphens"},
            {"field": "postal_code", "msg": "must look like 123-4567"},
        ]

    def test_duplicate_code_is_409(self, client, create_facility):
        create_facility()

        response = client.post(
            "/v1/facilities",
            json={"code": "TKY-001", "name": "Dup", "category": "STORE", "status": "ACTIVE"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Facility code already exists."


class TestUpdateAndDeactivate:
    def test_patch(self, client, create_facility):
        created = create_facility(city="Chiyoda", capacity=10)

        response = client.patch(
            f"/v1/facilities/{created['id']}",
            json={"capacity": None, "name": "Tokyo HQ"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["capacity"] is None
        assert body["name"] == "Tokyo HQ"
        assert body["city"] == "Chiyoda"

    def test_patch_missing_is_404(self, client):
        response = client.patch(f"/v1/facilities/{uuid4()}", json={"name": "X"})

        assert response.status_code == 404

    def test_deactivate_with_end_date(self, client, create_facility):
        created = create_facility()

        response = client.post(
            f"/v1/facilities/{created['id']}/deactivate",
            json={"end_date": "2025-03-31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "INACTIVE"
        assert body["end_date"].startswith("2025-03-31T00:00:00")

    def test_deactivate_without_body(self, client, create_facility):
        created = create_facility(end_date="2030-01-01")

        response = client.post(f"/v1/facilities/{created['id']}/deactivate")

        assert response.status_code == 200
        assert response.json()["status"] == "INACTIVE"
        assert response.json()["end_date"] is None

    def test_deactivate_bad_date(self, client, create_facility):
        created = create_facility()

        response = client.post(
            f"/v1/facilities/{created['id']}/deactivate",
            json={"end_date": "next spring"},
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "end_date"

    def test_get_missing_is_404(self, client):
        assert client.get(f"/v1/facilities/{uuid4()}").status_code == 404


class TestListFacilities:
    def test_unfiltered_list_uses_display_order(self, client, create_facility):
        create_facility(code="C", display_order=2)
        create_facility(code="A")
        create_facility(code="B", display_order=1)

        body = client.get("/v1/facilities").json()

        assert [f["code"] for f in body["items"]] == ["B", "C", "A"]

    def test_filtered_list_uses_code(self, client, create_facility):
        create_facility(code="C", display_order=2, category="STORE")
        create_facility(code="A", category="STORE")
        create_facility(code="B", display_order=1, category="HEAD")

        body = client.get("/v1/facilities", params={"category": "STORE"}).json()

        assert [f["code"] for f in body["items"]] == ["A", "C"]

    def test_all_sentinel(self, client, create_facility):
        create_facility(code="A", status="CLOSED")

        body = client.get(
            "/v1/facilities", params={"category": "ALL", "status": "ALL"}
        ).json()

        assert body["page_info"]["total"] == 1

    def test_out_of_range_page_is_empty(self, client, create_facility):
        create_facility()

        body = client.get("/v1/facilities", params={"page": 4}).json()

        assert body["items"] == []
        assert body["page_info"]["has_prev"] is True
        assert body["page_info"]["has_next"] is False


class TestExportFacilities:
    def test_csv_export(self, client, create_facility):
        create_facility(code="A", prefecture="Tokyo", phone="03-0000-0000")

        response = client.get("/v1/facilities/export.csv")

        assert response.status_code == 200
        assert response.text == (
            '"code","name","category","status","prefecture","city","phone","email"\n'
            '"A","Tokyo Head Office","HEAD","ACTIVE","Tokyo","","03-0000-0000",""'
        )
