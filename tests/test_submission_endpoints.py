"""Test the submission endpoints end to end"""

import logging
import uuid

from club_intake.models.database import get_db
from club_intake.main import app

logger = logging.getLogger(__name__)


class TestCreateSubmission:
    def test_create_returns_201(self, client, make_candidate):
        response = client.post("/submissions", json=make_candidate())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Form submitted successfully!"
        assert body["data"]["personalInfo"]["regNumber"] == "21BCE1234"
        assert body["data"]["status"] == "submitted"
        uuid.UUID(body["data"]["id"])

    def test_missing_section_returns_400(self, client, make_candidate):
        candidate = make_candidate()
        del candidate["teamBonding"]

        response = client.post("/submissions", json=candidate)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Missing required form sections (personalInfo, journey, teamBonding)",
        }

    def test_empty_section_returns_validation_errors(self, client, make_candidate):
        candidate = make_candidate()
        candidate["journey"] = {}

        response = client.post("/submissions", json=candidate)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert "journey.contribution" in body["validationErrors"]

    def test_validation_failure_returns_field_messages(self, client, make_candidate):
        response = client.post(
            "/submissions", json=make_candidate(journey={"overallContribution": 42})
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Validation failed"
        assert body["validationErrors"] == {
            "journey.overallContribution": "Overall contribution rating must be between 1 and 10"
        }

    def test_duplicate_returns_409(self, client, make_candidate):
        assert client.post("/submissions", json=make_candidate()).status_code == 201

        response = client.post("/submissions", json=make_candidate())

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "This registration number has already been submitted",
        }

    def test_invalid_json_returns_400(self, client):
        response = client.post(
            "/submissions",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["validationErrors"] == {
            "body": "Request body must be valid JSON"
        }


class TestListSubmissions:
    def test_list_with_pagination(self, client, make_candidate):
        for i in range(25):
            client.post("/submissions", json=make_candidate(reg_number=f"21BCE{1000 + i}"))

        response = client.get("/submissions", params={"page": 2, "limit": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["pagination"] == {
            "currentPage": 2,
            "totalPages": 3,
            "totalCount": 25,
            "hasNext": True,
            "hasPrev": True,
        }

    def test_list_filters_by_domain(self, client, make_candidate):
        client.post("/submissions", json=make_candidate(reg_number="21BCE1000"))
        client.post(
            "/submissions", json=make_candidate(reg_number="21BCE1001", domain="Design")
        )

        response = client.get("/submissions", params={"domain": "Design"})

        [record] = response.json()["data"]
        assert record["personalInfo"]["regNumber"] == "21BCE1001"

    def test_malformed_page_returns_400(self, client):
        response = client.get("/submissions", params={"page": "abc"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "page" in body["validationErrors"]

    def test_oversized_page_returns_400(self, client):
        response = client.get("/submissions", params={"page": "99999999999999999999"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "page" in body["validationErrors"]

    def test_store_failure_returns_500(self, client):
        class BrokenSession:
            def exec(self, *args, **kwargs):
                raise RuntimeError("database is down")

        app.dependency_overrides[get_db] = lambda: BrokenSession()

        response = client.get("/submissions")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "database is down"}


class TestReviewSubmission:
    def _create(self, client, make_candidate):
        return client.post("/submissions", json=make_candidate()).json()["data"]["id"]

    def test_update_status(self, client, make_candidate):
        submission_id = self._create(client, make_candidate)

        response = client.put(
            "/submissions",
            json={"id": submission_id, "status": "under_review", "reviewedBy": "Priya"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "under_review"
        assert data["reviewedBy"] == "Priya"
        assert data["reviewedAt"] is not None

    def test_update_without_id_returns_400(self, client):
        response = client.put("/submissions", json={"status": "approved"})

        assert response.status_code == 400
        assert response.json()["error"] == "Submission ID is required"

    def test_update_unknown_id_returns_404(self, client):
        response = client.put(
            "/submissions", json={"id": str(uuid.uuid4()), "status": "approved"}
        )

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Submission not found"}

    def test_update_with_unknown_status_returns_400(self, client, make_candidate):
        submission_id = self._create(client, make_candidate)

        response = client.put(
            "/submissions", json={"id": submission_id, "status": "shortlisted"}
        )

        assert response.status_code == 400
        assert "status" in response.json()["validationErrors"]

    def test_delete(self, client, make_candidate):
        submission_id = self._create(client, make_candidate)

        response = client.delete("/submissions", params={"id": submission_id})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": submission_id}
        assert client.get("/submissions").json()["pagination"]["totalCount"] == 0

    def test_delete_without_id_returns_400(self, client):
        response = client.delete("/submissions")

        assert response.status_code == 400
        assert response.json()["error"] == "Submission ID is required"

    def test_delete_unknown_returns_404(self, client):
        response = client.delete("/submissions", params={"id": str(uuid.uuid4())})

        assert response.status_code == 404


class TestValidateSectionEndpoint:
    def test_valid_page(self, client, make_candidate):
        response = client.post(
            "/submissions/validate/teamBonding", json=make_candidate()["teamBonding"]
        )

        assert response.status_code == 200
        assert response.json()["data"] == {"section": "teamBonding", "valid": True}

    def test_invalid_page(self, client, make_candidate):
        team_bonding = make_candidate()["teamBonding"]
        team_bonding["likelyToSeekHelp"] = 12

        response = client.post("/submissions/validate/teamBonding", json=team_bonding)

        assert response.status_code == 400
        assert response.json()["validationErrors"] == {
            "teamBonding.likelyToSeekHelp": "Likely to seek help rating must be between 1 and 10"
        }

    def test_unknown_page(self, client):
        response = client.post("/submissions/validate/hobbies", json={})

        assert response.status_code == 404
