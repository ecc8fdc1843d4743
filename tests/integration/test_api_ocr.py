"""
Integration tests for the batch extraction endpoint.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from tagscan.application.use_cases.extraction.batch_coordinator import BatchCoordinator
from tagscan.domain.constants.media_constants import ImageDetail
from tagscan.domain.models.extraction import BatchResult, ErrorKind, ExtractionOutcome


@pytest.fixture
def mock_coordinator(registered):
    coordinator = AsyncMock(spec=BatchCoordinator)
    registered[BatchCoordinator] = coordinator
    return coordinator


def photo(name, content=b"\xff\xd8jpeg", content_type="image/jpeg"):
    return ("photos", (name, content, content_type))


class TestExtractTextAPI:
    def test_requires_auth(self, client, registered):
        from tagscan.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
        from tagscan.core.exceptions import MissingCredentialError

        use_case = AsyncMock(spec=GetCurrentUserUseCase)
        use_case.execute.side_effect = MissingCredentialError("Not authorized, no token provided")
        registered[GetCurrentUserUseCase] = use_case

        response = client.post("/api/v1/ocr/extract-text", files=[photo("a.jpg")])
        assert response.status_code == 401

    def test_no_photos_returns_400(self, client, login_as, regular_user, mock_coordinator):
        login_as(regular_user)
        response = client.post("/api/v1/ocr/extract-text", data={"roomNumber": "B12"})
        assert response.status_code == 400
        assert response.json()["detail"] == "No photos uploaded."
        mock_coordinator.process_batch.assert_not_called()

    def test_batch_results_in_order(self, client, login_as, regular_user, mock_coordinator):
        login_as(regular_user)
        mock_coordinator.process_batch.return_value = BatchResult(outcomes=[
            ExtractionOutcome(raw_text="111", normalized_tag="111", asset_url="u1", persisted=True, record_id="t1"),
            ExtractionOutcome(raw_text="", error=ErrorKind.EXTRACTION, error_message="Vision API timeout"),
            ExtractionOutcome(raw_text="nothing here"),
        ])

        response = client.post(
            "/api/v1/ocr/extract-text",
            files=[photo("a.jpg"), photo("b.png", content_type="image/png"), photo("c.jpg")],
            data={"roomNumber": " B12 ", "detail": "HIGH"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["texts"] == ["111", "", "nothing here"]
        assert data["hadError"] is False
        assert data["results"][0]["normalizedTag"] == "111"
        assert data["results"][0]["tagId"] == "t1"
        assert data["results"][1]["error"] == "extraction_error"

        items, context = mock_coordinator.process_batch.call_args.args
        assert [i.filename for i in items] == ["a.jpg", "b.png", "c.jpg"]
        assert items[1].mime_type == "image/png"
        assert context.user_id == "usr-1"
        assert context.room_number == "B12"
        assert context.detail == ImageDetail.HIGH

    def test_all_failed_returns_502(self, client, login_as, regular_user, mock_coordinator):
        login_as(regular_user)
        mock_coordinator.process_batch.return_value = BatchResult(outcomes=[
            ExtractionOutcome(raw_text="", error=ErrorKind.EXTRACTION, error_message="down"),
        ])

        response = client.post("/api/v1/ocr/extract-text", files=[photo("a.jpg")])

        assert response.status_code == 502
        data = response.json()
        assert data["hadError"] is True
        assert data["texts"] == [""]
        assert data["error"]
