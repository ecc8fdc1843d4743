"""
Integration tests for /api/v1/manage/tags endpoints.
"""
from unittest.mock import AsyncMock

import pytest

pytestmark = pytest.mark.integration

from tagscan.application.dto.asset_tag_dto import AssetTagResponse
from tagscan.application.use_cases.asset_tag.delete_asset_tags import DeleteAssetTagsUseCase
from tagscan.application.use_cases.asset_tag.export_asset_tags import CsvExport, ExportAssetTagsUseCase
from tagscan.application.use_cases.asset_tag.list_asset_tags import ListAssetTagsUseCase
from tagscan.application.use_cases.asset_tag.update_asset_tag import UpdateAssetTagUseCase
from tagscan.core.exceptions import InputValidationError


@pytest.fixture
def use_cases(registered):
    mocks = {
        ListAssetTagsUseCase: AsyncMock(spec=ListAssetTagsUseCase),
        DeleteAssetTagsUseCase: AsyncMock(spec=DeleteAssetTagsUseCase),
        ExportAssetTagsUseCase: AsyncMock(spec=ExportAssetTagsUseCase),
        UpdateAssetTagUseCase: AsyncMock(spec=UpdateAssetTagUseCase),
    }
    registered.update(mocks)
    return mocks


class TestManageTagsAPI:
    def test_list_own_tags(self, client, login_as, regular_user, use_cases, make_record):
        login_as(regular_user)
        use_cases[ListAssetTagsUseCase].execute.return_value = [AssetTagResponse.from_record(make_record())]

        response = client.get("/api/v1/manage/tags")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["_id"] == "65a000000000000000000001"
        assert body[0]["assetTag"] == "12345"
        use_cases[ListAssetTagsUseCase].execute.assert_awaited_once_with("usr-1", room_number=None, day=None)

    def test_list_all_tags(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[ListAssetTagsUseCase].execute.return_value = []

        response = client.get("/api/v1/manage/tags/all")

        assert response.status_code == 200
        assert use_cases[ListAssetTagsUseCase].execute.call_args.args[0] is None

    def test_delete_missing_ids_returns_400(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[DeleteAssetTagsUseCase].execute.side_effect = InputValidationError("No tag IDs provided for deletion.")

        response = client.request("DELETE", "/api/v1/manage/tags", json={})

        assert response.status_code == 400

    def test_delete_none_matched_returns_404(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[DeleteAssetTagsUseCase].execute.return_value = 0

        response = client.request("DELETE", "/api/v1/manage/tags", json={"ids": ["65a000000000000000000009"]})

        assert response.status_code == 404

    def test_delete_success(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[DeleteAssetTagsUseCase].execute.return_value = 2

        response = client.request("DELETE", "/api/v1/manage/tags", json={"ids": ["a", "b"]})

        assert response.status_code == 200
        assert response.json()["message"].startswith("2 tag(s) deleted")

    def test_export_csv_attachment(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[ExportAssetTagsUseCase].execute.return_value = CsvExport(
            filename="asset_tags_export_2025-01-15.csv",
            content="Room Number,Asset Tag,Asset URL,Date Recorded\r\n",
        )

        response = client.get("/api/v1/manage/tags/export", params={"date": "2025-01-15"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "asset_tags_export_2025-01-15.csv" in response.headers["content-disposition"]

    def test_export_bad_date_returns_400(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[ExportAssetTagsUseCase].execute.side_effect = InputValidationError(
            "Invalid date format. Please use YYYY-MM-DD."
        )

        response = client.get("/api/v1/manage/tags/export", params={"date": "01-15-2025"})

        assert response.status_code == 400

    def test_export_empty_returns_404(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        use_cases[ExportAssetTagsUseCase].execute.return_value = None

        response = client.get("/api/v1/manage/tags/export")

        assert response.status_code == 404

    def test_update_requires_admin(self, client, login_as, regular_user, use_cases):
        login_as(regular_user)
        response = client.patch("/api/v1/manage/tags/t1", json={"roomNumber": "C3"})
        assert response.status_code == 403

    def test_update_by_admin(self, client, login_as, admin_user, use_cases, make_record):
        login_as(admin_user)
        use_cases[UpdateAssetTagUseCase].execute.return_value = AssetTagResponse.from_record(
            make_record(room_number="C3")
        )

        response = client.patch("/api/v1/manage/tags/t1", json={"roomNumber": "C3"})

        assert response.status_code == 200
        assert response.json()["roomNumber"] == "C3"

    def test_update_unknown_tag_returns_404(self, client, login_as, admin_user, use_cases):
        login_as(admin_user)
        use_cases[UpdateAssetTagUseCase].execute.side_effect = ValueError("Asset tag not found")

        response = client.patch("/api/v1/manage/tags/t1", json={"assetTag": "123"})

        assert response.status_code == 404
