"""
Unit tests for asset tag management use cases (list, delete, export, update)
"""
import csv
import io
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from tagscan.application.dto.asset_tag_dto import AssetTagUpdateRequest
from tagscan.application.use_cases.asset_tag.delete_asset_tags import DeleteAssetTagsUseCase
from tagscan.application.use_cases.asset_tag.export_asset_tags import (
    ExportAssetTagsUseCase,
    build_export_filename,
)
from tagscan.application.use_cases.asset_tag.list_asset_tags import ListAssetTagsUseCase
from tagscan.application.use_cases.asset_tag.update_asset_tag import UpdateAssetTagUseCase
from tagscan.core.exceptions import InputValidationError


@pytest.fixture
def mock_asset_tag_repo():
    return AsyncMock()


class TestListAssetTags:
    @pytest.mark.asyncio
    async def test_lists_own_tags(self, mock_asset_tag_repo, make_record):
        mock_asset_tag_repo.list.return_value = [make_record()]

        result = await ListAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1")

        assert len(result) == 1
        assert result[0].asset_tag == "12345"
        dumped = result[0].model_dump(by_alias=True)
        assert dumped["_id"] == "65a000000000000000000001"
        assert dumped["userId"] == "usr-1"
        mock_asset_tag_repo.list.assert_awaited_once_with(
            owner_user_id="usr-1", room_number=None, start_utc=None, end_utc=None
        )

    @pytest.mark.asyncio
    async def test_day_filter_converted_to_utc_window(self, mock_asset_tag_repo):
        mock_asset_tag_repo.list.return_value = []

        await ListAssetTagsUseCase(mock_asset_tag_repo).execute(None, room_number="B12", day="2025-01-15")

        kwargs = mock_asset_tag_repo.list.call_args.kwargs
        assert kwargs["owner_user_id"] is None
        assert kwargs["room_number"] == "B12"
        assert kwargs["start_utc"] == datetime(2025, 1, 15, tzinfo=timezone.utc)
        assert kwargs["end_utc"].day == 15

    @pytest.mark.asyncio
    async def test_bad_day_rejected(self, mock_asset_tag_repo):
        with pytest.raises(InputValidationError):
            await ListAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1", day="15/01/2025")
        mock_asset_tag_repo.list.assert_not_called()


class TestDeleteAssetTags:
    @pytest.mark.asyncio
    async def test_deletes_only_callers_tags(self, mock_asset_tag_repo):
        mock_asset_tag_repo.delete_many.return_value = 2

        deleted = await DeleteAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1", ["a", "b"])

        assert deleted == 2
        mock_asset_tag_repo.delete_many.assert_awaited_once_with("usr-1", ["a", "b"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ids", [None, []])
    async def test_empty_ids_rejected(self, mock_asset_tag_repo, ids):
        with pytest.raises(InputValidationError, match="No tag IDs"):
            await DeleteAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1", ids)


class TestExportAssetTags:
    @pytest.mark.asyncio
    async def test_csv_content(self, mock_asset_tag_repo, make_record):
        mock_asset_tag_repo.list.return_value = [
            make_record(asset_tag="111", room_number="B12"),
            make_record(asset_tag="222"),
        ]

        export = await ExportAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1", day="2025-01-15")

        rows = list(csv.reader(io.StringIO(export.content)))
        assert rows[0] == ["Room Number", "Asset Tag", "Asset URL", "Date Recorded"]
        assert rows[1][:2] == ["B12", "111"]
        assert rows[1][3] == "2025-01-15T12:00:00.000Z"
        assert rows[2][0] == "N/A"
        assert export.filename == "asset_tags_export_2025-01-15.csv"

    @pytest.mark.asyncio
    async def test_no_rows_returns_none(self, mock_asset_tag_repo):
        mock_asset_tag_repo.list.return_value = []
        assert await ExportAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1") is None

    @pytest.mark.asyncio
    async def test_invalid_date_rejected(self, mock_asset_tag_repo):
        with pytest.raises(InputValidationError, match="Invalid date value"):
            await ExportAssetTagsUseCase(mock_asset_tag_repo).execute("usr-1", day="2025-02-30")

    @pytest.mark.parametrize(
        "day, room_number, expected",
        [
            ("2025-01-15", "B12", "asset_tags_export_2025-01-15.csv"),
            (None, "12B", "asset_tags_export_room_12B.csv"),
            (None, None, "asset_tags_export_all.csv"),
            (None, "", "asset_tags_export_all.csv"),
        ],
    )
    def test_filename_uses_most_specific_filter(self, day, room_number, expected):
        assert build_export_filename(day, room_number) == expected

    def test_room_label_made_header_safe(self):
        filename = build_export_filename(None, 'Lab "A"; 2/3')

        assert filename == "asset_tags_export_room_Lab__A___2_3.csv"

    @pytest.mark.asyncio
    async def test_all_users_export_named_after_room(self, mock_asset_tag_repo, make_record):
        mock_asset_tag_repo.list.return_value = [make_record(room_number="12B")]

        export = await ExportAssetTagsUseCase(mock_asset_tag_repo).execute(None, room_number="12B")

        assert export.filename == "asset_tags_export_room_12B.csv"


class TestUpdateAssetTag:
    @pytest.mark.asyncio
    async def test_tag_renormalized_and_url_recomputed(self, mock_asset_tag_repo, make_record):
        mock_asset_tag_repo.update.side_effect = lambda tag_id, asset_tag, asset_url, room_number: replace(
            make_record(), asset_tag=asset_tag, asset_url=asset_url
        )
        use_case = UpdateAssetTagUseCase(mock_asset_tag_repo, "https://inventory.test/item/{tag}")

        result = await use_case.execute("tag-1", AssetTagUpdateRequest(assetTag=' "0042" '))

        assert result.asset_tag == "0042"
        assert result.asset_url == "https://inventory.test/item/000000000042"

    @pytest.mark.asyncio
    async def test_room_only_update(self, mock_asset_tag_repo, make_record):
        mock_asset_tag_repo.update.return_value = make_record(room_number="C3")

        result = await UpdateAssetTagUseCase(mock_asset_tag_repo).execute(
            "tag-1", AssetTagUpdateRequest(roomNumber="C3")
        )

        assert result.room_number == "C3"
        mock_asset_tag_repo.update.assert_awaited_once_with(
            "tag-1", asset_tag=None, asset_url=None, room_number="C3"
        )

    @pytest.mark.asyncio
    async def test_non_digit_tag_rejected(self, mock_asset_tag_repo):
        with pytest.raises(InputValidationError, match="digits only"):
            await UpdateAssetTagUseCase(mock_asset_tag_repo).execute(
                "tag-1", AssetTagUpdateRequest(assetTag="ABC-1")
            )
        mock_asset_tag_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_tag_raises_value_error(self, mock_asset_tag_repo):
        mock_asset_tag_repo.update.return_value = None
        with pytest.raises(ValueError, match="not found"):
            await UpdateAssetTagUseCase(mock_asset_tag_repo).execute(
                "tag-1", AssetTagUpdateRequest(roomNumber="C3")
            )
