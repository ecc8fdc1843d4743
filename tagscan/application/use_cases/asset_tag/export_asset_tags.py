"""CSV export of stored asset tags"""

# Standard library imports
import csv
import io
import re
from dataclasses import dataclass
from typing import List, Optional

# Local application imports
from ....domain.models.asset_tag import AssetTagRecord
from ....domain.repositories.asset_tag_repository import AssetTagRepository
from ....core.exceptions import InputValidationError
from ....utils.datetime_utils import parse_day_range, to_iso

CSV_HEADERS = ["Room Number", "Asset Tag", "Asset URL", "Date Recorded"]
MISSING_ROOM = "N/A"
UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


def build_export_filename(day: Optional[str], room_number: Optional[str]) -> str:
    """
    Name the export after its most specific filter: the day, else the room,
    else "all". Room labels are reduced to filename-safe characters.
    """
    if day:
        suffix = day
    elif room_number:
        suffix = f"room_{UNSAFE_FILENAME_CHARS.sub('_', room_number)}"
    else:
        suffix = "all"
    return f"asset_tags_export_{suffix}.csv"


def render_csv(records: List[AssetTagRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow([
            record.room_number or MISSING_ROOM,
            record.asset_tag,
            record.asset_url,
            to_iso(record.scanned_at) or "",
        ])
    return buffer.getvalue()


class ExportAssetTagsUseCase:
    def __init__(self, asset_tag_repository: AssetTagRepository) -> None:
        self.asset_tag_repository = asset_tag_repository

    async def execute(
        self,
        owner_user_id: Optional[str],
        room_number: Optional[str] = None,
        day: Optional[str] = None,
    ) -> Optional[CsvExport]:
        """
        Export matching tags as CSV.

        Args:
            owner_user_id: Only this user's tags; None exports every user's tags
            room_number: Optional exact room filter
            day: Optional YYYY-MM-DD filter (UTC day)

        Returns:
            CsvExport, or None when no tags match the filters

        Raises:
            InputValidationError: If day is not a valid YYYY-MM-DD date
        """
        start_utc = end_utc = None
        if day:
            try:
                start_utc, end_utc = parse_day_range(day)
            except ValueError as e:
                raise InputValidationError(str(e)) from e

        records = await self.asset_tag_repository.list(
            owner_user_id=owner_user_id,
            room_number=room_number or None,
            start_utc=start_utc,
            end_utc=end_utc,
        )
        if not records:
            return None

        return CsvExport(
            filename=build_export_filename(day, room_number),
            content=render_csv(records),
        )
