"""Page-view ingestion request/response schemas."""

import re
import uuid

from pydantic import ConfigDict, Field, field_validator

from tracker.models.page_view import RouteType
from tracker.schemas.common import CamelModel

VISITOR_ID_LENGTH = 36
ROOM_MIN_LENGTH = 3
ROOM_MAX_LENGTH = 15

_CANONICAL_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class PageViewEvent(CamelModel):
    # wire names only; snake_case keys are ignored like any unknown field
    model_config = ConfigDict(extra="ignore", populate_by_name=False)

    visitor_id: uuid.UUID | None = None
    route: RouteType
    room: str | None = Field(
        None,
        min_length=ROOM_MIN_LENGTH,
        max_length=ROOM_MAX_LENGTH,
        pattern=r"^[a-z]+$",
    )

    @field_validator("visitor_id", mode="before")
    @classmethod
    def check_visitor_id(cls, value: object) -> object:
        """Reject ids that are not 36 characters; treat non-UUID 36-char ids as absent."""
        if value is None or value == "":
            return None
        if isinstance(value, uuid.UUID):
            return value
        if not isinstance(value, str) or len(value) != VISITOR_ID_LENGTH:
            raise ValueError(f"visitorId must be {VISITOR_ID_LENGTH} characters")
        if not _CANONICAL_UUID.match(value):
            return None
        return value

    @field_validator("room", mode="before")
    @classmethod
    def empty_room_is_absent(cls, value: object) -> object:
        return None if value == "" else value


class TrackPageViewResponse(CamelModel):
    visitor_id: uuid.UUID
