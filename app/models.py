from typing import Annotated, Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.enums import AssetOrder, TimeBucketSize

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

UUIDString = Annotated[str, StringConstraints(pattern=UUID_PATTERN)]

Longitude = Annotated[float, Field(ge=-180, le=180, allow_inf_nan=False, json_schema_extra={"format": "double"})]
Latitude = Annotated[float, Field(ge=-90, le=90, allow_inf_nan=False, json_schema_extra={"format": "double"})]


def _require_value(value: Any) -> Any:
    # Empty strings count as absent, the same as a missing query parameter.
    if value is None or value == "":
        raise PydanticCustomError("missing", "Field required")
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class TimeBucketQuery(CamelModel):
    """Filters for grouping assets into time buckets.

    Every field except ``size`` is optional; ``None`` means the filter is not applied.
    """

    size: TimeBucketSize
    user_id: Optional[UUIDString] = None
    album_id: Optional[UUIDString] = None
    person_id: Optional[UUIDString] = None
    tag_id: Optional[UUIDString] = None
    is_archived: Optional[bool] = None
    is_favorite: Optional[bool] = None
    is_trashed: Optional[bool] = None
    with_stacked: Optional[bool] = None
    with_partners: Optional[bool] = None
    order: Optional[AssetOrder] = None
    x1: Optional[Longitude] = None
    y1: Optional[Latitude] = None
    x2: Optional[Longitude] = None
    y2: Optional[Latitude] = None

    _require_size = field_validator("size", mode="before")(_require_value)

    @property
    def bounding_box(self) -> Optional[Tuple[float, float, float, float]]:
        """The ``(x1, y1, x2, y2)`` box, or None unless all four corners were given."""
        corners = (self.x1, self.y1, self.x2, self.y2)
        if any(c is None for c in corners):
            return None
        return corners

    @property
    def has_partial_bounding_box(self) -> bool:
        corners = (self.x1, self.y1, self.x2, self.y2)
        return self.bounding_box is None and any(c is not None for c in corners)

    def filters(self) -> dict:
        """Populated fields keyed by their wire names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class TimeBucketAssetQuery(CamelModel):
    """Drill-down into the assets of one bucket, reusing the bucket filters."""

    query: TimeBucketQuery
    time_bucket: str

    _require_time_bucket = field_validator("time_bucket", mode="before")(_require_value)

    def filters(self) -> dict:
        return {**self.query.filters(), "timeBucket": self.time_bucket}


class TimeBucketResponse(CamelModel):
    time_bucket: str
    count: int = Field(ge=0)
