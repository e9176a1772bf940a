import logging
from typing import Any, Mapping

from pydantic import ValidationError

from app.errors import TimeBucketValidationError
from app.models import TimeBucketAssetQuery, TimeBucketQuery

logger = logging.getLogger(__name__)


def validate_time_bucket_query(params: Mapping[str, Any]) -> TimeBucketQuery:
    """
    Builds a TimeBucketQuery from raw request parameters.
    Raises TimeBucketValidationError listing every invalid field.
    """
    try:
        query = TimeBucketQuery.model_validate(dict(params))
    except ValidationError as e:
        raise TimeBucketValidationError.from_pydantic(e) from e

    _log_partial_bounding_box(query)
    return query


def validate_time_bucket_asset_query(params: Mapping[str, Any]) -> TimeBucketAssetQuery:
    """
    Same as validate_time_bucket_query, plus the required timeBucket key.
    Filter errors and a missing timeBucket are reported together.
    """
    raw = dict(params)
    time_bucket = raw.get("timeBucket", raw.get("time_bucket"))
    try:
        query = TimeBucketAssetQuery.model_validate({"query": raw, "timeBucket": time_bucket})
    except ValidationError as e:
        raise TimeBucketValidationError.from_pydantic(e) from e

    _log_partial_bounding_box(query.query)
    return query


def _log_partial_bounding_box(query: TimeBucketQuery) -> None:
    # Partial boxes are passed through; the repository decides what they mean.
    if query.has_partial_bounding_box:
        logger.debug(
            "Partial bounding box: x1=%s y1=%s x2=%s y2=%s",
            query.x1, query.y1, query.x2, query.y2,
        )
