import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from app.errors import ValidationErrorResponse
from app.models import TimeBucketAssetQuery, TimeBucketQuery, TimeBucketResponse
from app.openapi import query_parameters
from app.repository import TimelineRepository, get_timeline_repository
from app.serializers import serialize_time_buckets
from app.validation import validate_time_bucket_asset_query, validate_time_bucket_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/timeline", tags=["timeline"])

_BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Invalid query parameters"}}


# Query parameters are validated here instead of by FastAPI so that
# every failure is reported with its MissingField/InvalidFormat/... code.
async def time_bucket_query(request: Request) -> TimeBucketQuery:
    return validate_time_bucket_query(request.query_params)


async def time_bucket_asset_query(request: Request) -> TimeBucketAssetQuery:
    return validate_time_bucket_asset_query(request.query_params)


@router.get(
    "/buckets",
    response_model=List[TimeBucketResponse],
    responses=_BAD_REQUEST,
    openapi_extra={"parameters": query_parameters(TimeBucketQuery)},
)
async def get_time_buckets(
    query: TimeBucketQuery = Depends(time_bucket_query),
    repository: TimelineRepository = Depends(get_timeline_repository),
):
    """Number of assets in each non-empty time bucket, ordered by ``order``."""
    logger.debug("Time buckets requested with filters %s", query.filters())
    buckets = await repository.get_time_buckets(query)
    return serialize_time_buckets(buckets)


@router.get(
    "/bucket",
    response_model=List[str],
    responses=_BAD_REQUEST,
    openapi_extra={
        "parameters": query_parameters(TimeBucketQuery)
        + query_parameters(TimeBucketAssetQuery, exclude=["query"])
    },
)
async def get_time_bucket(
    query: TimeBucketAssetQuery = Depends(time_bucket_asset_query),
    repository: TimelineRepository = Depends(get_timeline_repository),
):
    """Ids of the assets in one time bucket."""
    logger.debug("Time bucket %s requested with filters %s", query.time_bucket, query.filters())
    return list(await repository.get_time_bucket(query))
