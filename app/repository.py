from typing import Protocol, Sequence

from fastapi import HTTPException, Request

from app.models import TimeBucketAssetQuery, TimeBucketQuery
from app.serializers import BucketCount


class TimelineRepository(Protocol):
    """
    Computes time buckets for a validated query.
    Implementations must honor every populated filter and use ``size`` for bucket granularity.
    """

    async def get_time_buckets(self, query: TimeBucketQuery) -> Sequence[BucketCount]:
        ...

    async def get_time_bucket(self, query: TimeBucketAssetQuery) -> Sequence[str]:
        ...


# Dependency Injection for the repository
async def get_timeline_repository(request: Request) -> TimelineRepository:
    repository = getattr(request.app.state, "timeline_repository", None)
    if repository is None:
        raise HTTPException(status_code=503, detail="Timeline repository is not configured")
    return repository
