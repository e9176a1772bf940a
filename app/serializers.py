from typing import Any, Iterable, List, Mapping, Tuple, Union

from app.models import TimeBucketResponse

BucketCount = Union[Tuple[str, int], Mapping[str, Any]]


def serialize_time_buckets(buckets: Iterable[BucketCount]) -> List[dict]:
    """Turns the repository's (label, count) pairs into response records, keeping their order."""
    results = []
    for bucket in buckets:
        if isinstance(bucket, Mapping):
            time_bucket, count = bucket["timeBucket"], bucket["count"]
        else:
            time_bucket, count = bucket
        # repository output is trusted, so skip validation
        record = TimeBucketResponse.model_construct(time_bucket=time_bucket, count=count)
        results.append(record.model_dump(by_alias=True))
    return results
