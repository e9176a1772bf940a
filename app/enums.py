from enum import Enum


class TimeBucketSize(str, Enum):
    DAY = "DAY"
    MONTH = "MONTH"


class AssetOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
