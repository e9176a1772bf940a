import logging
from enum import Enum
from typing import Iterable, List

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class ValidationErrorCode(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    OUT_OF_RANGE = "OutOfRange"


# pydantic error types that don't map to InvalidFormat
_ERROR_CODES = {
    "missing": ValidationErrorCode.MISSING_FIELD,
    "enum": ValidationErrorCode.INVALID_ENUM_VALUE,
    "greater_than_equal": ValidationErrorCode.OUT_OF_RANGE,
    "less_than_equal": ValidationErrorCode.OUT_OF_RANGE,
}


class FieldError(BaseModel):
    field: str
    code: ValidationErrorCode
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    errors: List[FieldError]


class TimeBucketValidationError(ValueError):
    """Raised with every field that failed validation, not just the first."""

    def __init__(self, errors: Iterable[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.code.value}" for e in self.errors))

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "TimeBucketValidationError":
        errors = []
        for error in exc.errors():
            # nested locations such as ("query", "userId") are reported by the leaf name
            names = [str(part) for part in error["loc"] if isinstance(part, str)]
            errors.append(
                FieldError(
                    field=names[-1] if names else "",
                    code=_ERROR_CODES.get(error["type"], ValidationErrorCode.INVALID_FORMAT),
                    message=error["msg"],
                )
            )
        return cls(errors)


async def validation_error_handler(request: Request, exc: TimeBucketValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: invalid fields %s", request.method, request.url.path, exc.fields)
    body = ValidationErrorResponse(message="Invalid time bucket query", errors=exc.errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(mode="json"))
