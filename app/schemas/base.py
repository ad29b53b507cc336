"""
Base schema configuration and common schemas.
"""

import math
from decimal import Decimal
from typing import Annotated
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    HttpUrl,
    PlainSerializer,
    TypeAdapter,
    ValidationError,
)


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


def _number_only(value):
    # Numeric strings are not amounts
    if isinstance(value, (str, bool)):
        raise ValueError("Input should be a number")
    return value


# Amounts are Decimal in Python and plain JSON numbers on the wire
Money = Annotated[
    Decimal,
    BeforeValidator(_number_only),
    PlainSerializer(float, return_type=float, when_used="json"),
]


_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url")
    return value


# Validated as an http(s) URL but kept as the caller's string
HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


def coerce_page(value: str | None) -> int:
    """Page number from the query string; anything unusable becomes 1."""
    page = _parse_int(value)
    if page is None or page < 1:
        return DEFAULT_PAGE
    return page


def coerce_limit(value: str | None) -> int:
    """Page size from the query string; anything outside 1..100 becomes 10."""
    limit = _parse_int(value)
    if limit is None or limit < 1 or limit > MAX_LIMIT:
        return DEFAULT_LIMIT
    return limit


class PaginationParams(BaseSchema):
    """Pagination parameters, already coerced."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseSchema):
    """Pagination block returned by every list endpoint."""

    page: int
    limit: int
    total: int
    totalPages: int
    hasNext: bool
    hasPrev: bool

    @classmethod
    def create(cls, total: int, params: PaginationParams) -> "PaginationMeta":
        total_pages = math.ceil(total / params.limit) if params.limit > 0 else 0
        return cls(
            page=params.page,
            limit=params.limit,
            total=total,
            totalPages=total_pages,
            hasNext=params.page < total_pages,
            hasPrev=params.page > 1,
        )


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str
