"""Domain records, operation parameters and errors of the review service."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class ReviewServiceError(Exception):
    """Base class for business errors of the review service."""

    reason = "UNKNOWN"


class DbFailedError(ReviewServiceError):
    """The storage layer failed."""

    reason = "DB_FAILED"


class OrderReviewedError(ReviewServiceError):
    """The order already has a review."""

    reason = "ORDER_REVIEWED"


class NotFoundError(ReviewServiceError):
    """The requested record does not exist."""

    reason = "NOT_FOUND"


@dataclass
class ReplyParam:
    """A store's reply to a review."""

    review_id: int
    store_id: int
    content: str
    pic_info: str = ""
    video_info: str = ""


@dataclass
class AuditParam:
    """An operator's audit of a review."""

    review_id: int
    op_user: str
    op_reason: str
    op_remarks: str = ""
    status: int = 0


@dataclass
class AppealParam:
    """A store's appeal against a review."""

    review_id: int
    store_id: int
    reason: str
    content: str
    pic_info: str = ""
    video_info: str = ""
    op_user: str = ""


@dataclass
class AuditAppealParam:
    """An operator's decision on a store's appeal."""

    review_id: int
    appeal_id: int
    op_user: str
    status: int = 0


@dataclass
class ReviewInfo:
    """A user's review of an order."""

    id: int = 0
    review_id: int = 0
    order_id: int = 0
    sku_id: int = 0
    spu_id: int = 0
    store_id: int = 0
    user_id: int = 0
    score: int = 0
    service_score: int = 0
    express_score: int = 0
    content: str = ""
    pic_info: str = ""
    video_info: str = ""
    anonymous: int = 0
    has_media: int = 0
    status: int = 0
    is_default: int = 0
    has_reply: int = 0
    version: int = 0
    op_user: str = ""
    op_reason: str = ""
    op_remarks: str = ""
    create_at: datetime | None = None
    update_at: datetime | None = None


@dataclass
class ReviewReplyInfo:
    """A store's reply attached to a review."""

    id: int = 0
    reply_id: int = 0
    review_id: int = 0
    store_id: int = 0
    content: str = ""
    pic_info: str = ""
    video_info: str = ""


@dataclass
class ReviewAppealInfo:
    """A store's appeal against a review."""

    id: int = 0
    appeal_id: int = 0
    review_id: int = 0
    store_id: int = 0
    status: int = 0
    reason: str = ""
    content: str = ""
    pic_info: str = ""
    video_info: str = ""
    op_user: str = ""
    op_remarks: str = ""


@dataclass
class MyReviewInfo(ReviewInfo):
    """A review as stored in the search index, decoded by parse_review_source."""


_DATETIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{1,2}):(\d{2}):(\d{2})(?:[.,](\d+))?"
)
_INT_RE = re.compile(r"-?(?:0|[1-9]\d*)")

_INT32_FIELDS = (
    "anonymous",
    "score",
    "service_score",
    "express_score",
    "has_media",
    "status",
    "is_default",
    "has_reply",
    "version",
)
_INT64_FIELDS = (
    "id",
    "review_id",
    "order_id",
    "sku_id",
    "spu_id",
    "store_id",
    "user_id",
)
_TEXT_FIELDS = ("content", "pic_info", "video_info", "op_user", "op_reason", "op_remarks")
_TIME_FIELDS = ("create_at", "update_at")


def parse_datetime(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` (surrounding quotes allowed) as UTC."""
    stripped = text.strip('"')
    match = _DATETIME_RE.fullmatch(stripped)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as datetime")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    micro = int((fraction + "000000")[:6]) if fraction else 0
    try:
        return datetime(year, month, day, hour, minute, second, micro, tzinfo=timezone.utc)
    except ValueError as exc:
        raise ValueError(f"cannot parse {text!r} as datetime: {exc}") from exc


def _quoted_int(name: str, value: Any, bits: int) -> int | None:
    if value is None or value == "null":
        return None
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        raise ValueError(f"{name}: expected an integer in a string, got {value!r}")
    number = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        raise ValueError(f"{name}: value {value} out of range")
    return number


def parse_review_source(data: str | bytes | Mapping[str, Any]) -> MyReviewInfo:
    """Decode a search-index document into a MyReviewInfo.

    Integer fields are carried as strings and timestamps use the
    ``YYYY-MM-DD HH:MM:SS`` form. Unknown keys are ignored.
    """
    doc = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
    if not isinstance(doc, Mapping):
        raise ValueError("review source must be a JSON object")

    values: dict[str, Any] = {}
    for bits, names in ((32, _INT32_FIELDS), (64, _INT64_FIELDS)):
        for name in names:
            if name in doc:
                number = _quoted_int(name, doc[name], bits)
                if number is not None:
                    values[name] = number
    for name in _TEXT_FIELDS:
        value = doc.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"{name}: expected a string, got {value!r}")
        values[name] = value
    for name in _TIME_FIELDS:
        if name not in doc:
            continue
        value = doc[name]
        if not isinstance(value, str):
            raise ValueError(f"{name}: expected a datetime string, got {value!r}")
        values[name] = parse_datetime(value)
    return MyReviewInfo(**values)