"""Review, audit and reply messages with their validation rules."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from reviewsvc.validation import Message, ValidationError


@dataclass
class ReviewMessage(Message):
    """A review as returned to callers; it carries no validation rules."""

    review_id: int = 0
    user_id: int = 0
    order_id: int = 0
    score: int = 0
    service_score: int = 0
    express_score: int = 0
    content: str = ""
    pic_info: str = ""
    video_info: str = ""
    status: int = 0

    def _error(
        self, field: str, reason: str, cause: BaseException | None = None
    ) -> ValidationError:
        return ValidationError("ReviewInfo", field, reason, cause)


@dataclass
class GetReviewReply(Message):
    """The review found for a GetReviewRequest."""

    data: ReviewMessage | None = None

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_embedded("Data", self.data, all_errors))


@dataclass
class AuditReviewRequest(Message):
    """An operator's audit decision on a review."""

    review_id: int = 0
    status: int = 0
    op_user: str = ""
    op_reason: str = ""
    op_remarks: str | None = None

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("ReviewID", self.review_id))
        yield from self._present(self._check_positive("Status", self.status))
        yield from self._present(self._check_length("OpUser", self.op_user, 2))
        yield from self._present(self._check_length("OpReason", self.op_reason, 2))


@dataclass
class AuditReviewReply(Message):
    """The outcome of an audit."""

    review_id: int = 0
    status: int = 0


@dataclass
class ReplyReviewRequest(Message):
    """A store's reply to a review."""

    review_id: int = 0
    store_id: int = 0
    content: str = ""
    pic_info: str = ""
    video_info: str = ""

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("ReviewID", self.review_id))
        yield from self._present(self._check_positive("StoreID", self.store_id))
        yield from self._present(self._check_length("Content", self.content, 2, 200))


@dataclass
class ReplyReviewReply(Message):
    """The identifier of a newly created reply."""

    reply_id: int = 0