"""Appeal messages and the rules that validate them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from reviewsvc.validation import Message, ValidationError


@dataclass
class AppealReviewRequest(Message):
    """A store's appeal against a review."""

    review_id: int = 0
    store_id: int = 0
    reason: str = ""
    content: str = ""
    pic_info: str = ""
    video_info: str = ""

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("ReviewID", self.review_id))
        yield from self._present(self._check_positive("StoreID", self.store_id))
        yield from self._present(self._check_length("Reason", self.reason, 2, 200))
        yield from self._present(self._check_length("Content", self.content, 2, 200))


@dataclass
class AppealReviewReply(Message):
    """The identifier of the stored appeal."""

    appeal_id: int = 0


@dataclass
class AuditAppealRequest(Message):
    """An operator's decision on a store's appeal."""

    appeal_id: int = 0
    review_id: int = 0
    status: int = 0
    op_user: str = ""
    op_remarks: str | None = None

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("AppealID", self.appeal_id))
        yield from self._present(self._check_positive("ReviewID", self.review_id))
        yield from self._present(self._check_positive("Status", self.status))
        yield from self._present(self._check_length("OpUser", self.op_user, 2))


@dataclass
class AuditAppealReply(Message):
    """The empty answer to an appeal audit."""