"""Messages for listing reviews by user or by store."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from reviewsvc.review_messages import ReviewMessage
from reviewsvc.validation import Message, ValidationError


def _list_violations(
    owner: Message, items: list[ReviewMessage], all_errors: bool
) -> Iterator[ValidationError]:
    """Validate each embedded review, naming it by its position in the list."""
    for idx, item in enumerate(items):
        yield from owner._present(
            owner._check_embedded(f"List[{idx}]", item, all_errors)
        )


@dataclass
class ListReviewByUserIDRequest(Message):
    """A page of the reviews written by one user."""

    user_id: int = 0
    page: int = 0
    size: int = 0

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("UserID", self.user_id))
        yield from self._present(self._check_positive("Page", self.page))
        yield from self._present(self._check_positive("Size", self.size))


@dataclass
class ListReviewByUserIDReply(Message):
    """The reviews found for a user."""

    list: list[ReviewMessage] = field(default_factory=list)

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from _list_violations(self, self.list, all_errors)


@dataclass
class ListReviewByStoreIDRequest(Message):
    """A page of the reviews received by one store."""

    store_id: int = 0
    page: int = 0
    size: int = 0


@dataclass
class ListReviewByStoreIDReply(Message):
    """The reviews found for a store."""

    list: list[ReviewMessage] = field(default_factory=list)

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from _list_violations(self, self.list, all_errors)