"""Request validation rules and the core review request messages."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

GREATER_THAN_ZERO = "value must be greater than 0"
SCORE_CHOICES = frozenset({1, 2, 3, 4, 5})
SCORE_REASON = "value must be in list [1 2 3 4 5]"
EMBEDDED_REASON = "embedded message failed validation"


def length_between(low: int, high: int) -> str:
    """Reason text for a length range rule."""
    return f"value length must be between {low} and {high} runes, inclusive"


def length_at_least(low: int) -> str:
    """Reason text for a minimum length rule."""
    return f"value length must be at least {low} runes"


class ValidationError(ValueError):
    """One violated rule on one field of a message."""

    def __init__(
        self,
        message: str,
        field: str,
        reason: str,
        cause: BaseException | None = None,
        key: bool = False,
    ) -> None:
        self.message = message
        self.field = field
        self.reason = reason
        self.cause = cause
        self.key = key
        super().__init__(str(self))

    @property
    def error_name(self) -> str:
        return f"{self.message}ValidationError"

    def __str__(self) -> str:
        cause = f" | caused by: {self.cause}" if self.cause is not None else ""
        key = "key for " if self.key else ""
        return f"invalid {key}{self.message}.{self.field}: {self.reason}{cause}"


class MultiValidationError(ValueError):
    """All rules violated by a message."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "; ".join(str(err) for err in self.errors)


class Message:
    """Base for messages that carry validation rules."""

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        return iter(())

    def validate(self) -> None:
        """Raise the first rule violation, if any."""
        for err in self._violations(False):
            raise err

    def validate_all(self) -> None:
        """Raise a MultiValidationError holding every rule violation."""
        errors = list(self._violations(True))
        if errors:
            raise MultiValidationError(errors)

    def _error(
        self, field: str, reason: str, cause: BaseException | None = None
    ) -> ValidationError:
        return ValidationError(type(self).__name__, field, reason, cause)

    def _check_positive(self, field: str, value: int) -> ValidationError | None:
        return self._error(field, GREATER_THAN_ZERO) if value <= 0 else None

    def _check_length(
        self, field: str, value: str, low: int, high: int | None = None
    ) -> ValidationError | None:
        size = len(value)
        if high is None:
            return self._error(field, length_at_least(low)) if size < low else None
        if size < low or size > high:
            return self._error(field, length_between(low, high))
        return None

    def _check_embedded(
        self, field: str, child: Any, all_errors: bool
    ) -> ValidationError | None:
        if not isinstance(child, Message):
            return None
        try:
            if all_errors:
                child.validate_all()
            else:
                child.validate()
        except (ValidationError, MultiValidationError) as cause:
            return self._error(field, EMBEDDED_REASON, cause)
        return None

    @staticmethod
    def _present(*checks: ValidationError | None) -> Iterator[ValidationError]:
        return (check for check in checks if check is not None)


@dataclass
class CreateReviewRequest(Message):
    """A user's request to review an order."""

    user_id: int = 0
    order_id: int = 0
    store_id: int = 0
    score: int = 0
    service_score: int = 0
    express_score: int = 0
    content: str = ""
    pic_info: str = ""
    video_info: str = ""
    anonymous: bool = False

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("UserID", self.user_id))
        yield from self._present(self._check_positive("OrderID", self.order_id))
        yield from self._present(self._check_positive("StoreID", self.store_id))
        for field, value in (
            ("Score", self.score),
            ("ServiceScore", self.service_score),
            ("ExpressScore", self.express_score),
        ):
            if value not in SCORE_CHOICES:
                yield self._error(field, SCORE_REASON)
        yield from self._present(self._check_length("Content", self.content, 8, 255))


@dataclass
class CreateReviewReply(Message):
    """The identifier of a newly created review."""

    review_id: int = 0


@dataclass
class GetReviewRequest(Message):
    """A request for one review by its identifier."""

    review_id: int = 0

    def _violations(self, all_errors: bool) -> Iterator[ValidationError]:
        yield from self._present(self._check_positive("ReviewID", self.review_id))