import pytest

from reviewsvc.review_messages import (
    AuditReviewReply,
    AuditReviewRequest,
    GetReviewReply,
    ReplyReviewReply,
    ReplyReviewRequest,
    ReviewMessage,
)
from reviewsvc.validation import MultiValidationError, ValidationError


def _good_audit(**overrides):
    values = dict(review_id=7, status=20, op_user="op", op_reason="ok")
    values.update(overrides)
    return AuditReviewRequest(**values)


def _good_reply(**overrides):
    values = dict(review_id=7, store_id=3, content="thanks")
    values.update(overrides)
    return ReplyReviewRequest(**values)


def test_review_message_validates_any_values():
    msg = ReviewMessage(review_id=-1, score=99, content="")
    msg.validate()
    msg.validate_all()
    assert msg.score == 99


def test_get_review_reply_with_data_and_without():
    reply = GetReviewReply(data=ReviewMessage(review_id=5))
    reply.validate()
    reply.validate_all()
    assert reply.data.review_id == 5
    empty = GetReviewReply()
    empty.validate_all()
    assert empty.data is None


def test_audit_request_valid():
    req = _good_audit(op_remarks=None)
    req.validate()
    req.validate_all()
    assert req.op_remarks is None


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"review_id": 0}, "ReviewID"),
        ({"status": -1}, "Status"),
        ({"op_user": "a"}, "OpUser"),
        ({"op_reason": ""}, "OpReason"),
    ],
)
def test_audit_request_single_violation(overrides, field):
    with pytest.raises(ValidationError) as info:
        _good_audit(**overrides).validate()
    assert info.value.field == field


def test_audit_request_error_text():
    with pytest.raises(ValidationError) as info:
        _good_audit(op_user="x").validate()
    assert str(info.value) == (
        "invalid AuditReviewRequest.OpUser: value length must be at least 2 runes"
    )
    assert info.value.error_name == "AuditReviewRequestValidationError"


def test_audit_request_validate_returns_first_error():
    req = AuditReviewRequest()
    with pytest.raises(ValidationError) as info:
        req.validate()
    assert info.value.field == "ReviewID"


def test_audit_request_validate_all_collects_in_order():
    with pytest.raises(MultiValidationError) as info:
        AuditReviewRequest().validate_all()
    fields = [err.field for err in info.value.errors]
    assert fields == ["ReviewID", "Status", "OpUser", "OpReason"]
    assert str(info.value) == "; ".join(str(e) for e in info.value.errors)


def test_audit_request_counts_characters_not_bytes():
    _good_audit(op_user="运营", op_reason="违规").validate()
    with pytest.raises(ValidationError):
        _good_audit(op_user="运").validate()


def test_audit_reply_has_no_rules():
    reply = AuditReviewReply(review_id=0, status=0)
    reply.validate_all()
    assert (reply.review_id, reply.status) == (0, 0)


def test_reply_request_valid():
    req = _good_reply(pic_info="", video_info="")
    req.validate()
    req.validate_all()
    assert req.content == "thanks"


@pytest.mark.parametrize("content", ["ab", "x" * 200, "谢谢"])
def test_reply_request_content_bounds_accept(content):
    req = _good_reply(content=content)
    req.validate()
    assert req.content == content


@pytest.mark.parametrize("content", ["", "a", "x" * 201])
def test_reply_request_content_bounds_reject(content):
    with pytest.raises(ValidationError) as info:
        _good_reply(content=content).validate()
    assert info.value.field == "Content"
    assert info.value.reason == (
        "value length must be between 2 and 200 runes, inclusive"
    )


def test_reply_request_validate_all():
    with pytest.raises(MultiValidationError) as info:
        ReplyReviewRequest(review_id=-3, store_id=0, content="a").validate_all()
    assert [e.field for e in info.value.errors] == ["ReviewID", "StoreID", "Content"]
    assert all(e.message == "ReplyReviewRequest" for e in info.value.errors)


def test_reply_request_store_id_message():
    with pytest.raises(ValidationError) as info:
        _good_reply(store_id=0).validate()
    assert str(info.value) == (
        "invalid ReplyReviewRequest.StoreID: value must be greater than 0"
    )


def test_reply_reply_has_no_rules():
    reply = ReplyReviewReply(reply_id=-9)
    reply.validate_all()
    assert reply.reply_id == -9