# reviewsvc

Building blocks for a product review service, in which customers review
their orders, merchants reply to reviews or appeal against them, and
operators audit reviews and appeals. The package provides the ID
generator, the domain records and errors, and the request and reply
messages with their validation rules. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## IDs: `reviewsvc.snowflake`

Review, reply and appeal IDs are 64-bit snowflake identifiers built from
the milliseconds since an epoch, a node number (0 to 1023) and a
per-millisecond sequence.

```python
from reviewsvc import snowflake

snowflake.init("2024-01-01", 1)
review_id = snowflake.gen_id()
```

`init(start_time, machine_id)` sets up the shared generator, taking the
start date (`YYYY-MM-DD`, at midnight UTC) as its epoch. It raises
`SnowflakeError` for an empty start time, a machine ID that is not
positive, a start time that is not a valid date, or a machine ID above
1023. `gen_id()` raises `SnowflakeError` if `init` has not been called.
`SnowflakeNode(node_id, epoch_ms=..., clock=...)` can also be used on its
own; its `generate()` method returns the next identifier.

## Records and errors: `reviewsvc.models`

- Parameter dataclasses: `ReplyParam`, `AuditParam`, `AppealParam`,
  `AuditAppealParam`.
- Record dataclasses: `ReviewInfo`, `ReviewReplyInfo`, `ReviewAppealInfo`,
  and `MyReviewInfo`, a review as held in a search index.
- Errors, all subclasses of `ReviewServiceError` with a `reason` code:
  `DbFailedError`, `OrderReviewedError`, `NotFoundError`.
- `parse_datetime(text)` reads `YYYY-MM-DD HH:MM:SS` (quotes around it are
  allowed, as is a fractional second) as a UTC `datetime`.
- `parse_review_source(data)` decodes a search-index document (JSON text,
  bytes or a mapping) into a `MyReviewInfo`. Integer fields are given as
  strings and range-checked; unknown keys are ignored; malformed values
  raise `ValueError`.

## Request validation

Messages are dataclasses derived from `reviewsvc.validation.Message`.
`validate()` raises a `ValidationError` for the first rule broken;
`validate_all()` raises a `MultiValidationError` whose `errors` list holds
every broken rule. A `ValidationError` carries `field`, `reason`, `cause`
and `error_name`, and reads like
`invalid CreateReviewRequest.Content: value length must be between 8 and 255 runes, inclusive`.

- `reviewsvc.validation`: `CreateReviewRequest` (positive user, order and
  store IDs; each score in 1 to 5; content of 8 to 255 characters),
  `CreateReviewReply`, `GetReviewRequest` (positive review ID).
- `reviewsvc.review_messages`: `ReviewMessage`, `GetReviewReply` (checks
  its embedded review), `AuditReviewRequest` (positive review ID and
  status; operator and reason of at least 2 characters), `AuditReviewReply`,
  `ReplyReviewRequest` (positive review and store IDs; content of 2 to 200
  characters), `ReplyReviewReply`.
- `reviewsvc.appeal_messages`: `AppealReviewRequest` (positive review and
  store IDs; reason and content of 2 to 200 characters),
  `AppealReviewReply`, `AuditAppealRequest` (positive appeal ID, review ID
  and status; operator of at least 2 characters), `AuditAppealReply`.
- `reviewsvc.list_messages`: `ListReviewByUserIDRequest` (positive user ID,
  page and size), `ListReviewByUserIDReply`, `ListReviewByStoreIDRequest`,
  `ListReviewByStoreIDReply`; the replies check each embedded review and
  name it `List[i]`.

```python
from reviewsvc.validation import CreateReviewRequest, MultiValidationError

request = CreateReviewRequest(user_id=1, order_id=2, store_id=3,
                              score=5, service_score=5, express_score=6,
                              content="short")
try:
    request.validate_all()
except MultiValidationError as exc:
    print([err.field for err in exc.errors])   # ['ExpressScore', 'Content']
```

## What this package does not do

It has no storage layer, no business operations that create, reply to,
appeal or audit reviews, no search index or cache, no HTTP server and no
command to run. It supplies the identifiers, records, errors and validated
messages that such a service is built from.