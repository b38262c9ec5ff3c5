import base64
from datetime import datetime, timezone

import pytest

from chatcore.domain.entities import Message
from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.services.pagination import resolve_page_limit
from chatcore.domain.value_objects import (
    ConversationId,
    Emoji,
    MessageCursor,
    MessageId,
    UserId,
)

CONV = ConversationId("6c3f3c1e-0f55-4d55-8f7a-0e5f3f7b2a11")
USER = UserId("0d9b7f5e-7a3d-4b8e-9c44-2f1d3c5a6b77")
T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _message(message_id: int, created_at: datetime = T0) -> Message:
    return Message(
        id=MessageId(message_id),
        conversation_id=CONV,
        sender_user_id=USER,
        text="hi",
        created_at=created_at,
    )


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234"])
def test_user_id_rejects_non_uuid(raw):
    with pytest.raises(DomainValidationError):
        UserId(raw)


def test_domain_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        ConversationId("nope")


@pytest.mark.parametrize("raw", [0, -3, True])
def test_message_id_must_be_positive_int(raw):
    with pytest.raises(DomainValidationError):
        MessageId(raw)


def test_message_id_parse():
    assert MessageId.parse("42") == MessageId(42)
    with pytest.raises(DomainValidationError):
        MessageId.parse("abc")


def test_emoji_rules():
    assert Emoji("👍").value == "👍"
    with pytest.raises(DomainValidationError):
        Emoji("   ")
    with pytest.raises(DomainValidationError):
        Emoji("x" * 33)


def test_cursor_token_is_opaque_and_decodable():
    cursor = MessageCursor.from_message(_message(7))
    token = cursor.encode()

    assert "|" not in token
    assert MessageCursor.decode(token) == cursor


NAIVE_TIMESTAMP_TOKEN = base64.urlsafe_b64encode(b"2024-01-01T12:00:00|5").decode("ascii")


@pytest.mark.parametrize(
    "token", ["garbage!!", "bm90LWEtY3Vyc29y", "", NAIVE_TIMESTAMP_TOKEN]
)
def test_malformed_cursor_is_invalid_argument(token):
    with pytest.raises(DomainValidationError):
        MessageCursor.decode(token)


def test_cursor_orders_by_timestamp_then_id():
    cursor = MessageCursor(created_at=T0, message_id=MessageId(5))

    assert cursor.is_after(_message(4, T0))
    assert not cursor.is_after(_message(5, T0))
    assert not cursor.is_after(_message(6, T0))
    assert cursor.is_after(_message(9, datetime(2023, 12, 31, tzinfo=timezone.utc)))


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 50),
        (10, 10),
        ("10", 10),
        ("abc", 50),
        (0, 50),
        (-5, 50),
        (1000, 100),
        ("1000", 100),
        (2.5, 50),
        (float("inf"), 50),
        (True, 50),
    ],
)
def test_resolve_page_limit(raw, expected):
    assert resolve_page_limit(raw, default=50, maximum=100) == expected
