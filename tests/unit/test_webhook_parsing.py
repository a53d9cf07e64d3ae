"""Unit tests for inbound webhook validation"""

import json

import pytest

from temboplus.domain.exceptions import DecodeError, ValidationError
from temboplus.domain.models import WebhookPayload
from temboplus.domain.webhooks import is_failed_webhook, is_successful_webhook, parse_webhook


def _body(**fields) -> bytes:
    payload = {"statusCode": "PAYMENT_ACCEPTED", "transactionRef": "ORDER_1", "transactionId": "X50jcLDcU"}
    payload.update(fields)
    return json.dumps(payload).encode()


def test_parse_valid_webhook():
    payload = parse_webhook(_body())

    assert payload.status_code == "PAYMENT_ACCEPTED"
    assert payload.transaction_ref == "ORDER_1"
    assert payload.transaction_id == "X50jcLDcU"


def test_parse_accepts_text_body():
    assert parse_webhook(_body().decode()).transaction_ref == "ORDER_1"


@pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'{"transactionRef": 12}'])
def test_malformed_body_is_decode_error(body: bytes):
    with pytest.raises(DecodeError):
        parse_webhook(body)


@pytest.mark.parametrize("missing", ["transactionRef", "transactionId"])
def test_missing_identifier_is_validation_error(missing: str):
    with pytest.raises(ValidationError) as exc_info:
        parse_webhook(_body(**{missing: ""}))

    assert exc_info.value.field == missing


@pytest.mark.parametrize(
    "status, successful, failed",
    [
        ("PAYMENT_ACCEPTED", True, False),
        ("PAYMENT_REJECTED", False, True),
        ("GENERIC_ERROR", False, True),
        ("PENDING_ACK", False, False),
        ("SOMETHING_NEW", False, False),
    ],
)
def test_classification_helpers(status: str, successful: bool, failed: bool):
    payload = WebhookPayload(status_code=status, transaction_ref="ORDER_1", transaction_id="X50jcLDcU")

    assert is_successful_webhook(payload) is successful
    assert is_failed_webhook(payload) is failed
