"""Unit tests for MSISDN, date and request-building helpers"""

import re
from datetime import date, datetime

import pytest

from temboplus.domain.builders import build_collection_request
from temboplus.domain.exceptions import ValidationError
from temboplus.domain.validation import validate_collection_request
from temboplus.utils.date_utils import (
    format_statement_date,
    format_transaction_date,
    generate_transaction_ref,
)
from temboplus.utils.msisdn import format_msisdn, validate_msisdn


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0715123456", "255715123456"),
        ("+255715123456", "255715123456"),
        ("715123456", "255715123456"),
        ("0685123456", "255685123456"),
        ("255785123456", "255785123456"),
        ("0815123456", "815123456"),
    ],
)
def test_format_msisdn(raw: str, expected: str):
    assert format_msisdn(raw) == expected


def test_validate_msisdn():
    validate_msisdn("255715123456")

    with pytest.raises(ValidationError):
        validate_msisdn("25571512")
    with pytest.raises(ValidationError):
        validate_msisdn("254715123456")


def test_date_formatting():
    moment = datetime(2024, 3, 1, 9, 5, 7)

    assert format_transaction_date(moment) == "2024-03-01 09:05:07"
    assert format_statement_date(date(2024, 1, 31)) == "2024-01-31"


def test_generate_transaction_ref():
    assert re.fullmatch(r"ORDER_\d{10,}", generate_transaction_ref("ORDER"))


def test_build_collection_request_is_valid():
    request = build_collection_request(
        "0715123456",
        "TZ-TIGO-C2B",
        5000.0,
        "Tigo customer payment",
        "https://merchant.example.com/webhooks/temboplus",
        now=datetime(2024, 3, 1, 12, 0, 0),
    )

    assert request.msisdn == "255715123456"
    assert request.transaction_ref.startswith("TXN_")
    assert request.transaction_date == "2024-03-01 12:00:00"
    validate_collection_request(request)
