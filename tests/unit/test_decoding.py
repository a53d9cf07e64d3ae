"""Unit tests for tolerant statement amount decoding"""

import pytest

from temboplus.domain.decoding import decode_optional_amount
from temboplus.domain.models import StatementEntry


@pytest.mark.parametrize(
    "raw, expected",
    [
        (42.5, 42.5),
        (0, 0.0),
        (1500, 1500.0),
        ("42.5", 42.5),
        (" 1000 ", 1000.0),
        ("-12.75", -12.75),
        ("1e3", 1000.0),
    ],
)
def test_present_values(raw, expected):
    assert decode_optional_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "abc", "12abc", "NaN", "Infinity", "\"5\"", "[1]", "1e400", True, False, [], {}, float("nan")],
)
def test_absent_values(raw):
    """Malformed or empty amounts degrade to None instead of raising"""
    assert decode_optional_amount(raw) is None


def test_statement_entry_tolerates_mixed_amount_shapes():
    entry = StatementEntry.model_validate(
        {
            "accountNo": "8000837333",
            "debitOrCredit": "CR",
            "tranRefNo": "TRN001",
            "narration": "Collection",
            "txnDate": "2024-01-05",
            "valueDate": "2024-01-05",
            "amountCredited": "2500.00",
            "amountDebited": "",
            "balance": 12500.0,
        }
    )

    assert entry.amount_credited == 2500.0
    assert entry.amount_debited is None
    assert entry.balance == 12500.0


def test_statement_entry_missing_amounts_are_absent():
    entry = StatementEntry.model_validate({"accountNo": "8000837333", "amountDebited": "n/a", "balance": 0})

    assert entry.amount_credited is None
    assert entry.amount_debited is None
