"""Unit tests for wire record serialization"""

from temboplus.domain.models import (
    CollectionRequest,
    CollectionResponse,
    DisbursementRequest,
    StatementQuery,
    StatusQuery,
)


def test_collection_request_round_trip(collection_request: CollectionRequest):
    payload = collection_request.to_payload()

    assert set(payload) == {
        "msisdn",
        "channel",
        "amount",
        "narration",
        "transactionRef",
        "transactionDate",
        "callbackUrl",
    }
    assert CollectionRequest.model_validate(payload) == collection_request


def test_disbursement_payload_uses_gateway_names(disbursement_request: DisbursementRequest):
    payload = disbursement_request.to_payload()

    assert payload["countryCode"] == "TZ"
    assert payload["currencyCode"] == "TZS"
    assert payload["serviceCode"] == "TZ-TIGO-B2C"
    assert payload["recipientNames"] == "John Doe"
    assert payload["accountNo"] == "8000837333"


def test_optional_identifiers_omitted_when_empty():
    assert StatusQuery(transaction_ref="Hyu8373HmsI").to_payload() == {"transactionRef": "Hyu8373HmsI"}
    assert StatusQuery(transaction_ref="", transaction_id="X50jcLDcU").to_payload() == {"transactionId": "X50jcLDcU"}
    assert StatementQuery(start_date="2024-01-01", end_date="2024-01-31").to_payload() == {
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
    }
    assert StatementQuery(start_date="2024-01-01", end_date="2024-01-31", wallet_id="W1").to_payload()["walletId"] == "W1"


def test_response_ignores_unknown_fields():
    response = CollectionResponse.model_validate_json(
        '{"statusCode": "PENDING_ACK", "transactionRef": "ORDER_1", "transactionId": "X50", "extra": 1}'
    )

    assert response.status_code == "PENDING_ACK"
    assert response.transaction_id == "X50"
