"""Pre-flight request checks - nothing reaches the network unless these pass"""

from typing import Optional

from temboplus.domain.catalog import DEFAULT_CATALOG, GatewayCatalog
from temboplus.domain.exceptions import ValidationError
from temboplus.domain.models import (
    CollectionRequest,
    DisbursementRequest,
    StatementQuery,
    StatusQuery,
)


def _require(value: Optional[str], field: str) -> None:
    if not value:
        raise ValidationError(field, f"{field} is required")


def _require_positive(amount: float) -> None:
    if not amount > 0:
        raise ValidationError("amount", "amount must be greater than 0")


def validate_collection_request(request: CollectionRequest, catalog: GatewayCatalog = DEFAULT_CATALOG) -> None:
    """
    Validate a mobile money collection request.

    Raises:
        ValidationError: On the first missing field, non-positive amount,
            or unsupported channel
    """
    _require(request.msisdn, "msisdn")
    _require(request.channel, "channel")
    _require_positive(request.amount)
    _require(request.narration, "narration")
    _require(request.transaction_ref, "transactionRef")
    _require(request.transaction_date, "transactionDate")
    _require(request.callback_url, "callbackUrl")

    if not catalog.is_valid_channel(request.channel):
        raise ValidationError(
            "channel",
            f"invalid channel: {request.channel}. Supported channels: {catalog.supported_channels()}",
        )


def validate_disbursement_request(request: DisbursementRequest, catalog: GatewayCatalog = DEFAULT_CATALOG) -> None:
    """
    Validate a wallet-to-mobile / wallet-to-bank payout.

    Raises:
        ValidationError: On the first missing field, non-positive amount,
            or country/currency/service outside the catalog
    """
    _require(request.country_code, "countryCode")
    if request.country_code != catalog.country_code:
        raise ValidationError("countryCode", f"unsupported countryCode: {request.country_code}")
    _require(request.account_no, "accountNo")
    _require(request.service_code, "serviceCode")
    if not catalog.is_valid_service(request.service_code):
        raise ValidationError(
            "serviceCode",
            f"invalid serviceCode: {request.service_code}. Supported services: {catalog.supported_services()}",
        )
    _require_positive(request.amount)
    _require(request.msisdn, "msisdn")
    _require(request.narration, "narration")
    _require(request.currency_code, "currencyCode")
    if request.currency_code != catalog.currency_code:
        raise ValidationError("currencyCode", f"unsupported currencyCode: {request.currency_code}")
    _require(request.recipient_names, "recipientNames")
    _require(request.transaction_ref, "transactionRef")
    _require(request.transaction_date, "transactionDate")
    _require(request.callback_url, "callbackUrl")


def prepare_bank_payout(request: DisbursementRequest, catalog: GatewayCatalog = DEFAULT_CATALOG) -> DisbursementRequest:
    """Pin the service code to the bank payout route, rejecting any other explicit code"""
    if not request.service_code:
        return request.model_copy(update={"service_code": catalog.bank_service_code})
    if request.service_code != catalog.bank_service_code:
        raise ValidationError("serviceCode", f"serviceCode must be {catalog.bank_service_code} for bank payouts")
    return request


def validate_status_query(query: StatusQuery) -> None:
    if not query.transaction_ref and not query.transaction_id:
        raise ValidationError("transactionRef", "either transactionRef or transactionId is required")


def validate_statement_query(query: StatementQuery) -> None:
    _require(query.start_date, "startDate")
    _require(query.end_date, "endDate")
