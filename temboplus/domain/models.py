"""Pydantic records for gateway requests, responses and webhook payloads"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from temboplus.domain.decoding import OptionalAmount


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CollectionRequest(WireModel):
    """USSD push collection from a mobile subscriber"""

    msisdn: str  # 255XXXXXXXXX
    channel: str
    amount: float
    narration: str
    transaction_ref: str
    transaction_date: str  # YYYY-MM-DD HH:MM:SS
    callback_url: str


class DisbursementRequest(WireModel):
    """Wallet-to-mobile or wallet-to-bank payout.

    For bank payouts ``msisdn`` carries ``<BIC>:<ACCOUNT NUMBER>``.
    """

    account_no: str
    amount: float
    msisdn: str
    narration: str
    recipient_names: str
    transaction_ref: str
    transaction_date: str
    callback_url: str
    service_code: str = ""
    country_code: str = "TZ"
    currency_code: str = "TZS"


class StatusQuery(WireModel):
    """Lookup by caller reference and/or gateway transaction id"""

    transaction_ref: Optional[str] = None
    transaction_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in super().to_payload().items() if value != ""}


class StatementQuery(WireModel):
    start_date: str  # YYYY-MM-DD
    end_date: str
    wallet_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {key: value for key, value in super().to_payload().items() if value != ""}


class CollectionResponse(WireModel):
    """Reply shape shared by collection, disbursement and status queries"""

    status_code: str = ""
    transaction_ref: str = ""
    transaction_id: str = ""


class WebhookPayload(WireModel):
    status_code: str = ""
    transaction_ref: str = ""
    transaction_id: str = ""


class BalanceResponse(WireModel):
    available_balance: float = 0.0
    current_balance: float = 0.0
    account_no: str = ""
    account_status: str = ""
    account_name: str = ""


class StatementEntry(WireModel):
    account_no: str = ""
    debit_or_credit: str = ""
    tran_ref_no: str = ""
    narration: str = ""
    txn_date: str = ""
    value_date: str = ""
    amount_credited: OptionalAmount = None
    amount_debited: OptionalAmount = None
    balance: float = 0.0


class ApiErrorEnvelope(WireModel):
    """Error body on non-2xx replies, e.g. {"statusCode":401,"reason":"INVALID_CREDENTIALS"}"""

    status_code: int = 0
    reason: Optional[str] = None
    message: Optional[str] = None
    details: Any = None
