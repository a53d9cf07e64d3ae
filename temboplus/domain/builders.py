"""Convenience constructors for well-formed requests"""

from datetime import datetime
from typing import Optional

from temboplus.domain.models import CollectionRequest
from temboplus.utils.date_utils import format_transaction_date, generate_transaction_ref
from temboplus.utils.msisdn import format_msisdn


def build_collection_request(
    phone_number: str,
    channel: str,
    amount: float,
    narration: str,
    callback_url: str,
    now: Optional[datetime] = None,
) -> CollectionRequest:
    """Build a collection request with a normalised MSISDN, fresh reference and current timestamp"""
    return CollectionRequest(
        msisdn=format_msisdn(phone_number),
        channel=channel,
        amount=amount,
        narration=narration,
        transaction_ref=generate_transaction_ref("TXN"),
        transaction_date=format_transaction_date(now or datetime.now()),
        callback_url=callback_url,
    )
