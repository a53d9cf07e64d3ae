"""Inbound callback parsing.

No signature verification happens here: the gateway does not sign its
callbacks, so authenticity has to be established by the receiving
endpoint (secret callback path, IP allow-list) until it does.
"""

from typing import Union

from pydantic import ValidationError as PydanticValidationError

from temboplus.domain.catalog import FAILED_STATUSES, StatusCode
from temboplus.domain.exceptions import DecodeError, ValidationError
from temboplus.domain.models import WebhookPayload


def parse_webhook(body: Union[bytes, str]) -> WebhookPayload:
    """
    Decode and minimally validate a callback body.

    Raises:
        DecodeError: Body is not a JSON object of the webhook shape
        ValidationError: transactionRef or transactionId is empty
    """
    try:
        payload = WebhookPayload.model_validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(f"failed to parse webhook payload: {e}") from e

    if not payload.transaction_ref:
        raise ValidationError("transactionRef", "invalid webhook payload: missing transactionRef")
    if not payload.transaction_id:
        raise ValidationError("transactionId", "invalid webhook payload: missing transactionId")
    return payload


def is_successful_webhook(payload: WebhookPayload) -> bool:
    return payload.status_code == StatusCode.PAYMENT_ACCEPTED.value


def is_failed_webhook(payload: WebhookPayload) -> bool:
    return payload.status_code in FAILED_STATUSES
