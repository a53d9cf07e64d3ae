"""Authenticated HTTP transport for the TemboPlus gateway"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from temboplus.config import ClientConfig
from temboplus.domain.catalog import FAILED_STATUSES
from temboplus.domain.exceptions import ApiError, BusinessError, DecodeError, TemboError, TransportError
from temboplus.domain.models import ApiErrorEnvelope, CollectionResponse
from temboplus.infrastructure.observability.logging import log_gateway_call
from temboplus.infrastructure.observability.metrics import record_request, request_latency_histogram

logger = logging.getLogger(__name__)


def generate_request_id() -> str:
    """Unique per call; time-derived, not secret"""
    return f"req_{time.time_ns()}"


class GatewayTransport:
    """Sends one request per call and classifies the reply.

    Holds no mutable state after construction, so a single instance can
    serve concurrent callers.
    """

    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.base_url = config.resolved_base_url
        self.timeout = config.timeout_seconds
        self._transport = transport

    def _headers(self, request_id: str) -> Dict[str, str]:
        credentials = self.config.credentials
        return {
            "Content-Type": "application/json",
            "x-account-id": credentials.account_id,
            "x-secret-key": credentials.secret_key.get_secret_value(),
            "x-request-id": request_id,
        }

    async def send(
        self,
        operation: str,
        path: str,
        decoder: TypeAdapter,
        payload: Optional[Dict[str, Any]] = None,
        check_status: bool = False,
    ) -> Any:
        """
        POST to ``path`` and decode a 2xx body with ``decoder``.

        Raises:
            TransportError: On timeout, connection failure, or non-2xx without an error envelope
            ApiError: On non-2xx with a gateway error envelope
            DecodeError: On a 2xx body that does not match the expected shape
            BusinessError: With ``check_status``, a 2xx reply whose statusCode is
                PAYMENT_REJECTED or GENERIC_ERROR
        """
        request_id = generate_request_id()
        transaction_ref = payload.get("transactionRef") if payload else None
        http_status: Optional[int] = None
        outcome = "error"
        start_time = time.perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                try:
                    response = await client.post(
                        f"{self.base_url}{path}",
                        json=payload,
                        headers=self._headers(request_id),
                    )
                except httpx.TimeoutException as e:
                    raise TransportError(f"TemboPlus request timed out after {self.timeout}s") from e
                except httpx.RequestError as e:
                    raise TransportError(f"TemboPlus request failed: {e}") from e

            http_status = response.status_code
            if not response.is_success:
                raise self._error_from_response(response)
            result = self._decode(decoder, response)
            if check_status and result.status_code in FAILED_STATUSES:
                raise BusinessError(result.status_code, response=result)
            outcome = "success"
            return result

        except TemboError as e:
            outcome = e.kind
            raise
        except asyncio.CancelledError:
            outcome = "cancelled"
            logger.warning(
                "Gateway call cancelled; outcome unknown",
                extra={"operation": operation, "request_id": request_id, "transaction_ref": transaction_ref},
            )
            raise
        finally:
            duration = time.perf_counter() - start_time
            request_latency_histogram.labels(operation=operation).observe(duration)
            record_request(operation, outcome)
            log_gateway_call(
                operation=operation,
                method="POST",
                path=path,
                request_id=request_id,
                outcome=outcome,
                duration_ms=duration * 1000,
                http_status=http_status,
                transaction_ref=transaction_ref,
            )

    async def send_for_status(
        self,
        operation: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> CollectionResponse:
        """POST to an endpoint that replies with a payment status"""
        return await self.send(operation, path, _COLLECTION_RESPONSE, payload, check_status=True)

    @staticmethod
    def _error_from_response(response: httpx.Response) -> TemboError:
        try:
            envelope = ApiErrorEnvelope.model_validate_json(response.content)
        except PydanticValidationError:
            envelope = None
        if envelope is not None and envelope.status_code != 0:
            return ApiError(
                status_code=envelope.status_code,
                reason=envelope.reason or "",
                message=envelope.message or "",
                details=envelope.details,
            )
        return TransportError(
            f"unexpected status code: {response.status_code}, body: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    @staticmethod
    def _decode(decoder: TypeAdapter, response: httpx.Response) -> Any:
        try:
            return decoder.validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"failed to decode TemboPlus response: {e}", body=response.text) from e


_COLLECTION_RESPONSE = TypeAdapter(CollectionResponse)
