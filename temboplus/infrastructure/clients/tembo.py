"""TemboPlus collection, disbursement and wallet API client"""

from typing import Callable, List, Optional, TypeVar, Union

import httpx
from pydantic import TypeAdapter

from temboplus.config import ClientConfig, Settings
from temboplus.domain.catalog import DEFAULT_CATALOG, GatewayCatalog
from temboplus.domain.exceptions import ValidationError
from temboplus.domain.models import (
    BalanceResponse,
    CollectionRequest,
    CollectionResponse,
    DisbursementRequest,
    StatementEntry,
    StatementQuery,
    StatusQuery,
    WebhookPayload,
)
from temboplus.domain.validation import (
    prepare_bank_payout,
    validate_collection_request,
    validate_disbursement_request,
    validate_statement_query,
    validate_status_query,
)
from temboplus.domain.webhooks import parse_webhook
from temboplus.infrastructure.clients.transport import GatewayTransport
from temboplus.infrastructure.observability.metrics import record_request

RequestT = TypeVar("RequestT")

_BALANCE = TypeAdapter(BalanceResponse)
_STATEMENT = TypeAdapter(List[StatementEntry])


class TemboClient:
    """Client for the TemboPlus mobile money gateway.

    Every operation validates its input locally, sends a single request and
    raises a ``TemboError`` subclass on failure. Nothing is retried; retry
    policy belongs to the caller.
    """

    def __init__(
        self,
        config: ClientConfig,
        catalog: GatewayCatalog = DEFAULT_CATALOG,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.catalog = catalog
        self._transport = GatewayTransport(config, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TemboClient":
        return cls(settings.to_client_config(), **kwargs)

    @staticmethod
    def _validated(operation: str, check: Callable[[RequestT], None], request: RequestT) -> None:
        """Run a local check, counting rejections before they propagate"""
        try:
            check(request)
        except ValidationError:
            record_request(operation, "validation")
            raise

    # Collections

    async def collect_from_mobile_money(self, request: CollectionRequest) -> CollectionResponse:
        """
        Send a USSD push asking the subscriber to approve a payment.

        A PENDING_ACK reply means the push was sent; the final outcome
        arrives on the callback URL.

        Raises:
            ValidationError: Request failed local checks (nothing sent)
            BusinessError: Gateway replied PAYMENT_REJECTED or GENERIC_ERROR
            ApiError, TransportError, DecodeError: See GatewayTransport.send
        """
        operation = "collect"
        self._validated(operation, lambda r: validate_collection_request(r, self.catalog), request)
        return await self._transport.send_for_status(
            operation, self.catalog.endpoints.collection, request.to_payload()
        )

    async def get_collection_status(self, query: StatusQuery) -> CollectionResponse:
        operation = "collection_status"
        self._validated(operation, validate_status_query, query)
        return await self._transport.send_for_status(
            operation, self.catalog.endpoints.collection_status, query.to_payload()
        )

    # Disbursements

    async def pay_wallet_to_mobile(self, request: DisbursementRequest) -> CollectionResponse:
        """
        Transfer from a wallet to a mobile subscriber (or bank, see pay_wallet_to_bank).

        Raises:
            ValidationError: Request failed local checks (nothing sent)
            BusinessError: Gateway replied PAYMENT_REJECTED or GENERIC_ERROR
        """
        return await self._disburse("wallet_to_mobile", request)

    async def pay_wallet_to_bank(self, request: DisbursementRequest) -> CollectionResponse:
        """Bank payout: same endpoint, service code pinned to the bank route"""
        try:
            request = prepare_bank_payout(request, self.catalog)
        except ValidationError:
            record_request("wallet_to_bank", "validation")
            raise
        return await self._disburse("wallet_to_bank", request)

    async def _disburse(self, operation: str, request: DisbursementRequest) -> CollectionResponse:
        self._validated(operation, lambda r: validate_disbursement_request(r, self.catalog), request)
        return await self._transport.send_for_status(
            operation, self.catalog.endpoints.wallet_to_mobile, request.to_payload()
        )

    async def get_payment_status(self, query: StatusQuery) -> CollectionResponse:
        """Status of a wallet-to-mobile, wallet-to-bank or utility payment"""
        operation = "payment_status"
        self._validated(operation, validate_status_query, query)
        return await self._transport.send_for_status(
            operation, self.catalog.endpoints.payment_status, query.to_payload()
        )

    # Wallet

    async def get_collection_balance(self) -> BalanceResponse:
        return await self._transport.send("collection_balance", self.catalog.endpoints.collection_balance, _BALANCE)

    async def get_main_balance(self) -> BalanceResponse:
        return await self._transport.send("main_balance", self.catalog.endpoints.main_balance, _BALANCE)

    async def get_collection_statement(self, query: StatementQuery) -> List[StatementEntry]:
        """Collection account ledger for a date range, returned in full (no paging)"""
        operation = "collection_statement"
        self._validated(operation, validate_statement_query, query)
        return await self._transport.send(
            operation, self.catalog.endpoints.collection_statement, _STATEMENT, query.to_payload()
        )

    async def get_main_statement(self, query: StatementQuery) -> List[StatementEntry]:
        operation = "main_statement"
        self._validated(operation, validate_statement_query, query)
        return await self._transport.send(
            operation, self.catalog.endpoints.main_statement, _STATEMENT, query.to_payload()
        )

    # Webhooks

    def validate_webhook(self, body: Union[bytes, str]) -> WebhookPayload:
        return parse_webhook(body)
