"""Pytest fixtures for testing"""

from typing import Callable, List

import httpx
import pytest

from temboplus.config import ClientConfig, Credentials, Environment
from temboplus.domain.catalog import CHANNEL_TZ_TIGO_C2B, SERVICE_TZ_TIGO_B2C
from temboplus.domain.models import CollectionRequest, DisbursementRequest
from temboplus.infrastructure.clients.tembo import TemboClient

TEST_SECRET = "sk_test_do_not_log"


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        credentials=Credentials(account_id="acc_test_001", secret_key=TEST_SECRET),
        environment=Environment.SANDBOX,
        timeout_seconds=5.0,
    )


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Every request that reached the fake gateway, in order"""
    return []


@pytest.fixture
def make_client(client_config: ClientConfig, sent_requests: List[httpx.Request]) -> Callable[..., TemboClient]:
    """Build a TemboClient whose HTTP layer is answered by ``responder``"""

    def factory(responder, config: ClientConfig = client_config) -> TemboClient:
        def handler(request: httpx.Request):
            sent_requests.append(request)
            return responder(request)

        return TemboClient(config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def collection_request() -> CollectionRequest:
    return CollectionRequest(
        msisdn="255715123456",
        channel=CHANNEL_TZ_TIGO_C2B,
        amount=10000.0,
        narration="Payment for online purchase - Order #123",
        transaction_ref="ORDER_1700000000",
        transaction_date="2024-03-01 10:15:00",
        callback_url="https://merchant.example.com/webhooks/temboplus",
    )


@pytest.fixture
def disbursement_request() -> DisbursementRequest:
    return DisbursementRequest(
        account_no="8000837333",
        service_code=SERVICE_TZ_TIGO_B2C,
        amount=2500.0,
        msisdn="255715123456",
        narration="Payout - Order #123",
        recipient_names="John Doe",
        transaction_ref="PAYOUT_1700000000",
        transaction_date="2024-03-01 10:15:00",
        callback_url="https://merchant.example.com/webhooks/temboplus",
    )
