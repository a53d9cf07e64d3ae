"""Fixed gateway vocabulary: endpoints, status codes, channels and services.

Everything here is immutable. The client receives a ``GatewayCatalog``
instance so alternate endpoint sets (a mock gateway, a new market) can be
swapped in without touching module state.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping


class StatusCode(str, Enum):
    PENDING_ACK = "PENDING_ACK"
    PAYMENT_ACCEPTED = "PAYMENT_ACCEPTED"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"
    GENERIC_ERROR = "GENERIC_ERROR"


FAILED_STATUSES = frozenset({StatusCode.PAYMENT_REJECTED.value, StatusCode.GENERIC_ERROR.value})

# Collection channels (USSD push)
CHANNEL_TZ_TIGO_C2B = "TZ-TIGO-C2B"
CHANNEL_TZ_AIRTEL_C2B = "TZ-AIRTEL-C2B"
CHANNEL_TZ_HALOTEL_C2B = "TZ-HALOTEL-C2B"

# Disbursement services
SERVICE_TZ_TIGO_B2C = "TZ-TIGO-B2C"
SERVICE_TZ_AIRTEL_B2C = "TZ-AIRTEL-B2C"
SERVICE_TZ_BANK_B2C = "TZ-BANK-B2C"

ROUTE_MOBILE = "mobile"
ROUTE_BANK = "bank"


@dataclass(frozen=True)
class Endpoints:
    """Gateway paths, relative to the environment base URL"""

    collection: str = "/tembo/v1/collection"
    collection_status: str = "/tembo/v1/collection/status"
    collection_balance: str = "/tembo/v1/wallet/collection-balance"
    collection_statement: str = "/tembo/v1/wallet/collection-statement"
    main_balance: str = "/tembo/v1/wallet/main-balance"
    main_statement: str = "/tembo/v1/wallet/main-statement"
    wallet_to_mobile: str = "/tembo/v1/payment/wallet-to-mobile"
    payment_status: str = "/tembo/v1/payment/status"


@dataclass(frozen=True)
class GatewayCatalog:
    endpoints: Endpoints = field(default_factory=Endpoints)
    # channel code -> provider name
    channels: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(
            {
                CHANNEL_TZ_TIGO_C2B: "Tigo",
                CHANNEL_TZ_AIRTEL_C2B: "Airtel",
                CHANNEL_TZ_HALOTEL_C2B: "Halotel",
            }
        )
    )
    # service code -> route kind
    services: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(
            {
                SERVICE_TZ_TIGO_B2C: ROUTE_MOBILE,
                SERVICE_TZ_AIRTEL_B2C: ROUTE_MOBILE,
                SERVICE_TZ_BANK_B2C: ROUTE_BANK,
            }
        )
    )
    country_code: str = "TZ"
    currency_code: str = "TZS"

    def supported_channels(self) -> List[str]:
        return list(self.channels)

    def supported_services(self) -> List[str]:
        return list(self.services)

    def is_valid_channel(self, channel: str) -> bool:
        return channel in self.channels

    def is_valid_service(self, service_code: str) -> bool:
        return service_code in self.services

    def channel_provider(self, channel: str) -> str:
        return self.channels.get(channel, "Unknown")

    @property
    def bank_service_code(self) -> str:
        """The single service code routed to bank payouts"""
        codes = [code for code, route in self.services.items() if route == ROUTE_BANK]
        if len(codes) != 1:
            raise ValueError(f"catalog must define exactly one bank payout service, found {codes}")
        return codes[0]


DEFAULT_CATALOG = GatewayCatalog()
