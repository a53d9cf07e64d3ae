"""Configuration management using Pydantic Settings"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


BASE_URLS = {
    Environment.SANDBOX: "https://sandbox.temboplus.com",
    Environment.PRODUCTION: "https://api.temboplus.com",
}

DEFAULT_TIMEOUT_SECONDS = 30.0


class Credentials(BaseModel):
    """Static account credentials sent as x-account-id / x-secret-key"""

    model_config = ConfigDict(frozen=True)

    account_id: str
    secret_key: SecretStr


class ClientConfig(BaseModel):
    """Immutable configuration for a single client instance"""

    model_config = ConfigDict(frozen=True)

    credentials: Credentials
    environment: Environment = Environment.SANDBOX
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0)
    base_url: Optional[str] = None  # overrides the environment host, e.g. a mock gateway

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or BASE_URLS[self.environment]).rstrip("/")


class Settings(BaseSettings):
    """Client configuration loaded from TEMBOPLUS_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="TEMBOPLUS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Gateway
    environment: Environment = Environment.SANDBOX
    account_id: str = ""
    secret_key: SecretStr = SecretStr("")
    base_url: Optional[str] = None

    # HTTP Client
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Service
    service_name: str = "temboplus-client"
    log_level: str = "INFO"

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            credentials=Credentials(account_id=self.account_id, secret_key=self.secret_key),
            environment=self.environment,
            timeout_seconds=self.timeout_seconds,
            base_url=self.base_url,
        )


settings = Settings()
