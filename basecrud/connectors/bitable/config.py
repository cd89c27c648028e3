"""Bitable connector configuration."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator

DEFAULT_BASE_URL = "https://open.feishu.cn/open-apis/bitable/v1"


class BitableConnectorConfig(BaseModel):
    """Configuration for the Bitable (Base) REST connector.

    The access token is sent verbatim as a bearer credential; it is never
    refreshed or validated locally.
    """

    type: Literal["bitable"] = "bitable"

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Base URL of the Bitable API"
    )
    access_token: SecretStr = Field(
        description="Tenant or user access token (supports env_var/var templates)"
    )
    headers: Optional[dict[str, str]] = Field(
        default=None, description="Extra HTTP headers sent with every request"
    )

    # Transport
    timeout: int = Field(default=30, description="Request timeout in seconds", ge=1)
    max_retries: int = Field(
        default=3,
        description="Retries for 429/5xx on idempotent requests (0 disables)",
        ge=0,
    )
    retry_delay: float = Field(
        default=1.0, description="Backoff factor between retries in seconds", ge=0.0
    )

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v: SecretStr) -> SecretStr:
        """Reject empty tokens."""
        if not v.get_secret_value().strip():
            raise ValueError("access_token must not be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")
