import os
from typing import Literal

from pydantic import BaseModel, Field, SecretStr

from bitbucket_rest.credentials import CREDENTIALS_ENV, Credentials
from bitbucket_rest.filters.authentication import (
    BASIC_PREFIX,
    BEARER_PREFIX,
    is_base64_encoded,
    is_blank,
)

ENDPOINT_ENV = "BITBUCKET_REST_ENDPOINT"
DEFAULT_ENDPOINT = "http://127.0.0.1:7990"

AuthScheme = Literal["anonymous", "basic", "bearer", "invalid"]


class AppConfig(BaseModel):
    bitbucket_url: str = Field(default=DEFAULT_ENDPOINT)
    bitbucket_version_target: str = Field(default="9.4.16")
    credential: SecretStr | None = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        credential = os.getenv(CREDENTIALS_ENV)
        return cls(
            bitbucket_url=os.getenv(ENDPOINT_ENV) or DEFAULT_ENDPOINT,
            credential=SecretStr(credential) if credential is not None else None,
        )

    def credentials(self) -> Credentials:
        if self.credential is None:
            return Credentials()
        return Credentials(credential=self.credential.get_secret_value())

    def auth_scheme(self) -> AuthScheme:
        """Scheme the configured credential selects, without revealing it."""
        value = self.credential.get_secret_value() if self.credential is not None else None
        if is_blank(value):
            return "anonymous"
        if value.startswith(BEARER_PREFIX):
            return "bearer"
        if value.startswith(BASIC_PREFIX):
            value = value.split("@", 1)[1]
        if ":" in value or is_base64_encoded(value):
            return "basic"
        return "invalid"
