import os
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

CREDENTIALS_ENV = "BITBUCKET_REST_CREDENTIALS"


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: str | None = None
    # one of: user:pass, basic@..., bearer@..., or pre-encoded base64
    credential: str | None = Field(default=None, repr=False)


CredentialsSupplier = Callable[[], Credentials | None]


def static_credentials(
    credential: str | None, identity: str | None = None
) -> CredentialsSupplier:
    creds = Credentials(identity=identity, credential=credential)
    return lambda: creds


def environment_credentials(variable: str = CREDENTIALS_ENV) -> CredentialsSupplier:
    """Supplier that re-reads ``variable`` on every call so rotated values apply immediately."""

    def supplier() -> Credentials:
        return Credentials(credential=os.getenv(variable))

    return supplier
