from dataclasses import dataclass
from typing import Any, Callable

from bitbucket_rest.config import AppConfig
from bitbucket_rest.credentials import CredentialsSupplier
from bitbucket_rest.filters.authentication import BitbucketAuthentication
from bitbucket_rest.http import HttpRequest

Transport = Callable[[HttpRequest], Any]


@dataclass
class BitbucketClient:
    base_url: str
    credentials: CredentialsSupplier
    transport: Transport | None = None

    @classmethod
    def from_config(
        cls, config: AppConfig, transport: Transport | None = None
    ) -> "BitbucketClient":
        return cls(
            base_url=config.bitbucket_url,
            credentials=config.credentials,
            transport=transport,
        )

    def build_request(self, method: str, path: str) -> HttpRequest:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        return HttpRequest(
            method=method.upper(), url=url, headers={"Accept": "application/json"}
        )

    def prepare(self, method: str, path: str) -> HttpRequest:
        """Build a request and authorize it as the last step before dispatch."""
        authentication = BitbucketAuthentication(self.credentials)
        return authentication(self.build_request(method, path))

    def send(self, method: str, path: str) -> Any:
        if self.transport is None:
            raise RuntimeError("No transport configured for BitbucketClient")
        return self.transport(self.prepare(method, path))

    def get(self, path: str) -> Any:
        return self.send("GET", path)
