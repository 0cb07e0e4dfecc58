from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

AUTHORIZATION = "Authorization"


def _read_only(headers: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(headers))


Headers = Annotated[Mapping[str, str], AfterValidator(_read_only)]


class HttpRequest(BaseModel):
    """An outbound request. Filters return copies instead of mutating it."""

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    url: str
    headers: Headers = Field(default_factory=lambda: MappingProxyType({}))

    def with_header(self, name: str, value: str) -> Self:
        headers = MappingProxyType({**self.headers, name: value})
        return self.model_copy(update={"headers": headers})

    def header(self, name: str) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def __str__(self):
        return f"{self.method} {self.url}"
