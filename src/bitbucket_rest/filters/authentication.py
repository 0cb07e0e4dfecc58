"""Attach an ``Authorization`` header derived from a Bitbucket credential string.

A credential can be given in one of these shapes:

1. colon delimited username and password: ``admin:password`` or
   ``basic@admin:password``
2. the base64 encoding of the above: ``YWRtaW46cGFzc3dvcmQ=`` or
   ``basic@YWRtaW46cGFzc3dvcmQ=``
3. a personal access token: ``bearer@9DfK3AF9Jeke1O0dkKX5kDswps43FEDlf5Frkspma21M``
"""

import base64
import logging
import re

from bitbucket_rest.credentials import CredentialsSupplier
from bitbucket_rest.exceptions import CredentialFormatError, MissingCredentialsError
from bitbucket_rest.http import AUTHORIZATION, HttpRequest

logger = logging.getLogger("bitbucket-rest")

BASE64_REGEX = r"^([A-Za-z0-9+/]{4})*([A-Za-z0-9+/]{4}|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)$"
_BASE64_PATTERN = re.compile(BASE64_REGEX)

BEARER_PREFIX = "bearer@"
BASIC_PREFIX = "basic@"

# only U+0000..U+0020 count as blank, not wider Unicode whitespace
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def is_blank(credential: str | None) -> bool:
    return credential is None or not credential.strip(_TRIM_CHARS)


def is_base64_encoded(value: str) -> bool:
    return _BASE64_PATTERN.fullmatch(value) is not None


def normalize(credential: str | None, request: HttpRequest) -> HttpRequest:
    """Return a copy of ``request`` authorized with ``credential``.

    Blank credentials leave the request anonymous. Raises
    :class:`CredentialFormatError` when the credential has no usable shape.
    """
    if is_blank(credential):
        logger.debug(f"No credential configured, sending {request} anonymously")
        return request

    if credential.startswith(BEARER_PREFIX):
        token = credential.split("@", 1)[1]
        logger.debug(f"Using bearer authentication for {request}")
        return request.with_header(AUTHORIZATION, f"Bearer {token}")

    if credential.startswith(BASIC_PREFIX):
        credential = credential.split("@", 1)[1]

    if ":" in credential:
        credential = base64.b64encode(credential.encode("utf-8")).decode("ascii")

    if not is_base64_encoded(credential):
        raise CredentialFormatError(credential)

    logger.debug(f"Using basic authentication for {request}")
    return request.with_header(AUTHORIZATION, f"Basic {credential}")


class BitbucketAuthentication:
    """Request filter resolving credentials from ``supplier`` on every call."""

    def __init__(self, supplier: CredentialsSupplier | None) -> None:
        if supplier is None:
            raise MissingCredentialsError("No credential supplier configured")
        self._supplier = supplier

    def __call__(self, request: HttpRequest) -> HttpRequest:
        creds = self._supplier()
        if creds is None:
            raise MissingCredentialsError("credential supplier returned None")
        return normalize(creds.credential, request)
