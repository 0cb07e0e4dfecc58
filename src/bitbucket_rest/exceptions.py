class BitbucketAuthenticationError(Exception):
    """Base class for failures while attaching credentials to a request."""


class CredentialFormatError(BitbucketAuthenticationError, ValueError):
    """Raised when a credential is not Basic, Bearer or base64 formatted."""

    def __init__(self, credential: str) -> None:
        self.credential = credential
        super().__init__(
            f"Credential is not Basic, Bearer or base64 format: credential={credential}"
        )


class MissingCredentialsError(BitbucketAuthenticationError):
    """Raised when no credential supplier is configured or it returned nothing."""
