"""Exceptions raised by the Tencent Cloud provider."""

from typing import Optional


class CloudProviderError(RuntimeError):
    """Base class for every error raised by this package."""


class ConfigurationError(CloudProviderError):
    """Raised when provider configuration is missing or malformed."""


class InvalidProviderID(CloudProviderError, ValueError):
    """Raised when a provider ID does not have the ``tencentcloud://zone/id`` shape."""

    def __init__(self, provider_id: str, reason: str = "invalid format"):
        super().__init__(f"{reason} for providerId {provider_id!r}")
        self.provider_id = provider_id


class NotFoundError(CloudProviderError):
    """Raised when nothing in the configured VPC matches a lookup.

    The orchestrator treats this as "the instance is gone", so it is only
    raised after a successful remote call that returned no match.
    """

    def __init__(self, kind: str, key: str):
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class ExternalServiceError(CloudProviderError):
    """Raised when a Tencent Cloud API call fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        code: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        detail = f"[{code}] {message}" if code else message
        if request_id:
            detail = f"{detail} (RequestId: {request_id})"
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.code = code
        self.message = message
        self.request_id = request_id

    @classmethod
    def from_sdk_exception(cls, operation: str, exc) -> "ExternalServiceError":
        """Build from a ``TencentCloudSDKException``."""
        return cls(
            operation,
            message=exc.get_message() or str(exc),
            code=exc.get_code(),
            request_id=exc.get_request_id(),
        )


class NotSupportedError(CloudProviderError, NotImplementedError):
    """Raised for operations and capabilities this provider does not implement."""

    def __init__(self, what: str):
        super().__init__(f"{what} is not supported by the tencentcloud provider")
        self.what = what
