"""Tencent Cloud provider for cluster node lifecycle and pod network routes."""

from .cloud import PROVIDER_NAME, CloudInstances, CloudRoutes, TencentCloud
from .client import TencentCloudClient
from .errors import (
    CloudProviderError,
    ConfigurationError,
    ExternalServiceError,
    InvalidProviderID,
    NotFoundError,
    NotSupportedError,
)
from .models import (
    Capability,
    InstanceInfo,
    InstanceState,
    NodeAddress,
    NodeAddressType,
    RouteEntry,
    TencentCloudConfig,
)

__version__ = "0.1.0"

__all__ = [
    "PROVIDER_NAME",
    "Capability",
    "CloudInstances",
    "CloudProviderError",
    "CloudRoutes",
    "ConfigurationError",
    "ExternalServiceError",
    "InstanceInfo",
    "InstanceState",
    "InvalidProviderID",
    "NodeAddress",
    "NodeAddressType",
    "NotFoundError",
    "NotSupportedError",
    "RouteEntry",
    "TencentCloud",
    "TencentCloudClient",
    "TencentCloudConfig",
]
