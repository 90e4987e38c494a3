"""Tencent Cloud provider: capability table and orchestrator-facing interfaces."""

import logging
from typing import Dict, List, Optional, Tuple

from .client import TencentCloudClient
from .errors import (
    CloudProviderError,
    ConfigurationError,
    ExternalServiceError,
    NotFoundError,
    NotSupportedError,
)
from .models import Capability, NodeAddress, RouteEntry, TencentCloudConfig
from .services import InstanceService, RouteService
from .services import provider_id as provider_ids
from .services.addresses import node_addresses
from .utils.config import ConfigSource, load_config

logger = logging.getLogger(__name__)

PROVIDER_NAME = provider_ids.PROVIDER_NAME


class CloudInstances:
    """Instances capability.

    Node names are the nodes' private IPs; provider IDs are decoded to
    instance IDs. Lookups are always scoped to the configured VPC.
    """

    def __init__(self, instance_service: InstanceService):
        self.instance_service = instance_service

    def node_addresses(self, name: str) -> List[NodeAddress]:
        """Return the addresses of the node with the given name."""
        try:
            instance = self.instance_service.get_instance_by_private_ip(name)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.NodeAddresses("{name}") message=[{e}]')
            raise
        return node_addresses(instance)

    def node_addresses_by_provider_id(self, provider_id: str) -> List[NodeAddress]:
        """Return the addresses of the instance behind a provider ID."""
        try:
            instance = self.instance_service.get_instance_by_provider_id(provider_id)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.NodeAddressesByProviderID("{provider_id}") message=[{e}]')
            raise
        return node_addresses(instance)

    def external_id(self, name: str) -> str:
        """Return the bare CVM instance ID of the node."""
        try:
            instance = self.instance_service.get_instance_by_private_ip(name)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.ExternalID("{name}") message=[{e}]')
            raise
        return instance.instance_id

    def instance_id(self, name: str) -> str:
        """Return ``/<zone>/<instanceId>``; the orchestrator adds the scheme."""
        try:
            instance = self.instance_service.get_instance_by_private_ip(name)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.InstanceID("{name}") message=[{e}]')
            raise
        if not instance.zone:
            # The lookup succeeded but the API reported no placement for the instance.
            raise ExternalServiceError(
                "DescribeInstances",
                message=f"instance {instance.instance_id} has no placement zone",
            )
        return provider_ids.instance_path(instance.zone, instance.instance_id)

    def instance_type(self, name: str) -> str:
        try:
            instance = self.instance_service.get_instance_by_private_ip(name)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.InstanceType("{name}") message=[{e}]')
            raise
        return instance.instance_type

    def instance_type_by_provider_id(self, provider_id: str) -> str:
        try:
            instance = self.instance_service.get_instance_by_provider_id(provider_id)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.InstanceTypeByProviderID("{provider_id}") message=[{e}]')
            raise
        return instance.instance_type

    def instance_exists_by_provider_id(self, provider_id: str, missing_ok: bool = False) -> bool:
        """
        Check whether the instance behind a provider ID still exists.

        A missing instance raises :class:`NotFoundError` unless ``missing_ok``
        is set, in which case ``False`` is returned. The orchestrator deletes
        the node object when it gets ``False`` without an error.
        """
        try:
            self.instance_service.get_instance_by_provider_id(provider_id)
        except NotFoundError as e:
            logger.debug(f'tencentcloud.InstanceExistsByProviderID("{provider_id}") message=[{e}]')
            if missing_ok:
                return False
            raise
        return True

    def instance_shutdown_by_provider_id(self, provider_id: str) -> bool:
        """Return True when the instance is in any state other than RUNNING."""
        try:
            instance = self.instance_service.get_instance_by_provider_id(provider_id)
        except CloudProviderError as e:
            logger.debug(f'tencentcloud.InstanceShutdownByProviderID("{provider_id}") message=[{e}]')
            raise
        return not instance.is_running

    def add_ssh_key_to_all_instances(self, user: str, key_data: bytes) -> None:
        raise NotSupportedError("AddSSHKeyToAllInstances")

    def current_node_name(self, hostname: str) -> str:
        raise NotSupportedError("CurrentNodeName")


class CloudRoutes:
    """Routes capability over the single configured cluster route table.

    ``cluster_name`` and ``name_hint`` are accepted for interface
    compatibility only; the gateway IP and CIDR identify a route.
    """

    def __init__(self, route_service: RouteService):
        self.route_service = route_service

    def list_routes(self, cluster_name: str) -> List[RouteEntry]:
        return self.route_service.list_routes()

    def create_route(self, cluster_name: str, name_hint: str, route: RouteEntry) -> None:
        self.route_service.create_route(route.target_node, route.destination_cidr)

    def delete_route(self, cluster_name: str, route: RouteEntry) -> None:
        self.route_service.delete_route(route.target_node, route.destination_cidr)


class TencentCloud:
    """Capability table for the ``tencentcloud`` provider.

    Only instances and routes are implemented; load balancers, zones and
    clusters are reported as unsupported.
    """

    def __init__(self, config: TencentCloudConfig, client: Optional[TencentCloudClient] = None):
        """
        Initialize the provider.

        Args:
            config: Provider configuration
            client: Optional prebuilt API client (built from ``config`` otherwise)

        Raises:
            ConfigurationError: If region, VPC or credentials are missing
        """
        missing = config.missing_fields()
        if missing:
            raise ConfigurationError(
                f"Missing Tencent Cloud settings: {', '.join(missing)}"
            )
        self.config = config
        self.client = client or TencentCloudClient(config)

        self._capabilities: Dict[Capability, object] = {
            Capability.INSTANCES: CloudInstances(InstanceService(self.client, config.vpc_id)),
            Capability.ROUTES: CloudRoutes(RouteService(self.client, config.cluster_route_table)),
        }

    @classmethod
    def from_config(cls, source: ConfigSource = None) -> "TencentCloud":
        """Build the provider from a config blob with environment fallback."""
        return cls(load_config(source))

    @staticmethod
    def provider_name() -> str:
        return PROVIDER_NAME

    @staticmethod
    def has_cluster_id() -> bool:
        return False

    def get(self, kind: Capability) -> Optional[object]:
        """Return the implementation of a capability, or None if unsupported."""
        return self._capabilities.get(Capability(kind))

    def supports(self, kind: Capability) -> bool:
        return self.get(kind) is not None

    def require(self, kind: Capability) -> object:
        """Return the implementation of a capability or raise NotSupportedError."""
        implementation = self.get(kind)
        if implementation is None:
            raise NotSupportedError(f"Capability {Capability(kind).value}")
        return implementation

    def supported_capabilities(self) -> List[Capability]:
        return [kind for kind in Capability if self.supports(kind)]

    def instances(self) -> Tuple[Optional[CloudInstances], bool]:
        instances = self.get(Capability.INSTANCES)
        return instances, instances is not None

    def routes(self) -> Tuple[Optional[CloudRoutes], bool]:
        routes = self.get(Capability.ROUTES)
        return routes, routes is not None

    def load_balancer(self) -> Tuple[Optional[object], bool]:
        return None, False

    def zones(self) -> Tuple[Optional[object], bool]:
        return None, False

    def clusters(self) -> Tuple[Optional[object], bool]:
        return None, False
