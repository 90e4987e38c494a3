"""Instance lookups scoped to the configured VPC."""

import logging
from typing import Callable

from ..client import FILTER_INSTANCE_ID, FILTER_PRIVATE_IP, TencentCloudClient
from ..errors import NotFoundError
from ..models import InstanceInfo
from . import provider_id as provider_ids

logger = logging.getLogger(__name__)


class InstanceService:
    """Resolve CVM instances by private IP, instance ID or provider ID."""

    def __init__(self, client: TencentCloudClient, vpc_id: str):
        """Initialize instance service."""
        self.client = client
        self.vpc_id = vpc_id

    def get_instance_by_private_ip(self, private_ip: str) -> InstanceInfo:
        """
        Find the instance in the configured VPC owning ``private_ip``.

        Raises:
            NotFoundError: If no instance in the VPC carries the address
            ExternalServiceError: If the API call fails
        """
        return self._first_match(
            FILTER_PRIVATE_IP,
            private_ip,
            lambda instance: private_ip in instance.private_ips,
        )

    def get_instance_by_instance_id(self, instance_id: str) -> InstanceInfo:
        """
        Find the instance in the configured VPC with ``instance_id``.

        Raises:
            NotFoundError: If the VPC holds no such instance
            ExternalServiceError: If the API call fails
        """
        return self._first_match(
            FILTER_INSTANCE_ID,
            instance_id,
            lambda instance: instance.instance_id == instance_id,
        )

    def get_instance_by_provider_id(self, provider_id: str) -> InstanceInfo:
        """
        Decode ``provider_id`` and look the instance up by its ID.

        Raises:
            InvalidProviderID: Before any remote call, if the ID is malformed
            NotFoundError: If the VPC holds no such instance
            ExternalServiceError: If the API call fails
        """
        _, instance_id = provider_ids.decode(provider_id)
        return self.get_instance_by_instance_id(instance_id)

    def _first_match(
        self,
        filter_name: str,
        filter_value: str,
        matches: Callable[[InstanceInfo], bool],
    ) -> InstanceInfo:
        # Results are checked against the VPC again locally.
        # The first match in API response order wins.
        for instance in self.client.query_instances(filter_name, filter_value, vpc_id=self.vpc_id):
            if instance.vpc_id != self.vpc_id:
                continue
            if matches(instance):
                return instance

        logger.debug(f"No instance with {filter_name}={filter_value} in VPC {self.vpc_id}")
        raise NotFoundError("instance", filter_value)
