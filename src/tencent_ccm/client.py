"""Tencent Cloud API client used by the provider services."""

import logging
import threading
from typing import Any, List, Optional

from tencentcloud.common.exception.tencent_cloud_sdk_exception import TencentCloudSDKException
from tencentcloud.cvm.v20170312 import cvm_client
from tencentcloud.cvm.v20170312 import models as cvm_models
from tencentcloud.tke.v20180525 import models as tke_models
from tencentcloud.tke.v20180525 import tke_client

from .auth import TencentCloudAuthenticator
from .errors import ExternalServiceError
from .models import InstanceInfo, RouteEntry, TencentCloudConfig

logger = logging.getLogger(__name__)

FILTER_PRIVATE_IP = "private-ip-address"
FILTER_INSTANCE_ID = "instance-id"
FILTER_VPC_ID = "vpc-id"


class TencentCloudClient:
    """Thin client over the CVM and TKE APIs.

    Every SDK failure is converted to :class:`ExternalServiceError` here, so
    callers never need to inspect SDK exception types.
    """

    def __init__(self, config: TencentCloudConfig):
        """
        Initialize the client with authentication and lazy service clients.

        Args:
            config: Provider configuration carrying region and credentials
        """
        self.config = config
        self.authenticator = TencentCloudAuthenticator(config)
        self.credential, self.profile = self.authenticator.authenticate()

        # Service clients will be initialized lazily
        self._lock = threading.Lock()
        self._cvm_client: Optional[cvm_client.CvmClient] = None
        self._tke_client: Optional[tke_client.TkeClient] = None

    @property
    def cvm_client(self) -> cvm_client.CvmClient:
        """Lazy-load CVM client."""
        with self._lock:
            if not self._cvm_client:
                self._cvm_client = cvm_client.CvmClient(
                    self.credential, self.config.region, self.profile
                )
            return self._cvm_client

    @property
    def tke_client(self) -> tke_client.TkeClient:
        """Lazy-load TKE client."""
        with self._lock:
            if not self._tke_client:
                self._tke_client = tke_client.TkeClient(
                    self.credential, self.config.region, self.profile
                )
            return self._tke_client

    def test_connection(self) -> bool:
        """Test if the connection to Tencent Cloud is working."""
        try:
            regions = self.cvm_client.DescribeRegions(cvm_models.DescribeRegionsRequest())
            logger.info(f"Connection test successful. Found {regions.TotalCount} regions.")
            return True
        except TencentCloudSDKException as e:
            logger.error(f"Connection test failed: {e}")
            return False

    def query_instances(
        self, filter_name: str, filter_value: str, vpc_id: Optional[str] = None
    ) -> List[InstanceInfo]:
        """
        List instances matching a DescribeInstances filter.

        Results are returned in the order the API reports them. When
        ``vpc_id`` is given the query is also narrowed to that VPC.

        Raises:
            ExternalServiceError: If the API call fails
        """
        request = cvm_models.DescribeInstancesRequest()
        instance_filter = cvm_models.Filter()
        instance_filter.Name = filter_name
        instance_filter.Values = [filter_value]
        filters = [instance_filter]
        if vpc_id:
            vpc_filter = cvm_models.Filter()
            vpc_filter.Name = FILTER_VPC_ID
            vpc_filter.Values = [vpc_id]
            filters.append(vpc_filter)
        request.Filters = filters

        try:
            response = self.cvm_client.DescribeInstances(request)
        except TencentCloudSDKException as e:
            logger.error(f"Failed to describe instances ({filter_name}={filter_value}): {e}")
            raise ExternalServiceError.from_sdk_exception("DescribeInstances", e) from e

        return [self._parse_instance(instance) for instance in response.InstanceSet or []]

    def describe_routes(self, route_table: str) -> List[RouteEntry]:
        """
        List the routes of a cluster route table.

        Raises:
            ExternalServiceError: If the API call fails
        """
        request = tke_models.DescribeClusterRoutesRequest()
        request.RouteTableName = route_table

        try:
            response = self.tke_client.DescribeClusterRoutes(request)
        except TencentCloudSDKException as e:
            logger.error(f"Failed to describe routes of table {route_table}: {e}")
            raise ExternalServiceError.from_sdk_exception("DescribeClusterRoutes", e) from e

        return [
            RouteEntry(
                gateway_ip=route.GatewayIp,
                destination_cidr=route.DestinationCidrBlock,
                route_table_name=route.RouteTableName or route_table,
            )
            for route in response.RouteSet or []
        ]

    def create_route(self, route_table: str, gateway_ip: str, destination_cidr: str) -> str:
        """
        Create a route in a cluster route table.

        Returns:
            The request ID acknowledging the change

        Raises:
            ExternalServiceError: If the API call fails
        """
        request = tke_models.CreateClusterRouteRequest()
        request.RouteTableName = route_table
        request.GatewayIp = gateway_ip
        request.DestinationCidrBlock = destination_cidr

        try:
            response = self.tke_client.CreateClusterRoute(request)
        except TencentCloudSDKException as e:
            logger.error(
                f"Failed to create route {destination_cidr} via {gateway_ip} "
                f"in table {route_table}: {e}"
            )
            raise ExternalServiceError.from_sdk_exception("CreateClusterRoute", e) from e

        return response.RequestId

    def delete_route(self, route_table: str, gateway_ip: str, destination_cidr: str) -> str:
        """
        Delete a route from a cluster route table.

        Returns:
            The request ID acknowledging the change

        Raises:
            ExternalServiceError: If the API call fails
        """
        request = tke_models.DeleteClusterRouteRequest()
        request.RouteTableName = route_table
        request.GatewayIp = gateway_ip
        request.DestinationCidrBlock = destination_cidr

        try:
            response = self.tke_client.DeleteClusterRoute(request)
        except TencentCloudSDKException as e:
            logger.error(
                f"Failed to delete route {destination_cidr} via {gateway_ip} "
                f"from table {route_table}: {e}"
            )
            raise ExternalServiceError.from_sdk_exception("DeleteClusterRoute", e) from e

        return response.RequestId

    def _parse_instance(self, instance: Any) -> InstanceInfo:
        """Parse a CVM instance object into InstanceInfo."""
        placement = instance.Placement
        vpc = instance.VirtualPrivateCloud
        return InstanceInfo(
            instance_id=instance.InstanceId,
            zone=placement.Zone if placement else "",
            instance_type=instance.InstanceType or "",
            instance_state=instance.InstanceState or "",
            vpc_id=vpc.VpcId if vpc else "",
            private_ips=list(instance.PrivateIpAddresses or []),
            public_ips=list(instance.PublicIpAddresses or []),
        )

