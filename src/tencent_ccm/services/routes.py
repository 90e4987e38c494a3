"""Cluster route table operations."""

import logging
from typing import List

from ..client import TencentCloudClient
from ..errors import ConfigurationError
from ..models import RouteEntry

logger = logging.getLogger(__name__)


class RouteService:
    """Service class for the single configured cluster route table.

    Nothing is cached and no duplicate or existence checks are made locally;
    the route table service decides what a create or delete means.
    """

    def __init__(self, client: TencentCloudClient, route_table: str):
        """Initialize route service."""
        self.client = client
        self.route_table = route_table

    def list_routes(self) -> List[RouteEntry]:
        """List every route of the table. An empty table yields an empty list."""
        return self.client.describe_routes(self._table())

    def create_route(self, gateway_ip: str, destination_cidr: str) -> str:
        """Create a route and return the request ID."""
        table = self._table()
        request_id = self.client.create_route(table, gateway_ip, destination_cidr)
        logger.info(
            f"Created route {destination_cidr} via {gateway_ip} in table {table} "
            f"(RequestId: {request_id})"
        )
        return request_id

    def delete_route(self, gateway_ip: str, destination_cidr: str) -> str:
        """Delete a route and return the request ID."""
        table = self._table()
        request_id = self.client.delete_route(table, gateway_ip, destination_cidr)
        logger.info(
            f"Deleted route {destination_cidr} via {gateway_ip} from table {table} "
            f"(RequestId: {request_id})"
        )
        return request_id

    def _table(self) -> str:
        if not self.route_table:
            raise ConfigurationError("cluster_route_table is not configured")
        return self.route_table
