"""
Operator commands exposed by the ``tencent-ccm`` CLI.

Each command registers its own arguments and runs against a configured
:class:`TencentCloud` provider.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import List

from rich.console import Console

from .cloud import TencentCloud
from .models import Capability, RouteEntry
from .utils.display import (
    display_capabilities,
    display_error,
    display_node_addresses,
    display_routes,
    display_success,
)


class BaseCommand(ABC):
    """Abstract base class for CLI commands."""

    name: str
    help_text: str

    def register(self, subparsers: argparse._SubParsersAction) -> None:
        """Attach this command to the provided subparser collection."""
        parser = subparsers.add_parser(self.name, help=self.help_text)
        self.add_arguments(parser)
        parser.set_defaults(handler=self)

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register CLI arguments specific to this command."""

    @abstractmethod
    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        """Run the command and return the process exit code."""


class CheckConnectionCommand(BaseCommand):
    name = "check"
    help_text = "Verify the credentials can reach the Tencent Cloud API."

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        if cloud.client.test_connection():
            display_success(console, f"✓ Connected to Tencent Cloud in {cloud.config.region}")
            return 0
        display_error(console, "✗ Failed to connect to Tencent Cloud")
        return 1


class CapabilitiesCommand(BaseCommand):
    name = "capabilities"
    help_text = "Show which provider capabilities are implemented."

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        display_capabilities(console, cloud.provider_name(), cloud.supported_capabilities())
        return 0


class NodeAddressesCommand(BaseCommand):
    name = "node-addresses"
    help_text = "List the addresses of a node, looked up by node name (private IP)."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("node_name", help="Node name, i.e. the node's private IP.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        display_node_addresses(console, args.node_name, instances.node_addresses(args.node_name))
        return 0


class NodeAddressesByProviderIDCommand(BaseCommand):
    name = "node-addresses-by-provider-id"
    help_text = "List the addresses of the instance behind a provider ID."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("provider_id", help="Provider ID, e.g. tencentcloud://ap-guangzhou-3/ins-xxxx.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        addresses = instances.node_addresses_by_provider_id(args.provider_id)
        display_node_addresses(console, args.provider_id, addresses)
        return 0


class InstanceIDCommand(BaseCommand):
    name = "instance-id"
    help_text = "Print the /<zone>/<instanceId> path of a node."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("node_name", help="Node name, i.e. the node's private IP.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        console.print(instances.instance_id(args.node_name))
        return 0


class InstanceTypeCommand(BaseCommand):
    name = "instance-type"
    help_text = "Print the CVM instance type of a node."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("node_name", help="Node name, i.e. the node's private IP.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        console.print(instances.instance_type(args.node_name))
        return 0


class InstanceExistsCommand(BaseCommand):
    name = "instance-exists"
    help_text = "Check whether the instance behind a provider ID exists in the VPC."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("provider_id", help="Provider ID of the node.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        exists = instances.instance_exists_by_provider_id(args.provider_id, missing_ok=True)
        console.print("exists" if exists else "[yellow]not found[/yellow]")
        return 0 if exists else 1


class InstanceShutdownCommand(BaseCommand):
    name = "instance-shutdown"
    help_text = "Check whether the instance behind a provider ID is shut down."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("provider_id", help="Provider ID of the node.")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        instances = cloud.require(Capability.INSTANCES)
        shutdown = instances.instance_shutdown_by_provider_id(args.provider_id)
        console.print("shutdown" if shutdown else "running")
        return 0


class ListRoutesCommand(BaseCommand):
    name = "list-routes"
    help_text = "List the routes in the cluster route table."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--cluster-name", default="", help="Cluster name (informational).")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        routes = cloud.require(Capability.ROUTES)
        display_routes(console, cloud.config.cluster_route_table, routes.list_routes(args.cluster_name))
        return 0


class CreateRouteCommand(BaseCommand):
    name = "create-route"
    help_text = "Create a route sending DESTINATION_CIDR to GATEWAY_IP."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("gateway_ip", help="Node IP acting as the gateway.")
        parser.add_argument("destination_cidr", help="Pod CIDR routed to the gateway.")
        parser.add_argument("--cluster-name", default="", help="Cluster name (informational).")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        routes = cloud.require(Capability.ROUTES)
        route = RouteEntry(gateway_ip=args.gateway_ip, destination_cidr=args.destination_cidr)
        routes.create_route(args.cluster_name, args.gateway_ip, route)
        display_success(console, f"✓ Created route {args.destination_cidr} via {args.gateway_ip}")
        return 0


class DeleteRouteCommand(BaseCommand):
    name = "delete-route"
    help_text = "Delete the route sending DESTINATION_CIDR to GATEWAY_IP."

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("gateway_ip", help="Node IP acting as the gateway.")
        parser.add_argument("destination_cidr", help="Pod CIDR routed to the gateway.")
        parser.add_argument("--cluster-name", default="", help="Cluster name (informational).")

    def execute(self, cloud: TencentCloud, args: argparse.Namespace, console: Console) -> int:
        routes = cloud.require(Capability.ROUTES)
        route = RouteEntry(gateway_ip=args.gateway_ip, destination_cidr=args.destination_cidr)
        routes.delete_route(args.cluster_name, route)
        display_success(console, f"✓ Deleted route {args.destination_cidr} via {args.gateway_ip}")
        return 0


def get_commands() -> List[BaseCommand]:
    """Return every available CLI command."""
    return [
        CheckConnectionCommand(),
        CapabilitiesCommand(),
        NodeAddressesCommand(),
        NodeAddressesByProviderIDCommand(),
        InstanceIDCommand(),
        InstanceTypeCommand(),
        InstanceExistsCommand(),
        InstanceShutdownCommand(),
        ListRoutesCommand(),
        CreateRouteCommand(),
        DeleteRouteCommand(),
    ]
