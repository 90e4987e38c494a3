"""
Display utilities for presenting provider results in the terminal.
"""

from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import Capability, NodeAddress, RouteEntry


def display_node_addresses(console: Console, title: str, addresses: List[NodeAddress]) -> None:
    """Display node addresses in a formatted table."""
    if not addresses:
        console.print(f"[dim]No addresses reported for {title}[/dim]")
        return

    table = Table(title=f"Node Addresses - {title}")
    table.add_column("Type", style="magenta")
    table.add_column("Address", style="green")

    for address in addresses:
        table.add_row(address.type.value, address.address)

    console.print(table)


def display_routes(console: Console, route_table: str, routes: List[RouteEntry]) -> None:
    """Display cluster routes in a formatted table."""
    if not routes:
        console.print(f"[dim]No routes found in {route_table}[/dim]")
        return

    console.print(f"[green]Found {len(routes)} routes in {route_table}[/green]")

    table = Table(title=f"Cluster Routes - {route_table}")
    table.add_column("Gateway IP", style="cyan")
    table.add_column("Destination CIDR", style="green")

    for route in routes:
        table.add_row(route.gateway_ip, route.destination_cidr)

    console.print(table)


def display_capabilities(console: Console, provider_name: str, supported: Iterable[Capability]) -> None:
    """Display which capabilities the provider implements."""
    supported = set(supported)
    table = Table(title=f"Capabilities - {provider_name}")
    table.add_column("Capability", style="cyan")
    table.add_column("Supported")

    for kind in Capability:
        mark = "[green]yes[/green]" if kind in supported else "[red]no[/red]"
        table.add_row(kind.value, mark)

    console.print(table)


def display_config_help(console: Console, env_prefix: str) -> None:
    """Print helpful configuration instructions."""
    console.print("\n[red]Configuration Setup Instructions:[/red]")
    console.print(
        "\n1. Pass a JSON or YAML file with [cyan]--config[/cyan]:\n"
        "   [cyan]{\"region\": \"ap-guangzhou\", \"vpc_id\": \"vpc-xxxxxxxx\",\n"
        "    \"secret_id\": \"...\", \"secret_key\": \"...\",\n"
        "    \"cluster_route_table\": \"route-table-name\"}[/cyan]\n"
    )
    console.print(
        f"2. Or export the settings:\n"
        f"   [cyan]{env_prefix}REGION, {env_prefix}VPC_ID,\n"
        f"   {env_prefix}SECRET_ID, {env_prefix}SECRET_KEY,\n"
        f"   {env_prefix}CLUSTER_ROUTE_TABLE[/cyan]\n"
    )


def display_error(console: Console, message: str) -> None:
    """Display error message."""
    console.print(f"[red]{escape(message)}[/red]")


def display_success(console: Console, message: str) -> None:
    """Display success message."""
    console.print(f"[green]{message}[/green]")
