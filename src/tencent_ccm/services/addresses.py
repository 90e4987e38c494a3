"""Conversion of instance addresses into orchestrator node addresses."""

from typing import List

from ..models import InstanceInfo, NodeAddress, NodeAddressType


def node_addresses(instance: InstanceInfo) -> List[NodeAddress]:
    """Private IPs as internal addresses, then public IPs as external ones, in instance order."""
    addresses = [
        NodeAddress(type=NodeAddressType.INTERNAL_IP, address=ip)
        for ip in instance.private_ips
    ]
    addresses.extend(
        NodeAddress(type=NodeAddressType.EXTERNAL_IP, address=ip)
        for ip in instance.public_ips
    )
    return addresses
