"""Data models for the Tencent Cloud provider."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class InstanceState(str, Enum):
    """CVM instance states."""
    PENDING = "PENDING"
    LAUNCH_FAILED = "LAUNCH_FAILED"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    STARTING = "STARTING"
    STOPPING = "STOPPING"
    REBOOTING = "REBOOTING"
    SHUTDOWN = "SHUTDOWN"
    TERMINATING = "TERMINATING"


class NodeAddressType(str, Enum):
    """Address kinds reported to the orchestrator."""
    INTERNAL_IP = "InternalIP"
    EXTERNAL_IP = "ExternalIP"


class Capability(str, Enum):
    """Optional provider interfaces an orchestrator may ask for."""
    INSTANCES = "instances"
    ROUTES = "routes"
    LOAD_BALANCER = "load_balancer"
    ZONES = "zones"
    CLUSTERS = "clusters"


@dataclass
class InstanceInfo:
    """Information about a CVM instance."""
    instance_id: str
    zone: str
    instance_type: str
    instance_state: str
    vpc_id: str
    private_ips: List[str] = field(default_factory=list)
    public_ips: List[str] = field(default_factory=list)

    @property
    def is_running(self) -> bool:
        return self.instance_state == InstanceState.RUNNING.value


@dataclass(frozen=True)
class RouteEntry:
    """A gateway-IP to CIDR mapping in a cluster route table."""
    gateway_ip: str
    destination_cidr: str
    route_table_name: Optional[str] = None

    @property
    def name(self) -> str:
        # Routes have no name of their own; the gateway IP identifies them.
        return self.gateway_ip

    @property
    def target_node(self) -> str:
        return self.gateway_ip


@dataclass(frozen=True)
class NodeAddress:
    """A single typed node address."""
    type: NodeAddressType
    address: str


class TencentCloudConfig(BaseModel):
    """Tencent Cloud provider configuration with validation."""
    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    region: str = ""
    vpc_id: str = ""
    secret_id: str = ""
    secret_key: str = Field(default="", repr=False)
    cluster_route_table: str = ""
    request_timeout: int = Field(default=10, gt=0)
    root_domain: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Names of the settings required to talk to the cloud that are unset."""
        required = ("region", "vpc_id", "secret_id", "secret_key")
        return [name for name in required if not getattr(self, name)]
