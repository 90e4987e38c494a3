"""Tencent Cloud provider services package."""

from .instances import InstanceService
from .routes import RouteService

__all__ = [
    "InstanceService",
    "RouteService"
]
