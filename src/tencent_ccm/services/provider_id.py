"""Encoding and decoding of ``tencentcloud://<zone>/<instanceId>`` provider IDs."""

from typing import Tuple

from ..errors import InvalidProviderID

PROVIDER_NAME = "tencentcloud"
PROVIDER_ID_PREFIX = f"{PROVIDER_NAME}://"


def instance_path(zone: str, instance_id: str) -> str:
    """Return the ``/<zone>/<instanceId>`` path the orchestrator prefixes with the scheme."""
    _check_segments(zone, instance_id)
    return f"/{zone}/{instance_id}"


def encode(zone: str, instance_id: str) -> str:
    """Build the provider ID for an instance in a zone."""
    _check_segments(zone, instance_id)
    return f"{PROVIDER_ID_PREFIX}{zone}/{instance_id}"


def decode(provider_id: str) -> Tuple[str, str]:
    """
    Split a provider ID into ``(zone, instance_id)``.

    Both ``tencentcloud://zone/id`` and the orchestrator-composed
    ``tencentcloud:///zone/id`` are accepted.

    Raises:
        InvalidProviderID: If the scheme is missing or foreign, or the
            remainder is not exactly ``zone/id``
    """
    if not provider_id.startswith(PROVIDER_ID_PREFIX):
        raise InvalidProviderID(provider_id, reason=f"missing {PROVIDER_ID_PREFIX} prefix")

    path = provider_id[len(PROVIDER_ID_PREFIX):]
    if path.startswith("/"):
        path = path[1:]

    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise InvalidProviderID(provider_id)
    return parts[0], parts[1]


def _check_segments(zone: str, instance_id: str) -> None:
    for label, value in (("zone", zone), ("instance id", instance_id)):
        if not value or "/" in value:
            raise InvalidProviderID(
                f"{PROVIDER_ID_PREFIX}{zone}/{instance_id}",
                reason=f"empty or slash-containing {label} {value!r}",
            )
