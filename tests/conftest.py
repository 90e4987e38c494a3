"""Shared fixtures for the provider tests."""

from unittest.mock import Mock

import pytest

from tencent_ccm.client import TencentCloudClient
from tencent_ccm.models import TencentCloudConfig


@pytest.fixture
def config():
    return TencentCloudConfig(
        region="ap-guangzhou",
        vpc_id="vpc-A",
        secret_id="AKIDexample1234",
        secret_key="secret-key-value",
        cluster_route_table="cluster-routes",
    )


@pytest.fixture
def mock_client():
    """Mock API client restricted to the TencentCloudClient interface."""
    return Mock(spec=TencentCloudClient)
