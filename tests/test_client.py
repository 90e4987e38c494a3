"""Tests for the Tencent Cloud API client."""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import pytest
from tencentcloud.common.exception.tencent_cloud_sdk_exception import TencentCloudSDKException

from tencent_ccm.client import FILTER_PRIVATE_IP, TencentCloudClient
from tencent_ccm.errors import ExternalServiceError


def sdk_instance(**overrides):
    fields = dict(
        InstanceId="ins-abcd1234",
        Placement=SimpleNamespace(Zone="ap-guangzhou-3"),
        InstanceType="S5.MEDIUM4",
        InstanceState="RUNNING",
        VirtualPrivateCloud=SimpleNamespace(VpcId="vpc-A"),
        PrivateIpAddresses=["10.0.0.5"],
        PublicIpAddresses=["1.2.3.4"],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestTencentCloudClient:
    """Test Tencent Cloud Client."""

    @pytest.fixture
    def client(self, config):
        client = TencentCloudClient(config)
        client._cvm_client = Mock()
        client._tke_client = Mock()
        return client

    def test_lazy_loading_cvm_client(self, config):
        with patch("tencent_ccm.client.cvm_client.CvmClient") as mock_cvm:
            client = TencentCloudClient(config)
            assert client._cvm_client is None

            _ = client.cvm_client
            _ = client.cvm_client

            mock_cvm.assert_called_once_with(client.credential, "ap-guangzhou", client.profile)

    def test_lazy_loading_tke_client(self, config):
        with patch("tencent_ccm.client.tke_client.TkeClient") as mock_tke:
            client = TencentCloudClient(config)
            assert client._tke_client is None

            _ = client.tke_client

            mock_tke.assert_called_once()

    def test_request_timeout_reaches_profile(self, config):
        config.request_timeout = 3

        client = TencentCloudClient(config)

        assert client.profile.httpProfile.reqTimeout == 3

    def test_query_instances_builds_filter(self, client):
        client.cvm_client.DescribeInstances.return_value = SimpleNamespace(
            InstanceSet=[sdk_instance()]
        )

        instances = client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5")

        request = client.cvm_client.DescribeInstances.call_args[0][0]
        assert request.Filters[0].Name == "private-ip-address"
        assert request.Filters[0].Values == ["10.0.0.5"]
        assert len(instances) == 1
        instance = instances[0]
        assert instance.instance_id == "ins-abcd1234"
        assert instance.zone == "ap-guangzhou-3"
        assert instance.vpc_id == "vpc-A"
        assert instance.private_ips == ["10.0.0.5"]
        assert instance.public_ips == ["1.2.3.4"]
        assert instance.is_running

    def test_query_instances_adds_vpc_filter(self, client):
        client.cvm_client.DescribeInstances.return_value = SimpleNamespace(InstanceSet=[])

        client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5", vpc_id="vpc-A")

        request = client.cvm_client.DescribeInstances.call_args[0][0]
        assert [(f.Name, f.Values) for f in request.Filters] == [
            ("private-ip-address", ["10.0.0.5"]),
            ("vpc-id", ["vpc-A"]),
        ]

    def test_query_instances_without_vpc_sends_single_filter(self, client):
        client.cvm_client.DescribeInstances.return_value = SimpleNamespace(InstanceSet=[])

        client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5")

        request = client.cvm_client.DescribeInstances.call_args[0][0]
        assert len(request.Filters) == 1

    def test_query_instances_handles_missing_fields(self, client):
        client.cvm_client.DescribeInstances.return_value = SimpleNamespace(
            InstanceSet=[sdk_instance(PublicIpAddresses=None, PrivateIpAddresses=None)]
        )

        instance = client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5")[0]

        assert instance.private_ips == []
        assert instance.public_ips == []

    def test_query_instances_preserves_response_order(self, client):
        client.cvm_client.DescribeInstances.return_value = SimpleNamespace(
            InstanceSet=[sdk_instance(InstanceId="ins-2"), sdk_instance(InstanceId="ins-1")]
        )

        ids = [i.instance_id for i in client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5")]

        assert ids == ["ins-2", "ins-1"]

    def test_sdk_error_becomes_external_service_error(self, client):
        sdk_error = TencentCloudSDKException("AuthFailure.SignatureExpire", "signature expired", "req-1")
        client.cvm_client.DescribeInstances.side_effect = sdk_error

        with pytest.raises(ExternalServiceError) as exc_info:
            client.query_instances(FILTER_PRIVATE_IP, "10.0.0.5")

        error = exc_info.value
        assert error.operation == "DescribeInstances"
        assert error.code == "AuthFailure.SignatureExpire"
        assert error.message == "signature expired"
        assert error.request_id == "req-1"
        assert error.__cause__ is sdk_error

    def test_describe_routes(self, client):
        client.tke_client.DescribeClusterRoutes.return_value = SimpleNamespace(
            RouteSet=[
                SimpleNamespace(
                    RouteTableName="cluster-routes",
                    GatewayIp="10.0.0.5",
                    DestinationCidrBlock="172.16.0.0/24",
                )
            ]
        )

        routes = client.describe_routes("cluster-routes")

        request = client.tke_client.DescribeClusterRoutes.call_args[0][0]
        assert request.RouteTableName == "cluster-routes"
        assert routes[0].gateway_ip == "10.0.0.5"
        assert routes[0].destination_cidr == "172.16.0.0/24"
        assert routes[0].name == routes[0].target_node == "10.0.0.5"

    def test_describe_routes_empty(self, client):
        client.tke_client.DescribeClusterRoutes.return_value = SimpleNamespace(RouteSet=None)

        assert client.describe_routes("cluster-routes") == []

    def test_create_route(self, client):
        client.tke_client.CreateClusterRoute.return_value = SimpleNamespace(RequestId="req-2")

        assert client.create_route("cluster-routes", "203.0.113.5", "10.1.0.0/24") == "req-2"

        request = client.tke_client.CreateClusterRoute.call_args[0][0]
        assert request.RouteTableName == "cluster-routes"
        assert request.GatewayIp == "203.0.113.5"
        assert request.DestinationCidrBlock == "10.1.0.0/24"

    def test_delete_route_error(self, client):
        client.tke_client.DeleteClusterRoute.side_effect = TencentCloudSDKException(
            "ResourceNotFound", "route not found", "req-3"
        )

        with pytest.raises(ExternalServiceError) as exc_info:
            client.delete_route("cluster-routes", "203.0.113.5", "10.1.0.0/24")

        assert exc_info.value.operation == "DeleteClusterRoute"
        assert exc_info.value.code == "ResourceNotFound"

    def test_test_connection(self, client):
        client.cvm_client.DescribeRegions.return_value = SimpleNamespace(TotalCount=20)

        assert client.test_connection() is True

        client.cvm_client.DescribeRegions.side_effect = TencentCloudSDKException("InternalError", "boom")

        assert client.test_connection() is False
