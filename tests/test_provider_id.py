"""Tests for provider ID encoding and decoding."""

import pytest

from tencent_ccm.errors import InvalidProviderID
from tencent_ccm.services import provider_id


class TestProviderID:
    """Test provider ID codec."""

    @pytest.mark.parametrize(
        "zone, instance_id",
        [
            ("ap-guangzhou-3", "ins-abcd1234"),
            ("na-siliconvalley-1", "ins-0"),
        ],
    )
    def test_decode_reverses_encode(self, zone, instance_id):
        encoded = provider_id.encode(zone, instance_id)

        assert encoded == f"tencentcloud://{zone}/{instance_id}"
        assert provider_id.decode(encoded) == (zone, instance_id)

    def test_decode_orchestrator_form(self):
        """The orchestrator prefixes the scheme to the /zone/id instance path."""
        path = provider_id.instance_path("ap-guangzhou-3", "ins-abcd1234")

        assert path == "/ap-guangzhou-3/ins-abcd1234"
        assert provider_id.decode(f"tencentcloud://{path}") == ("ap-guangzhou-3", "ins-abcd1234")

    @pytest.mark.parametrize(
        "value",
        [
            "tencentcloud://onlyonepart",
            "tencentcloud://",
            "tencentcloud://zone/id/extra",
            "tencentcloud://zone/",
            "tencentcloud:///zone",
            "tencentcloud:////id",
            "",
            "ap-guangzhou-3/ins-1",
            "/ap-guangzhou-3/ins-1",
            "aws:zone/ins-1",
            "aws:///ap-guangzhou-3/ins-1",
            "TENCENTCLOUD://ap-guangzhou-3/ins-1",
        ],
    )
    def test_decode_rejects_malformed(self, value):
        with pytest.raises(InvalidProviderID) as exc_info:
            provider_id.decode(value)

        assert exc_info.value.provider_id == value

    def test_invalid_provider_id_is_value_error(self):
        with pytest.raises(ValueError):
            provider_id.decode("tencentcloud://onlyonepart")

    @pytest.mark.parametrize(
        "zone, instance_id",
        [("ap/guangzhou", "ins-1"), ("ap-guangzhou-3", "ins/1"), ("", "ins-1"), ("zone", "")],
    )
    def test_encode_rejects_bad_segments(self, zone, instance_id):
        with pytest.raises(InvalidProviderID):
            provider_id.encode(zone, instance_id)

    def test_encode_error_names_composed_id(self):
        with pytest.raises(InvalidProviderID) as exc_info:
            provider_id.instance_path("", "ins-1")

        assert exc_info.value.provider_id == "tencentcloud:///ins-1"
        assert "zone" in str(exc_info.value)
