"""Unit tests for regions and endpoint resolution.

Tests cover:
- Region lookup and registry
- Hostname patterns, overrides and the China partition
- EndpointResolver precedence of service_url over region
"""

from unittest.mock import Mock

import pytest

from cumulus.configuration import ClientConfig
from cumulus.runtime.exceptions import UnknownRegionError
from cumulus.runtime.handlers.endpoint import EndpointResolver
from cumulus.runtime.regions import RegionEndpoint


def endpoint_context(config, region=None, prefix="dynamodb"):
    context = Mock()
    context.request_context.client_config = config
    context.request_context.region = region
    context.request_context.endpoint_prefix = prefix
    context.request_context.service_name = "DynamoDB"
    return context


@pytest.mark.unit
class TestRegionEndpoint:
    """Test suite for RegionEndpoint."""

    def test_lookup_known_region(self):
        """Test known regions resolve to the registered instance."""
        region = RegionEndpoint.get_by_system_name("ca-central-1")

        assert region is RegionEndpoint.CA_CENTRAL_1
        assert region.display_name == "Canada (Central)"

    def test_lookup_normalizes_name(self):
        """Test names are trimmed and lower-cased."""
        assert RegionEndpoint.get_by_system_name(" US-WEST-2 ") == RegionEndpoint.US_WEST_2

    def test_unknown_region_still_resolves(self):
        """Test regions missing from the registry are still usable."""
        region = RegionEndpoint.get_by_system_name("xx-new-1")

        assert region.system_name == "xx-new-1"
        assert region.display_name == "Unknown"
        assert region.get_hostname("sns") == "sns.xx-new-1.amazonaws.com"

    def test_empty_name_rejected(self):
        """Test an empty region name raises."""
        with pytest.raises(UnknownRegionError):
            RegionEndpoint.get_by_system_name("")

    def test_enumerable_lists_registered_regions(self):
        """Test enumerable returns the registry."""
        names = {region.system_name for region in RegionEndpoint.enumerable()}

        assert {"us-east-1", "eu-west-1", "cn-north-1"} <= names

    @pytest.mark.parametrize(
        "prefix,region,expected",
        [
            ("dynamodb", "ca-central-1", "dynamodb.ca-central-1.amazonaws.com"),
            ("sdb", "us-east-1", "sdb.amazonaws.com"),
            ("s3", "us-east-1", "s3.amazonaws.com"),
            ("s3", "eu-west-1", "s3.eu-west-1.amazonaws.com"),
            ("ec2", "cn-north-1", "ec2.cn-north-1.amazonaws.com.cn"),
        ],
    )
    def test_hostnames(self, prefix, region, expected):
        """Test hostnames follow the regional pattern with overrides."""
        assert RegionEndpoint.get_by_system_name(region).get_hostname(prefix) == expected

    def test_equality_by_system_name(self):
        """Test regions compare and hash by system name."""
        assert RegionEndpoint("us-east-1", "x") == RegionEndpoint.US_EAST_1
        assert len({RegionEndpoint("us-east-1", "x"), RegionEndpoint.US_EAST_1}) == 1


@pytest.mark.unit
class TestEndpointResolver:
    """Test suite for EndpointResolver."""

    def test_region_endpoint(self):
        """Test the regional endpoint is used without service_url."""
        context = endpoint_context(ClientConfig(service_url=None), RegionEndpoint.EU_WEST_1)

        assert EndpointResolver.determine_endpoint(context) == (
            "https://dynamodb.eu-west-1.amazonaws.com"
        )

    def test_service_url_wins(self):
        """Test an explicit service_url overrides the region."""
        config = ClientConfig(service_url="http://localhost:8000/")
        context = endpoint_context(config, RegionEndpoint.EU_WEST_1)

        assert EndpointResolver.determine_endpoint(context) == "http://localhost:8000"

    def test_service_url_without_scheme(self):
        """Test a bare host gets the configured scheme."""
        config = ClientConfig(service_url="dynamodb.local:8000", use_http=True)

        context = endpoint_context(config)

        assert EndpointResolver.determine_endpoint(context) == "http://dynamodb.local:8000"

    def test_no_region_and_no_url(self):
        """Test resolution fails without region or service_url."""
        context = endpoint_context(ClientConfig(service_url=None))

        with pytest.raises(UnknownRegionError):
            EndpointResolver.determine_endpoint(context)
