"""Region registry and endpoint hostnames."""

from typing import ClassVar, Dict, List, Optional

from cumulus.runtime.exceptions import UnknownRegionError

# (endpoint prefix, region) pairs whose hostname breaks the regional pattern
_HOSTNAME_OVERRIDES: Dict[tuple, str] = {
    ("sdb", "us-east-1"): "sdb.amazonaws.com",
    ("s3", "us-east-1"): "s3.amazonaws.com",
    ("sts", "us-east-1"): "sts.amazonaws.com",
}


class RegionEndpoint:
    """A named region.

    Known regions are available as class attributes (`RegionEndpoint.US_EAST_1`)
    and through `get_by_system_name`. Unknown names still resolve to a region
    so that newly launched regions work without an SDK update.
    """

    _registry: ClassVar[Dict[str, "RegionEndpoint"]] = {}

    US_EAST_1: ClassVar["RegionEndpoint"]
    US_EAST_2: ClassVar["RegionEndpoint"]
    US_WEST_1: ClassVar["RegionEndpoint"]
    US_WEST_2: ClassVar["RegionEndpoint"]
    CA_CENTRAL_1: ClassVar["RegionEndpoint"]
    EU_WEST_1: ClassVar["RegionEndpoint"]
    EU_CENTRAL_1: ClassVar["RegionEndpoint"]
    AP_NORTHEAST_1: ClassVar["RegionEndpoint"]
    AP_SOUTHEAST_1: ClassVar["RegionEndpoint"]
    AP_SOUTHEAST_2: ClassVar["RegionEndpoint"]
    SA_EAST_1: ClassVar["RegionEndpoint"]
    US_GOV_WEST_1: ClassVar["RegionEndpoint"]
    CN_NORTH_1: ClassVar["RegionEndpoint"]

    def __init__(self, system_name: str, display_name: str):
        self.system_name = system_name
        self.display_name = display_name

    @classmethod
    def _register(cls, system_name: str, display_name: str) -> "RegionEndpoint":
        region = cls(system_name, display_name)
        cls._registry[system_name] = region
        return region

    @classmethod
    def get_by_system_name(cls, system_name: Optional[str]) -> "RegionEndpoint":
        """Look up a region by name, e.g. "ca-central-1".

        Raises:
            UnknownRegionError: If the name is empty.
        """
        if not system_name or not system_name.strip():
            raise UnknownRegionError("A region system name is required")
        name = system_name.strip().lower()
        region = cls._registry.get(name)
        if region is None:
            region = cls(name, "Unknown")
        return region

    @classmethod
    def enumerable(cls) -> List["RegionEndpoint"]:
        return list(cls._registry.values())

    @property
    def dns_suffix(self) -> str:
        if self.system_name.startswith("cn-"):
            return "amazonaws.com.cn"
        return "amazonaws.com"

    def get_hostname(self, endpoint_prefix: str) -> str:
        """Hostname of a service in this region, e.g. dynamodb.ca-central-1.amazonaws.com."""
        override = _HOSTNAME_OVERRIDES.get((endpoint_prefix, self.system_name))
        if override:
            return override
        return f"{endpoint_prefix}.{self.system_name}.{self.dns_suffix}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegionEndpoint) and other.system_name == self.system_name

    def __hash__(self) -> int:
        return hash(self.system_name)

    def __repr__(self) -> str:
        return f"RegionEndpoint({self.system_name!r}, {self.display_name!r})"

    def __str__(self) -> str:
        return f"{self.display_name} ({self.system_name})"


RegionEndpoint.US_EAST_1 = RegionEndpoint._register("us-east-1", "US East (N. Virginia)")
RegionEndpoint.US_EAST_2 = RegionEndpoint._register("us-east-2", "US East (Ohio)")
RegionEndpoint.US_WEST_1 = RegionEndpoint._register("us-west-1", "US West (N. California)")
RegionEndpoint.US_WEST_2 = RegionEndpoint._register("us-west-2", "US West (Oregon)")
RegionEndpoint.CA_CENTRAL_1 = RegionEndpoint._register("ca-central-1", "Canada (Central)")
RegionEndpoint.EU_WEST_1 = RegionEndpoint._register("eu-west-1", "EU (Ireland)")
RegionEndpoint.EU_CENTRAL_1 = RegionEndpoint._register("eu-central-1", "EU (Frankfurt)")
RegionEndpoint.AP_NORTHEAST_1 = RegionEndpoint._register("ap-northeast-1", "Asia Pacific (Tokyo)")
RegionEndpoint.AP_SOUTHEAST_1 = RegionEndpoint._register(
    "ap-southeast-1", "Asia Pacific (Singapore)"
)
RegionEndpoint.AP_SOUTHEAST_2 = RegionEndpoint._register("ap-southeast-2", "Asia Pacific (Sydney)")
RegionEndpoint.SA_EAST_1 = RegionEndpoint._register("sa-east-1", "South America (Sao Paulo)")
RegionEndpoint.US_GOV_WEST_1 = RegionEndpoint._register(
    "us-gov-west-1", "US GovCloud West (Oregon)"
)
RegionEndpoint.CN_NORTH_1 = RegionEndpoint._register("cn-north-1", "China (Beijing)")
