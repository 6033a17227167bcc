"""Hazelcast member cluster configuration values.

Everything in this module is an immutable value produced by
:class:`hzcluster.factory.ClusterConfigurationFactory`. The data-grid runtime
consumes a :class:`ClusterConfig` to start a member; nothing here opens a
socket or starts an instance.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from hzcluster.exceptions import ConfigurationException


DISCOVERY_ENABLED_PROPERTY = "hazelcast.discovery.enabled"
IPV4_STACK_PROPERTY = "hazelcast.prefer.ipv4.stack"
LOGGING_TYPE_PROPERTY = "hazelcast.logging.type"
MAX_HEARTBEAT_SECONDS_PROPERTY = "hazelcast.max.no.heartbeat.seconds"


class EvictionPolicy(Enum):
    """Eviction policy for map entries."""
    LRU = "LRU"
    LFU = "LFU"
    NONE = "NONE"
    RANDOM = "RANDOM"


class MaxSizePolicy(Enum):
    """Policy used to interpret a map's maximum size."""
    PER_NODE = "PER_NODE"
    PER_PARTITION = "PER_PARTITION"
    USED_HEAP_SIZE = "USED_HEAP_SIZE"
    USED_HEAP_PERCENTAGE = "USED_HEAP_PERCENTAGE"
    FREE_HEAP_SIZE = "FREE_HEAP_SIZE"
    FREE_HEAP_PERCENTAGE = "FREE_HEAP_PERCENTAGE"
    USED_NATIVE_MEMORY_SIZE = "USED_NATIVE_MEMORY_SIZE"
    USED_NATIVE_MEMORY_PERCENTAGE = "USED_NATIVE_MEMORY_PERCENTAGE"
    FREE_NATIVE_MEMORY_SIZE = "FREE_NATIVE_MEMORY_SIZE"
    FREE_NATIVE_MEMORY_PERCENTAGE = "FREE_NATIVE_MEMORY_PERCENTAGE"


class MemberGroupType(Enum):
    """Partition group type deciding where backups are placed."""
    HOST_AWARE = "HOST_AWARE"
    CUSTOM = "CUSTOM"
    PER_MEMBER = "PER_MEMBER"
    ZONE_AWARE = "ZONE_AWARE"
    SPI = "SPI"


class DiscoveryProvider(Enum):
    """Cloud discovery provider selected for a join configuration.

    The value is the class name of the member-side discovery strategy
    factory shipped with the provider's plugin.
    """
    AWS = "com.hazelcast.aws.AwsDiscoveryStrategyFactory"
    JCLOUDS = "com.hazelcast.jclouds.JCloudsDiscoveryStrategyFactory"
    AZURE = "com.hazelcast.azure.AzureDiscoveryStrategyFactory"
    NONE = ""


def _freeze(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class MaxSizeConfig:
    """Maximum size of a map and how to interpret it.

    Attributes:
        max_size_policy: How ``size`` is measured.
        size: The limit, e.g. a heap percentage.
    """

    max_size_policy: MaxSizePolicy = MaxSizePolicy.PER_NODE
    size: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"max_size_policy": self.max_size_policy.name, "size": self.size}


@dataclass(frozen=True)
class MapConfig:
    """Storage policy of a single named map.

    Attributes:
        name: Map name, unique within a cluster configuration.
        max_idle_seconds: Seconds an entry may stay untouched before expiry.
        backup_count: Number of synchronous backups.
        async_backup_count: Number of asynchronous backups.
        eviction_policy: Which entries go first when the map is full.
        max_size_config: Size limit of the map.
    """

    name: str
    max_idle_seconds: int = 0
    backup_count: int = 1
    async_backup_count: int = 0
    eviction_policy: EvictionPolicy = EvictionPolicy.NONE
    max_size_config: MaxSizeConfig = field(default_factory=MaxSizeConfig)

    @property
    def max_size_policy(self) -> MaxSizePolicy:
        """Get the max size policy."""
        return self.max_size_config.max_size_policy

    @property
    def max_size(self) -> int:
        """Get the max size value."""
        return self.max_size_config.size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "max_idle_seconds": self.max_idle_seconds,
            "backup_count": self.backup_count,
            "async_backup_count": self.async_backup_count,
            "eviction_policy": self.eviction_policy.name,
            "max_size_config": self.max_size_config.to_dict(),
        }


@dataclass(frozen=True, repr=False)
class DiscoveryStrategyConfig:
    """A single discovery strategy and its plugin properties.

    Attributes:
        provider: The cloud provider the strategy talks to.
        properties: Plugin properties in declaration order. Only fields that
            were actually set appear as keys.
    """

    provider: DiscoveryProvider
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "properties", _freeze(self.properties))

    def __repr__(self) -> str:
        # property values carry credentials
        keys = list(self.properties)
        return f"DiscoveryStrategyConfig(provider={self.provider.name}, keys={keys})"

    def __hash__(self) -> int:
        return hash((self.provider, frozenset(self.properties.items())))

    @property
    def factory_class_name(self) -> str:
        """Get the strategy factory class name of the provider plugin."""
        return self.provider.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider.name,
            "factory_class_name": self.factory_class_name,
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class TcpIpConfig:
    """Static member list join settings."""

    enabled: bool = False
    members: Tuple[str, ...] = ()
    connection_timeout_seconds: int = 5

    def __post_init__(self):
        object.__setattr__(self, "members", tuple(self.members))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "members": list(self.members),
            "connection_timeout_seconds": self.connection_timeout_seconds,
        }


@dataclass(frozen=True)
class MulticastConfig:
    """Multicast join settings.

    Everything but ``enabled`` stays ``None`` unless multicast is enabled,
    so the runtime falls back to its own defaults.
    """

    enabled: bool = False
    multicast_group: Optional[str] = None
    multicast_port: Optional[int] = None
    multicast_timeout_seconds: Optional[int] = None
    multicast_time_to_live: Optional[int] = None
    trusted_interfaces: Optional[FrozenSet[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"enabled": self.enabled}
        for key in (
            "multicast_group",
            "multicast_port",
            "multicast_timeout_seconds",
            "multicast_time_to_live",
        ):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.trusted_interfaces is not None:
            data["trusted_interfaces"] = sorted(self.trusted_interfaces)
        return data


@dataclass(frozen=True)
class JoinConfig:
    """How a member finds and joins its cluster.

    Either the static shape (multicast plus TCP/IP, no discovery strategies)
    or the discovery shape (exactly one strategy, multicast and TCP/IP both
    disabled) is populated, never a mix.
    """

    multicast: MulticastConfig = field(default_factory=MulticastConfig)
    tcp_ip: TcpIpConfig = field(default_factory=TcpIpConfig)
    discovery_strategies: Tuple[DiscoveryStrategyConfig, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "discovery_strategies", tuple(self.discovery_strategies))
        if not self.discovery_strategies:
            return
        if len(self.discovery_strategies) > 1:
            raise ConfigurationException("Only one discovery strategy may be configured")
        if self.multicast.enabled or self.tcp_ip.enabled:
            raise ConfigurationException(
                "Multicast and TCP/IP must be disabled when a discovery strategy is used"
            )

    @property
    def discovery_enabled(self) -> bool:
        """Check whether this join configuration uses a discovery strategy."""
        return bool(self.discovery_strategies)

    @property
    def discovery_strategy(self) -> Optional[DiscoveryStrategyConfig]:
        """Get the discovery strategy, if any."""
        if self.discovery_strategies:
            return self.discovery_strategies[0]
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "multicast": self.multicast.to_dict(),
            "tcp_ip": self.tcp_ip.to_dict(),
            "discovery_strategies": [s.to_dict() for s in self.discovery_strategies],
        }


@dataclass(frozen=True)
class NetworkConfig:
    """Member network settings."""

    port: int = 5701
    port_auto_increment: bool = True
    join: JoinConfig = field(default_factory=JoinConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "port": self.port,
            "port_auto_increment": self.port_auto_increment,
            "join": self.join.to_dict(),
        }


@dataclass(frozen=True)
class PartitionGroupConfig:
    """Partition grouping settings. Disabled unless a group type is given."""

    enabled: bool = False
    group_type: MemberGroupType = MemberGroupType.PER_MEMBER

    def to_dict(self) -> Dict[str, Any]:
        return {"enabled": self.enabled, "group_type": self.group_type.name}


@dataclass(frozen=True)
class ClusterConfig:
    """Fully resolved configuration of a cluster member.

    Attributes:
        instance_name: Name of the member instance.
        network: Port and join settings.
        map_configs: Map name to storage policy, as supplied by the caller.
        partition_group: Partition grouping settings.
        properties: Instance-level properties, all string valued.

    Example:
        >>> config = ClusterConfigurationFactory().build(settings)
        >>> config.get_property("hazelcast.prefer.ipv4.stack")
        'true'
    """

    instance_name: str
    network: NetworkConfig = field(default_factory=NetworkConfig)
    map_configs: Mapping[str, MapConfig] = field(default_factory=dict)
    partition_group: PartitionGroupConfig = field(default_factory=PartitionGroupConfig)
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "map_configs", _freeze(self.map_configs))
        object.__setattr__(self, "properties", _freeze(self.properties))

    def __hash__(self) -> int:
        return hash((
            self.instance_name,
            self.network,
            frozenset(self.map_configs.items()),
            self.partition_group,
            frozenset(self.properties.items()),
        ))

    def get_property(self, name: str) -> Optional[str]:
        """Get an instance property, or None if it is not set."""
        return self.properties.get(name)

    def get_map_config(self, name: str) -> Optional[MapConfig]:
        """Get the storage policy of a map, or None if it was not configured."""
        return self.map_configs.get(name)

    def to_dict(self) -> Dict[str, Any]:
        """Render the configuration as plain dictionaries, lists and scalars."""
        return {
            "instance_name": self.instance_name,
            "network": self.network.to_dict(),
            "map_configs": {name: mc.to_dict() for name, mc in self.map_configs.items()},
            "partition_group": self.partition_group.to_dict(),
            "properties": dict(self.properties),
        }
