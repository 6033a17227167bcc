"""Cluster settings consumed by the configuration factory.

Settings are read-only values. They are usually produced by the host
application's own configuration layer, but can also be loaded from a plain
dictionary or a YAML document::

    cluster:
      instance_name: cas-node-1
      members: 10.0.0.1,10.0.0.2
      partition_member_group_type: host_aware
      discovery:
        enabled: true
        azure:
          client_id: ...
          client_secret: ...
          cluster_id: cas
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union
import os

import yaml

from hzcluster.discovery.aws import AwsDiscoverySettings
from hzcluster.discovery.azure import AzureDiscoverySettings
from hzcluster.discovery.base import to_int
from hzcluster.discovery.jclouds import JCloudsDiscoverySettings
from hzcluster.exceptions import ConfigurationException


def _to_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "on", "1")
    return bool(value)


def _to_members(value: Union[None, str, List[str], Tuple[str, ...]]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(m.strip() for m in value.split(",") if m.strip())
    return tuple(value)


def _section(data: dict, key: str) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ConfigurationException(f"Settings section '{key}' must be a mapping")
    return section


@dataclass(frozen=True)
class DiscoverySettings:
    """Cloud discovery switch and one credential set per provider."""

    enabled: bool = False
    aws: AwsDiscoverySettings = field(default_factory=AwsDiscoverySettings)
    jclouds: JCloudsDiscoverySettings = field(default_factory=JCloudsDiscoverySettings)
    azure: AzureDiscoverySettings = field(default_factory=AzureDiscoverySettings)

    @classmethod
    def from_dict(cls, data: dict) -> "DiscoverySettings":
        """Create DiscoverySettings from a dictionary."""
        return cls(
            enabled=_to_bool(data.get("enabled"), False),
            aws=AwsDiscoverySettings.from_dict(_section(data, "aws")),
            jclouds=JCloudsDiscoverySettings.from_dict(_section(data, "jclouds")),
            azure=AzureDiscoverySettings.from_dict(_section(data, "azure")),
        )


@dataclass(frozen=True)
class ClusterSettings:
    """Settings of a cluster member.

    Attributes:
        instance_name: Name of the member instance.
        port: Port the member listens on.
        port_auto_increment: Try the following ports if ``port`` is taken.
        backup_count: Synchronous backups per map.
        async_backup_count: Asynchronous backups per map.
        eviction_policy: Name of an :class:`~hzcluster.config.EvictionPolicy`.
        max_size_policy: Name of a :class:`~hzcluster.config.MaxSizePolicy`.
        max_heap_size_percentage: Map size limit.
        logging_type: Logging framework of the member runtime.
        max_no_heartbeat_seconds: Seconds without heartbeat before a member
            is considered dead.
        ipv4_enabled: Prefer the IPv4 stack.
        partition_member_group_type: Name of a
            :class:`~hzcluster.config.MemberGroupType`, any case, or None.
        members: Static member addresses.
        tcpip_enabled: Enable the static member list join.
        timeout: TCP/IP connection timeout in seconds.
        multicast_enabled: Enable multicast join.
        multicast_group: Multicast group address.
        multicast_port: Multicast port.
        multicast_timeout: Multicast timeout in seconds.
        multicast_time_to_live: Multicast packet TTL.
        multicast_trusted_interfaces: Comma-delimited trusted interfaces.
        discovery: Cloud discovery settings.
    """

    instance_name: str = "localhost"
    port: int = 5701
    port_auto_increment: bool = True
    backup_count: int = 1
    async_backup_count: int = 0
    eviction_policy: str = "LRU"
    max_size_policy: str = "USED_HEAP_PERCENTAGE"
    max_heap_size_percentage: int = 85
    logging_type: str = "slf4j"
    max_no_heartbeat_seconds: int = 300
    ipv4_enabled: bool = True
    partition_member_group_type: Optional[str] = None
    members: Tuple[str, ...] = ()
    tcpip_enabled: bool = True
    timeout: int = 5
    multicast_enabled: bool = False
    multicast_group: Optional[str] = None
    multicast_port: int = 0
    multicast_timeout: int = 2
    multicast_time_to_live: int = 32
    multicast_trusted_interfaces: Optional[str] = None
    discovery: DiscoverySettings = field(default_factory=DiscoverySettings)

    def __post_init__(self):
        object.__setattr__(self, "members", _to_members(self.members))

    @property
    def discovery_enabled(self) -> bool:
        """Check whether cloud discovery is enabled."""
        return self.discovery.enabled

    @classmethod
    def from_dict(cls, data: dict) -> "ClusterSettings":
        """Create ClusterSettings from a dictionary.

        Missing keys take their defaults. Only type coercion happens here;
        policy and group type names are checked when a configuration is built.
        """
        defaults = cls()
        return cls(
            instance_name=data.get("instance_name", defaults.instance_name),
            port=to_int(data, "port", defaults.port),
            port_auto_increment=_to_bool(
                data.get("port_auto_increment"), defaults.port_auto_increment
            ),
            backup_count=to_int(data, "backup_count", defaults.backup_count),
            async_backup_count=to_int(
                data, "async_backup_count", defaults.async_backup_count
            ),
            eviction_policy=data.get("eviction_policy", defaults.eviction_policy),
            max_size_policy=data.get("max_size_policy", defaults.max_size_policy),
            max_heap_size_percentage=to_int(
                data, "max_heap_size_percentage", defaults.max_heap_size_percentage
            ),
            logging_type=data.get("logging_type", defaults.logging_type),
            max_no_heartbeat_seconds=to_int(
                data, "max_no_heartbeat_seconds", defaults.max_no_heartbeat_seconds
            ),
            ipv4_enabled=_to_bool(data.get("ipv4_enabled"), defaults.ipv4_enabled),
            partition_member_group_type=data.get("partition_member_group_type"),
            members=_to_members(data.get("members")),
            tcpip_enabled=_to_bool(data.get("tcpip_enabled"), defaults.tcpip_enabled),
            timeout=to_int(data, "timeout", defaults.timeout),
            multicast_enabled=_to_bool(
                data.get("multicast_enabled"), defaults.multicast_enabled
            ),
            multicast_group=data.get("multicast_group"),
            multicast_port=to_int(data, "multicast_port", defaults.multicast_port),
            multicast_timeout=to_int(
                data, "multicast_timeout", defaults.multicast_timeout
            ),
            multicast_time_to_live=to_int(
                data, "multicast_time_to_live", defaults.multicast_time_to_live
            ),
            multicast_trusted_interfaces=data.get("multicast_trusted_interfaces"),
            discovery=DiscoverySettings.from_dict(_section(data, "discovery")),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ClusterSettings":
        """Load settings from a YAML file.

        Args:
            yaml_path: Path to the YAML settings file.

        Returns:
            ClusterSettings instance.

        Raises:
            ConfigurationException: If the file cannot be read or parsed.
        """
        if not os.path.exists(yaml_path):
            raise ConfigurationException(f"Settings file not found: {yaml_path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                content = f.read()
        except IOError as e:
            raise ConfigurationException(f"Failed to read settings file: {e}", cause=e)

        return cls.from_yaml_string(content)

    @classmethod
    def from_yaml_string(cls, yaml_content: str) -> "ClusterSettings":
        """Load settings from a YAML string.

        A top-level ``cluster`` key, if present, is unwrapped.

        Raises:
            ConfigurationException: If the YAML cannot be parsed.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigurationException("Settings document must be a mapping")

        if "cluster" in data:
            data = _section(data, "cluster")

        return cls.from_dict(data)
