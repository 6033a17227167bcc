"""Hazelcast member cluster configuration factory."""

from hzcluster.config import (
    ClusterConfig,
    DiscoveryProvider,
    DiscoveryStrategyConfig,
    EvictionPolicy,
    JoinConfig,
    MapConfig,
    MaxSizeConfig,
    MaxSizePolicy,
    MemberGroupType,
    MulticastConfig,
    NetworkConfig,
    PartitionGroupConfig,
    TcpIpConfig,
)
from hzcluster.discovery import (
    AwsDiscoverySettings,
    AzureDiscoverySettings,
    JCloudsDiscoverySettings,
)
from hzcluster.discovery.resolver import (
    classify_discovery_provider,
    resolve_discovery_strategy,
)
from hzcluster.exceptions import (
    ClusterConfigException,
    ConfigurationException,
    InvalidPartitionGroupTypeException,
    InvalidPolicyNameException,
    NoDiscoveryProviderConfiguredException,
)
from hzcluster.factory import ClusterConfigurationFactory, build_config, build_map_config
from hzcluster.join import build_join_config, parse_trusted_interfaces
from hzcluster.logging import configure_logging, get_logger, set_level
from hzcluster.settings import ClusterSettings, DiscoverySettings

__version__ = "0.1.0"

__all__ = [
    "ClusterConfig",
    "DiscoveryProvider",
    "DiscoveryStrategyConfig",
    "EvictionPolicy",
    "JoinConfig",
    "MapConfig",
    "MaxSizeConfig",
    "MaxSizePolicy",
    "MemberGroupType",
    "MulticastConfig",
    "NetworkConfig",
    "PartitionGroupConfig",
    "TcpIpConfig",
    "AwsDiscoverySettings",
    "AzureDiscoverySettings",
    "JCloudsDiscoverySettings",
    "classify_discovery_provider",
    "resolve_discovery_strategy",
    "ClusterConfigException",
    "ConfigurationException",
    "InvalidPartitionGroupTypeException",
    "InvalidPolicyNameException",
    "NoDiscoveryProviderConfiguredException",
    "ClusterConfigurationFactory",
    "build_config",
    "build_map_config",
    "build_join_config",
    "parse_trusted_interfaces",
    "configure_logging",
    "get_logger",
    "set_level",
    "ClusterSettings",
    "DiscoverySettings",
]
