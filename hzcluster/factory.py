"""Cluster configuration factory.

Turns :class:`~hzcluster.settings.ClusterSettings` into a
:class:`~hzcluster.config.ClusterConfig` a data-grid member can start from.

Example:
    Building the configuration of a ticket registry member::

        from hzcluster import ClusterConfigurationFactory, ClusterSettings

        settings = ClusterSettings(
            instance_name="cas-node-1",
            members=("10.0.0.1", "10.0.0.2"),
            partition_member_group_type="host_aware",
        )
        factory = ClusterConfigurationFactory()
        map_config = factory.build_map_config(settings, "ticketRegistry", 28800)
        config = factory.build(settings, map_config)
"""

import logging
from typing import Dict, Mapping, Optional, Union

from hzcluster.config import (
    DISCOVERY_ENABLED_PROPERTY,
    IPV4_STACK_PROPERTY,
    LOGGING_TYPE_PROPERTY,
    MAX_HEARTBEAT_SECONDS_PROPERTY,
    ClusterConfig,
    EvictionPolicy,
    MapConfig,
    MaxSizeConfig,
    MaxSizePolicy,
    MemberGroupType,
    NetworkConfig,
    PartitionGroupConfig,
)
from hzcluster.discovery.base import has_text
from hzcluster.exceptions import (
    InvalidPartitionGroupTypeException,
    InvalidPolicyNameException,
)
from hzcluster.join import build_join_config
from hzcluster.logging import get_logger
from hzcluster.settings import ClusterSettings


MapConfigs = Union[None, MapConfig, Mapping[str, MapConfig]]


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def _parse_eviction_policy(name: str) -> EvictionPolicy:
    try:
        return EvictionPolicy[name]
    except (KeyError, TypeError) as e:
        raise InvalidPolicyNameException("eviction", name, cause=e) from e


def _parse_max_size_policy(name: str) -> MaxSizePolicy:
    try:
        return MaxSizePolicy[name]
    except (KeyError, TypeError) as e:
        raise InvalidPolicyNameException("max-size", name, cause=e) from e


def _parse_member_group_type(name: str) -> MemberGroupType:
    try:
        # surrounding whitespace is ignored, unlike policy names
        return MemberGroupType[name.strip().upper()]
    except KeyError as e:
        raise InvalidPartitionGroupTypeException(name, cause=e) from e


class ClusterConfigurationFactory:
    """Builds member configurations from cluster settings.

    The factory keeps no state besides its logger, so one instance can be
    shared freely between threads.

    Args:
        logger: Logger receiving diagnostics. Defaults to the ``factory``
            component logger.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or get_logger("factory")

    @property
    def logger(self) -> logging.Logger:
        """Get the logger used by this factory."""
        return self._logger

    def build_map_config(
        self,
        settings: ClusterSettings,
        map_name: str,
        timeout_seconds: float,
    ) -> MapConfig:
        """Build the storage policy of a named map.

        Args:
            settings: Cluster settings providing backups, eviction and sizing.
            map_name: Name of the map.
            timeout_seconds: Max idle time of entries; truncated to whole
                seconds.

        Returns:
            The map configuration.

        Raises:
            InvalidPolicyNameException: If the eviction or max-size policy
                name does not exactly match a known policy.
        """
        eviction_policy = _parse_eviction_policy(settings.eviction_policy)
        max_size_policy = _parse_max_size_policy(settings.max_size_policy)

        self._logger.debug(
            "Creating map configuration for [%s] with idle timeout [%s] second(s)",
            map_name,
            int(timeout_seconds),
        )
        return MapConfig(
            name=map_name,
            max_idle_seconds=int(timeout_seconds),
            backup_count=settings.backup_count,
            async_backup_count=settings.async_backup_count,
            eviction_policy=eviction_policy,
            max_size_config=MaxSizeConfig(
                max_size_policy=max_size_policy,
                size=settings.max_heap_size_percentage,
            ),
        )

    def build_map_configs(
        self,
        settings: ClusterSettings,
        timeouts: Mapping[str, float],
    ) -> Dict[str, MapConfig]:
        """Build storage policies for several maps.

        Args:
            settings: Cluster settings.
            timeouts: Map name to idle timeout in seconds.

        Returns:
            Map name to map configuration, in the order of ``timeouts``.
        """
        return {
            name: self.build_map_config(settings, name, timeout)
            for name, timeout in timeouts.items()
        }

    def build(
        self,
        settings: ClusterSettings,
        map_configs: MapConfigs = None,
    ) -> ClusterConfig:
        """Build the configuration of a cluster member.

        Args:
            settings: Cluster settings.
            map_configs: A mapping of map name to configuration, a single map
                configuration keyed under its own name, or None for a
                network-only configuration. Maps are attached as given.

        Returns:
            The cluster configuration.

        Raises:
            NoDiscoveryProviderConfiguredException: If discovery is enabled but
                no provider is fully configured.
            InvalidPartitionGroupTypeException: If the partition member group
                type is not recognized.
        """
        if map_configs is None:
            maps: Dict[str, MapConfig] = {}
        elif isinstance(map_configs, MapConfig):
            maps = {map_configs.name: map_configs}
        else:
            maps = dict(map_configs)

        join = build_join_config(settings, logger=self._logger)
        network = NetworkConfig(
            port=settings.port,
            port_auto_increment=settings.port_auto_increment,
            join=join,
        )
        self._logger.debug("Created network configuration [%s]", network)

        properties = {
            DISCOVERY_ENABLED_PROPERTY: _bool_str(settings.discovery_enabled),
            IPV4_STACK_PROPERTY: _bool_str(settings.ipv4_enabled),
            LOGGING_TYPE_PROPERTY: settings.logging_type,
            MAX_HEARTBEAT_SECONDS_PROPERTY: str(settings.max_no_heartbeat_seconds),
        }

        return ClusterConfig(
            instance_name=settings.instance_name,
            network=network,
            map_configs=maps,
            # applied to network-only builds as well, not just when maps are given
            partition_group=self._build_partition_group_config(settings),
            properties=properties,
        )

    def _build_partition_group_config(self, settings: ClusterSettings) -> PartitionGroupConfig:
        group_type = settings.partition_member_group_type
        if not has_text(group_type):
            return PartitionGroupConfig()

        member_group_type = _parse_member_group_type(group_type)
        self._logger.debug("Using partition member group type [%s]", member_group_type.name)
        return PartitionGroupConfig(enabled=True, group_type=member_group_type)


_default_factory = ClusterConfigurationFactory()


def build_map_config(
    settings: ClusterSettings, map_name: str, timeout_seconds: float
) -> MapConfig:
    """Build a map configuration with the default factory."""
    return _default_factory.build_map_config(settings, map_name, timeout_seconds)


def build_config(settings: ClusterSettings, map_configs: MapConfigs = None) -> ClusterConfig:
    """Build a cluster configuration with the default factory."""
    return _default_factory.build(settings, map_configs)
