"""Join configuration builder.

A member joins its cluster either through a cloud discovery strategy or
through the static TCP/IP member list and multicast. The two are never mixed:
enabling discovery disables TCP/IP and multicast whatever their settings say.
"""

import logging
from typing import FrozenSet, Optional

from hzcluster.config import JoinConfig, MulticastConfig, TcpIpConfig
from hzcluster.discovery.resolver import resolve_discovery_strategy
from hzcluster.logging import get_logger
from hzcluster.settings import ClusterSettings


def parse_trusted_interfaces(value: Optional[str]) -> FrozenSet[str]:
    """Split a comma-delimited interface list into a set.

    Whitespace around entries is trimmed and blank entries are dropped.

    Example:
        >>> sorted(parse_trusted_interfaces("10.0.0.*, 192.168.1.1,"))
        ['10.0.0.*', '192.168.1.1']
    """
    if not value:
        return frozenset()
    return frozenset(part.strip() for part in value.split(",") if part.strip())


def build_join_config(
    settings: ClusterSettings,
    logger: Optional[logging.Logger] = None,
) -> JoinConfig:
    """Build the join configuration of a member.

    Args:
        settings: Cluster settings.
        logger: Logger for diagnostics. Defaults to the ``join`` component
            logger.

    Returns:
        The join configuration.

    Raises:
        NoDiscoveryProviderConfiguredException: If discovery is enabled but
            no provider is fully configured.
    """
    logger = logger or get_logger("join")
    if settings.discovery_enabled:
        join = _create_discovery_join_config(settings, logger)
    else:
        join = _create_default_join_config(settings, logger)
    logger.debug("Created join configuration [%s]", join)
    return join


def _create_discovery_join_config(
    settings: ClusterSettings, logger: logging.Logger
) -> JoinConfig:
    logger.debug("Disabling multicast and TCP/IP configuration for discovery")
    strategy = resolve_discovery_strategy(settings, logger=logger)
    return JoinConfig(
        multicast=MulticastConfig(enabled=False),
        tcp_ip=TcpIpConfig(enabled=False),
        discovery_strategies=(strategy,),
    )


def _create_default_join_config(
    settings: ClusterSettings, logger: logging.Logger
) -> JoinConfig:
    tcp_ip = TcpIpConfig(
        enabled=settings.tcpip_enabled,
        members=settings.members,
        connection_timeout_seconds=settings.timeout,
    )
    logger.debug(
        "Created TCP/IP configuration [%s] for members %s", tcp_ip, list(settings.members)
    )

    if settings.multicast_enabled:
        trusted = parse_trusted_interfaces(settings.multicast_trusted_interfaces)
        multicast = MulticastConfig(
            enabled=True,
            multicast_group=settings.multicast_group,
            multicast_port=settings.multicast_port,
            multicast_timeout_seconds=settings.multicast_timeout,
            multicast_time_to_live=settings.multicast_time_to_live,
            trusted_interfaces=trusted or None,
        )
        logger.debug("Created multicast configuration [%s]", multicast)
    else:
        multicast = MulticastConfig(enabled=False)
        logger.debug("Skipped multicast configuration since feature is disabled")

    return JoinConfig(multicast=multicast, tcp_ip=tcp_ip)
