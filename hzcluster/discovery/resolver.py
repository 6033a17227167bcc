"""Selection of the single discovery strategy a member joins with."""

import logging
from typing import Optional

from hzcluster.config import DiscoveryProvider, DiscoveryStrategyConfig
from hzcluster.exceptions import NoDiscoveryProviderConfiguredException
from hzcluster.logging import get_logger
from hzcluster.settings import ClusterSettings, DiscoverySettings


def classify_discovery_provider(discovery: DiscoverySettings) -> DiscoveryProvider:
    """Pick the provider whose credential set is complete.

    Providers are checked in a fixed order: AWS, then jclouds, then Azure.
    The first complete credential set wins, so configuring several providers
    at once always resolves to the same one.

    Args:
        discovery: The discovery settings to classify.

    Returns:
        The selected provider, or ``DiscoveryProvider.NONE``.
    """
    if discovery.aws.is_complete:
        return DiscoveryProvider.AWS
    if discovery.jclouds.is_complete:
        return DiscoveryProvider.JCLOUDS
    if discovery.azure.is_complete:
        return DiscoveryProvider.AZURE
    return DiscoveryProvider.NONE


def resolve_discovery_strategy(
    settings: ClusterSettings,
    logger: Optional[logging.Logger] = None,
) -> DiscoveryStrategyConfig:
    """Build the discovery strategy for the configured provider.

    Args:
        settings: Cluster settings with discovery enabled.
        logger: Logger for diagnostics. Defaults to the ``discovery``
            component logger.

    Returns:
        A strategy carrying only the provider properties that are set.

    Raises:
        NoDiscoveryProviderConfiguredException: If no provider has a complete
            credential set.
    """
    logger = logger or get_logger("discovery")
    discovery = settings.discovery
    provider = classify_discovery_provider(discovery)

    if provider is DiscoveryProvider.AWS:
        logger.debug("Creating discovery strategy based on AWS")
        properties = discovery.aws.to_properties()
    elif provider is DiscoveryProvider.JCLOUDS:
        logger.debug("Creating discovery strategy based on Apache jclouds")
        properties = discovery.jclouds.to_properties()
    elif provider is DiscoveryProvider.AZURE:
        logger.debug("Creating discovery strategy based on Microsoft Azure")
        properties = discovery.azure.to_properties()
    else:
        raise NoDiscoveryProviderConfiguredException()

    strategy = DiscoveryStrategyConfig(provider=provider, properties=properties)
    logger.debug(
        "Created discovery strategy for [%s] with properties %s",
        provider.name,
        sorted(strategy.properties),
    )
    return strategy
