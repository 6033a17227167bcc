"""Cloud discovery providers for cluster member discovery."""

from hzcluster.discovery.base import ProviderSettings, has_text
from hzcluster.discovery.aws import AwsDiscoverySettings
from hzcluster.discovery.azure import AzureDiscoverySettings
from hzcluster.discovery.jclouds import JCloudsDiscoverySettings

__all__ = [
    "ProviderSettings",
    "has_text",
    "AwsDiscoverySettings",
    "AzureDiscoverySettings",
    "JCloudsDiscoverySettings",
]
