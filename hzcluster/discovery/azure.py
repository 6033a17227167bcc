"""Azure discovery settings for Virtual Machines and Scale Sets."""

from dataclasses import dataclass
from typing import Optional

from hzcluster.discovery.base import ProviderSettings


@dataclass(frozen=True, repr=False)
class AzureDiscoverySettings(ProviderSettings):
    """Credential set for the Azure discovery plugin.

    The set is complete when the client ID, client secret and cluster ID
    are all present.

    Attributes:
        client_id: Azure AD application (client) ID.
        client_secret: Azure AD application secret.
        cluster_id: Value of the tag that marks members of this cluster.
        group_name: Resource group name to search.
        subscription_id: Azure subscription ID.
        tenant_id: Azure Active Directory tenant ID.
    """

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    cluster_id: Optional[str] = None
    group_name: Optional[str] = None
    subscription_id: Optional[str] = None
    tenant_id: Optional[str] = None

    REQUIRED_FIELDS = ("client_id", "client_secret", "cluster_id")
    PROPERTY_FIELDS = (
        ("client_id", "client-id"),
        ("client_secret", "client-secret"),
        ("cluster_id", "cluster-id"),
        ("group_name", "group-name"),
        ("subscription_id", "subscription-id"),
        ("tenant_id", "tenant-id"),
    )
    SECRET_FIELDS = ("client_secret",)

    @classmethod
    def from_dict(cls, data: dict) -> "AzureDiscoverySettings":
        """Create AzureDiscoverySettings from a dictionary."""
        return cls(
            client_id=data.get("client_id"),
            client_secret=data.get("client_secret"),
            cluster_id=data.get("cluster_id"),
            group_name=data.get("group_name"),
            subscription_id=data.get("subscription_id"),
            tenant_id=data.get("tenant_id"),
        )
