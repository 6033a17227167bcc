"""Apache jclouds discovery settings."""

from dataclasses import dataclass
from typing import Optional

from hzcluster.discovery.base import ProviderSettings, to_int


@dataclass(frozen=True, repr=False)
class JCloudsDiscoverySettings(ProviderSettings):
    """Credential set for the jclouds discovery plugin.

    The set is complete when the credential, identity and provider are all
    present. Multi-valued filters (regions, zones, tag keys and values) are
    passed through as the comma-delimited strings the plugin expects.
    """

    credential: Optional[str] = None
    credential_path: Optional[str] = None
    endpoint: Optional[str] = None
    group: Optional[str] = None
    identity: Optional[str] = None
    port: int = -1
    provider: Optional[str] = None
    regions: Optional[str] = None
    role_name: Optional[str] = None
    tag_keys: Optional[str] = None
    tag_values: Optional[str] = None
    zones: Optional[str] = None

    REQUIRED_FIELDS = ("credential", "identity", "provider")
    PROPERTY_FIELDS = (
        ("credential", "credential"),
        ("credential_path", "credentialPath"),
        ("endpoint", "endpoint"),
        ("group", "group"),
        ("identity", "identity"),
        ("port", "hz-port"),
        ("provider", "provider"),
        ("regions", "regions"),
        ("role_name", "role-name"),
        ("tag_keys", "tag-keys"),
        ("tag_values", "tag-values"),
        ("zones", "zones"),
    )
    SECRET_FIELDS = ("credential",)

    @classmethod
    def from_dict(cls, data: dict) -> "JCloudsDiscoverySettings":
        """Create JCloudsDiscoverySettings from a dictionary."""
        return cls(
            credential=data.get("credential"),
            credential_path=data.get("credential_path"),
            endpoint=data.get("endpoint"),
            group=data.get("group"),
            identity=data.get("identity"),
            port=to_int(data, "port", -1),
            provider=data.get("provider"),
            regions=data.get("regions"),
            role_name=data.get("role_name"),
            tag_keys=data.get("tag_keys"),
            tag_values=data.get("tag_values"),
            zones=data.get("zones"),
        )
