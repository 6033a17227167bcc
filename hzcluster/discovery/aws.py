"""AWS discovery settings for EC2 member discovery."""

from dataclasses import dataclass
from typing import Optional

from hzcluster.discovery.base import ProviderSettings, to_int


@dataclass(frozen=True, repr=False)
class AwsDiscoverySettings(ProviderSettings):
    """Credential set for the AWS discovery plugin.

    The set is complete when the access key, secret key and IAM role are
    all present.

    Attributes:
        access_key: AWS access key ID.
        secret_key: AWS secret access key.
        iam_role: IAM role attached to the instances.
        host_header: Custom host header for the EC2 API endpoint.
        port: Hazelcast port on discovered instances; ignored unless positive.
        region: AWS region name.
        security_group_name: Filter by security group name.
        tag_key: Filter by tag key.
        tag_value: Filter by tag value.

    Example:
        >>> aws = AwsDiscoverySettings(
        ...     access_key="AKIA...",
        ...     secret_key="...",
        ...     iam_role="hazelcast-member",
        ...     tag_key="cluster",
        ...     tag_value="cas",
        ... )
        >>> aws.is_complete
        True
    """

    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    iam_role: Optional[str] = None
    host_header: Optional[str] = None
    port: int = -1
    region: Optional[str] = "us-east-1"
    security_group_name: Optional[str] = None
    tag_key: Optional[str] = None
    tag_value: Optional[str] = None

    REQUIRED_FIELDS = ("access_key", "secret_key", "iam_role")
    PROPERTY_FIELDS = (
        ("access_key", "access-key"),
        ("secret_key", "secret-key"),
        ("iam_role", "iam-role"),
        ("host_header", "host-header"),
        ("port", "hz-port"),
        ("region", "region"),
        ("security_group_name", "security-group-name"),
        ("tag_key", "tag-key"),
        ("tag_value", "tag-value"),
    )
    SECRET_FIELDS = ("access_key", "secret_key")

    @classmethod
    def from_dict(cls, data: dict) -> "AwsDiscoverySettings":
        """Create AwsDiscoverySettings from a dictionary."""
        return cls(
            access_key=data.get("access_key"),
            secret_key=data.get("secret_key"),
            iam_role=data.get("iam_role"),
            host_header=data.get("host_header"),
            port=to_int(data, "port", -1),
            region=data.get("region", "us-east-1"),
            security_group_name=data.get("security_group_name"),
            tag_key=data.get("tag_key"),
            tag_value=data.get("tag_value"),
        )
