"""Shared pytest fixtures for cluster configuration tests."""

import logging

import pytest

from hzcluster.discovery import (
    AwsDiscoverySettings,
    AzureDiscoverySettings,
    JCloudsDiscoverySettings,
)
from hzcluster.factory import ClusterConfigurationFactory
from hzcluster.settings import ClusterSettings, DiscoverySettings


@pytest.fixture
def default_settings():
    """Create ClusterSettings with all defaults."""
    return ClusterSettings()


@pytest.fixture
def static_settings():
    """Create ClusterSettings for a static member list without multicast."""
    return ClusterSettings(
        instance_name="cas-node-1",
        port=5801,
        port_auto_increment=False,
        members=("10.0.0.1", "10.0.0.2:5702"),
        tcpip_enabled=True,
        timeout=7,
        multicast_enabled=False,
        multicast_group="224.2.2.3",
        multicast_port=54327,
        multicast_trusted_interfaces="10.0.0.*",
    )


@pytest.fixture
def multicast_settings():
    """Create ClusterSettings with multicast enabled."""
    return ClusterSettings(
        tcpip_enabled=False,
        multicast_enabled=True,
        multicast_group="224.2.2.3",
        multicast_port=54327,
        multicast_timeout=4,
        multicast_time_to_live=16,
        multicast_trusted_interfaces="10.0.0.*, 192.168.1.10",
    )


@pytest.fixture
def aws_settings():
    """Create a complete AWS credential set."""
    return AwsDiscoverySettings(
        access_key="AKIATEST",
        secret_key="secret123",
        iam_role="hazelcast-member",
        region="us-west-2",
        tag_key="cluster",
        tag_value="cas",
    )


@pytest.fixture
def jclouds_settings():
    """Create a complete jclouds credential set."""
    return JCloudsDiscoverySettings(
        credential="jclouds-credential",
        identity="jclouds-identity",
        provider="aws-ec2",
        regions="us-east-1,us-west-2",
    )


@pytest.fixture
def azure_settings():
    """Create a complete Azure credential set."""
    return AzureDiscoverySettings(
        client_id="client-id",
        client_secret="s3cr3t",
        cluster_id="cas",
        group_name="cas-rg",
        subscription_id="subscription",
        tenant_id="",
    )


@pytest.fixture
def discovery_settings_factory():
    """Create ClusterSettings with discovery enabled for given credentials."""

    def _create(**providers):
        return ClusterSettings(
            members=("10.0.0.1",),
            tcpip_enabled=True,
            multicast_enabled=True,
            discovery=DiscoverySettings(enabled=True, **providers),
        )

    return _create


@pytest.fixture
def factory():
    """Create a ClusterConfigurationFactory with a test logger."""
    return ClusterConfigurationFactory(logger=logging.getLogger("hzcluster.test"))
