"""Unit tests for hzcluster.join module."""

import pytest

from hzcluster.config import DiscoveryProvider, JoinConfig, MulticastConfig, TcpIpConfig
from hzcluster.exceptions import ConfigurationException, NoDiscoveryProviderConfiguredException
from hzcluster.join import build_join_config, parse_trusted_interfaces
from hzcluster.settings import ClusterSettings


class TestParseTrustedInterfaces:
    """Tests for parse_trusted_interfaces."""

    def test_none(self):
        assert parse_trusted_interfaces(None) == frozenset()

    def test_empty(self):
        assert parse_trusted_interfaces("") == frozenset()

    def test_only_delimiters(self):
        assert parse_trusted_interfaces(" , ,") == frozenset()

    def test_split_and_trim(self):
        assert parse_trusted_interfaces("10.0.0.*, 192.168.1.10 ,10.0.0.*") == frozenset(
            {"10.0.0.*", "192.168.1.10"}
        )


class TestDefaultJoinConfig:
    """Tests for the static member list and multicast join shape."""

    def test_tcp_ip_from_settings(self, static_settings):
        join = build_join_config(static_settings)
        assert join.tcp_ip.enabled is True
        assert join.tcp_ip.members == ("10.0.0.1", "10.0.0.2:5702")
        assert join.tcp_ip.connection_timeout_seconds == 7
        assert join.discovery_strategies == ()
        assert join.discovery_enabled is False

    def test_multicast_disabled_leaves_fields_unset(self, static_settings):
        multicast = build_join_config(static_settings).multicast
        assert multicast.enabled is False
        assert multicast.multicast_group is None
        assert multicast.multicast_port is None
        assert multicast.multicast_timeout_seconds is None
        assert multicast.multicast_time_to_live is None
        assert multicast.trusted_interfaces is None

    def test_tcp_ip_disabled_keeps_members(self):
        settings = ClusterSettings(tcpip_enabled=False, members=("10.0.0.1",), timeout=3)
        tcp_ip = build_join_config(settings).tcp_ip
        assert tcp_ip.enabled is False
        assert tcp_ip.members == ("10.0.0.1",)
        assert tcp_ip.connection_timeout_seconds == 3

    def test_multicast_enabled(self, multicast_settings):
        multicast = build_join_config(multicast_settings).multicast
        assert multicast.enabled is True
        assert multicast.multicast_group == "224.2.2.3"
        assert multicast.multicast_port == 54327
        assert multicast.multicast_timeout_seconds == 4
        assert multicast.multicast_time_to_live == 16
        assert multicast.trusted_interfaces == frozenset({"10.0.0.*", "192.168.1.10"})

    def test_multicast_without_trusted_interfaces(self):
        settings = ClusterSettings(multicast_enabled=True, multicast_trusted_interfaces="")
        assert build_join_config(settings).multicast.trusted_interfaces is None


class TestDiscoveryJoinConfig:
    """Tests for the cloud discovery join shape."""

    def test_azure_only(self, discovery_settings_factory, azure_settings):
        join = build_join_config(discovery_settings_factory(azure=azure_settings))
        assert join.multicast.enabled is False
        assert join.tcp_ip.enabled is False
        assert join.tcp_ip.members == ()
        assert len(join.discovery_strategies) == 1
        strategy = join.discovery_strategy
        assert strategy.provider is DiscoveryProvider.AZURE
        assert dict(strategy.properties) == azure_settings.to_properties()

    def test_overrides_tcp_ip_and_multicast_settings(self, discovery_settings_factory, aws_settings):
        settings = discovery_settings_factory(aws=aws_settings)
        assert settings.tcpip_enabled is True
        assert settings.multicast_enabled is True
        join = build_join_config(settings)
        assert join.tcp_ip.enabled is False
        assert join.multicast.enabled is False
        assert join.multicast.multicast_group is None

    def test_no_provider_propagates(self, discovery_settings_factory):
        with pytest.raises(NoDiscoveryProviderConfiguredException):
            build_join_config(discovery_settings_factory())


class TestJoinConfigShape:
    """Tests for the join configuration mutual exclusivity checks."""

    def test_discovery_with_tcp_ip_rejected(self, discovery_settings_factory, aws_settings):
        strategy = build_join_config(
            discovery_settings_factory(aws=aws_settings)
        ).discovery_strategy
        with pytest.raises(ConfigurationException):
            JoinConfig(tcp_ip=TcpIpConfig(enabled=True), discovery_strategies=(strategy,))

    def test_discovery_with_multicast_rejected(self, discovery_settings_factory, aws_settings):
        strategy = build_join_config(
            discovery_settings_factory(aws=aws_settings)
        ).discovery_strategy
        with pytest.raises(ConfigurationException):
            JoinConfig(multicast=MulticastConfig(enabled=True), discovery_strategies=[strategy])

    def test_two_strategies_rejected(self, discovery_settings_factory, aws_settings):
        strategy = build_join_config(
            discovery_settings_factory(aws=aws_settings)
        ).discovery_strategy
        with pytest.raises(ConfigurationException):
            JoinConfig(discovery_strategies=(strategy, strategy))
