"""Unit tests for hzcluster.config module."""

import dataclasses

import pytest

from hzcluster.config import (
    ClusterConfig,
    DiscoveryProvider,
    DiscoveryStrategyConfig,
    EvictionPolicy,
    JoinConfig,
    MapConfig,
    MaxSizeConfig,
    MaxSizePolicy,
    MulticastConfig,
    NetworkConfig,
    PartitionGroupConfig,
    TcpIpConfig,
)
from hzcluster.settings import ClusterSettings, DiscoverySettings


class TestMapConfig:
    """Tests for MapConfig."""

    def test_default_values(self):
        config = MapConfig(name="m")
        assert config.max_idle_seconds == 0
        assert config.backup_count == 1
        assert config.eviction_policy is EvictionPolicy.NONE
        assert config.max_size_policy is MaxSizePolicy.PER_NODE

    def test_immutable(self):
        config = MapConfig(name="m")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.backup_count = 3

    def test_to_dict(self):
        config = MapConfig(
            name="ticketRegistry",
            max_idle_seconds=28800,
            eviction_policy=EvictionPolicy.LRU,
            max_size_config=MaxSizeConfig(MaxSizePolicy.USED_HEAP_PERCENTAGE, 85),
        )
        assert config.to_dict() == {
            "name": "ticketRegistry",
            "max_idle_seconds": 28800,
            "backup_count": 1,
            "async_backup_count": 0,
            "eviction_policy": "LRU",
            "max_size_config": {"max_size_policy": "USED_HEAP_PERCENTAGE", "size": 85},
        }


class TestJoinValues:
    """Tests for TcpIpConfig, MulticastConfig and JoinConfig."""

    def test_tcp_ip_members_become_tuple(self):
        config = TcpIpConfig(enabled=True, members=["a", "b"])
        assert config.members == ("a", "b")

    def test_multicast_to_dict_omits_unset(self):
        assert MulticastConfig().to_dict() == {"enabled": False}

    def test_multicast_to_dict(self):
        config = MulticastConfig(
            enabled=True,
            multicast_group="224.2.2.3",
            multicast_port=54327,
            trusted_interfaces=frozenset({"b", "a"}),
        )
        assert config.to_dict() == {
            "enabled": True,
            "multicast_group": "224.2.2.3",
            "multicast_port": 54327,
            "trusted_interfaces": ["a", "b"],
        }

    def test_default_join(self):
        join = JoinConfig()
        assert join.discovery_enabled is False
        assert join.discovery_strategy is None


class TestClusterConfig:
    """Tests for ClusterConfig."""

    def _config(self):
        strategy = DiscoveryStrategyConfig(
            provider=DiscoveryProvider.AZURE, properties={"cluster-id": "cas"}
        )
        join = JoinConfig(discovery_strategies=(strategy,))
        return ClusterConfig(
            instance_name="node",
            network=NetworkConfig(port=5702, join=join),
            map_configs={"m": MapConfig(name="m")},
            partition_group=PartitionGroupConfig(),
            properties={"hazelcast.logging.type": "slf4j"},
        )

    def test_mappings_read_only(self):
        config = self._config()
        with pytest.raises(TypeError):
            config.properties["x"] = "y"
        with pytest.raises(TypeError):
            config.map_configs["n"] = MapConfig(name="n")

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            self._config().instance_name = "other"

    def test_to_dict(self):
        data = self._config().to_dict()
        assert data["instance_name"] == "node"
        assert data["network"]["port"] == 5702
        assert data["network"]["port_auto_increment"] is True
        assert data["network"]["join"]["tcp_ip"]["enabled"] is False
        assert data["network"]["join"]["discovery_strategies"] == [
            {
                "provider": "AZURE",
                "factory_class_name": "com.hazelcast.azure.AzureDiscoveryStrategyFactory",
                "properties": {"cluster-id": "cas"},
            }
        ]
        assert data["map_configs"]["m"]["name"] == "m"
        assert data["partition_group"] == {"enabled": False, "group_type": "PER_MEMBER"}
        assert data["properties"] == {"hazelcast.logging.type": "slf4j"}

    def test_hashable(self):
        assert hash(self._config()) == hash(self._config())
        assert len({self._config(), self._config()}) == 1

    def test_hash_ignores_property_order(self):
        first = ClusterConfig(instance_name="node", properties={"a": "1", "b": "2"})
        second = ClusterConfig(instance_name="node", properties={"b": "2", "a": "1"})
        assert first == second
        assert hash(first) == hash(second)

    def test_built_config_is_hashable(self, factory, azure_settings):
        settings = ClusterSettings(
            discovery=DiscoverySettings(enabled=True, azure=azure_settings)
        )
        assert hash(factory.build(settings)) == hash(factory.build(settings))
        assert isinstance(hash(factory.build(ClusterSettings(), {"m": MapConfig("m")})), int)


class TestDiscoveryStrategyConfig:
    """Tests for DiscoveryStrategyConfig."""

    def test_hashable(self):
        first = DiscoveryStrategyConfig(
            provider=DiscoveryProvider.AWS, properties={"region": "eu-west-1"}
        )
        second = DiscoveryStrategyConfig(
            provider=DiscoveryProvider.AWS, properties={"region": "eu-west-1"}
        )
        assert first == second
        assert hash(first) == hash(second)

    def test_repr_hides_values(self):
        config = DiscoveryStrategyConfig(
            provider=DiscoveryProvider.AWS, properties={"secret-key": "s3cr3t"}
        )
        assert "s3cr3t" not in repr(config)
        assert "secret-key" in repr(config)
