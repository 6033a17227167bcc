"""Build a member configuration for a CAS ticket registry.

Shows a static member list, a cloud discovery setup and the errors raised
for incomplete settings.
"""

import json
import logging

from hzcluster import (
    AzureDiscoverySettings,
    ClusterConfigurationFactory,
    ClusterSettings,
    DiscoverySettings,
    NoDiscoveryProviderConfiguredException,
    configure_logging,
)


def main():
    configure_logging(level=logging.DEBUG)
    factory = ClusterConfigurationFactory()

    # Static members with host-aware partition groups
    settings = ClusterSettings(
        instance_name="cas-node-1",
        members=("10.0.0.1", "10.0.0.2"),
        partition_member_group_type="host_aware",
    )
    tickets = factory.build_map_config(settings, "ticketRegistry", 28800)
    config = factory.build(settings, tickets)
    print(json.dumps(config.to_dict(), indent=2))

    # Azure discovery
    azure = ClusterSettings(
        discovery=DiscoverySettings(
            enabled=True,
            azure=AzureDiscoverySettings(
                client_id="client-id",
                client_secret="client-secret",
                cluster_id="cas",
            ),
        )
    )
    strategy = factory.build(azure).network.join.discovery_strategy
    print(f"Discovery provider: {strategy.provider.name}")

    # Discovery enabled without credentials
    try:
        factory.build(ClusterSettings(discovery=DiscoverySettings(enabled=True)))
    except NoDiscoveryProviderConfiguredException as e:
        print(f"Refusing to start: {e}")


if __name__ == "__main__":
    main()
