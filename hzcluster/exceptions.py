"""Cluster configuration exceptions.

This module defines the exception hierarchy for the cluster configuration
factory. All exceptions inherit from :class:`ClusterConfigException`.

Every error is raised while a configuration is being built. None of them is
retryable and no partial configuration is ever returned alongside one.

Example:
    Refusing to start a member on a bad configuration::

        from hzcluster.exceptions import (
            ClusterConfigException,
            NoDiscoveryProviderConfiguredException,
        )

        try:
            config = factory.build(settings)
        except NoDiscoveryProviderConfiguredException:
            print("Discovery is enabled but no provider has credentials")
        except ClusterConfigException as e:
            print(f"Invalid cluster settings: {e}")
"""

from typing import Optional


class ClusterConfigException(Exception):
    """Base class for all cluster configuration exceptions.

    Args:
        message: The error message describing the exception.
        cause: The underlying exception that caused this error, if any.

    Attributes:
        cause: The underlying cause of this exception, if any.
    """

    def __init__(self, message: str = "", cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationException(ClusterConfigException):
    """Raised when cluster settings cannot be read or are inconsistent.

    Example:
        - A settings file that does not exist
        - Malformed YAML content
        - A settings section that is not a mapping
        - A numeric setting that is blank or not a number
    """
    pass


class InvalidPolicyNameException(ConfigurationException):
    """Raised when an eviction or max-size policy name is not recognized.

    Policy names are matched case-sensitively against the enum member names.

    Args:
        policy_type: Which policy was being parsed, e.g. ``"eviction"``.
        value: The offending policy name.
        cause: The lookup error, if any.
    """

    def __init__(self, policy_type: str, value: str, cause: Optional[Exception] = None):
        super().__init__(f"Invalid {policy_type} policy name: {value!r}", cause)
        self._policy_type = policy_type
        self._value = value

    @property
    def policy_type(self) -> str:
        """Get the kind of policy that failed to parse."""
        return self._policy_type

    @property
    def value(self) -> str:
        """Get the policy name that failed to parse."""
        return self._value


class NoDiscoveryProviderConfiguredException(ConfigurationException):
    """Raised when discovery is enabled but no provider is fully configured.

    A provider is fully configured when all of its required credential
    fields are non-empty. No default provider is ever substituted.
    """

    def __init__(
        self,
        message: str = (
            "Could not create discovery strategy configuration. "
            "No discovery provider is defined in the settings"
        ),
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)


class InvalidPartitionGroupTypeException(ConfigurationException):
    """Raised when the partition member group type is not recognized.

    Args:
        value: The offending group type string.
        cause: The lookup error, if any.
    """

    def __init__(self, value: str, cause: Optional[Exception] = None):
        super().__init__(f"Invalid partition member group type: {value!r}", cause)
        self._value = value

    @property
    def value(self) -> str:
        """Get the group type string that failed to parse."""
        return self._value
