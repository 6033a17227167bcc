"""Base classes for cloud discovery provider settings."""

from collections import OrderedDict
from typing import Any, Dict, Optional, Tuple

from hzcluster.exceptions import ConfigurationException


def has_text(value: Optional[str]) -> bool:
    """Check that a string is set and contains a non-whitespace character."""
    return value is not None and bool(str(value).strip())


def to_int(data: dict, key: str, default: int) -> int:
    """Read an integer setting, falling back to ``default`` when the key is missing.

    Raises:
        ConfigurationException: If the key is present but blank, boolean or
            not an integer.
    """
    if key not in data:
        return default
    value = data[key]
    message = f"Invalid value for '{key}': {value!r}"
    if value is None or isinstance(value, bool):
        raise ConfigurationException(message)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationException(message, cause=e) from e


def _is_set(value: Any) -> bool:
    if isinstance(value, int):
        return value > 0
    return has_text(value)


class ProviderSettings:
    """Mixin for a provider's credential set.

    Subclasses are dataclasses that declare:

    * ``REQUIRED_FIELDS``: attributes that must all have text for the
      credential set to be complete.
    * ``PROPERTY_FIELDS``: ordered ``(attribute, property key)`` pairs used
      to build the plugin properties.
    * ``SECRET_FIELDS``: attributes masked in ``repr``.
    """

    REQUIRED_FIELDS: Tuple[str, ...] = ()
    PROPERTY_FIELDS: Tuple[Tuple[str, str], ...] = ()
    SECRET_FIELDS: Tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Check if every required credential field has text."""
        return all(has_text(getattr(self, name)) for name in self.REQUIRED_FIELDS)

    def to_properties(self) -> Dict[str, Any]:
        """Project the set fields onto the plugin property keys.

        Strings are emitted only when they have text and integers only when
        strictly positive, so unset fields never appear as keys.

        Returns:
            Ordered mapping of property key to value.
        """
        properties: Dict[str, Any] = OrderedDict()
        for attribute, key in self.PROPERTY_FIELDS:
            value = getattr(self, attribute)
            if _is_set(value):
                properties[key] = value
        return properties

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{name}={'***' if name in self.SECRET_FIELDS else repr(getattr(self, name))}"
            for name, _ in self.PROPERTY_FIELDS
        )
        return f"{type(self).__name__}({shown})"
