"""Global registry for Ziggurat sampler configurations.

Each configuration is a plain dictionary naming the table shape (box count,
tail edge ``r`` and box ``area``) together with the bit layout the sampler
reads from its state word and the constants of its private mixing step.

Examples
--------
>>> from distributor.config import get_ziggurat_registry
>>> get_ziggurat_registry().list_configs()
['double', 'float', 'float_long']
>>> get_ziggurat_config("double")["n_boxes"]
256
"""

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "n_boxes",
    "r",
    "area",
    "state_bits",
    "index_bits",
    "sign_mask",
    "uniform_bits",
    "mix_xor",
    "mix_mult",
)


class ZigguratConfigRegistry:
    """Registry mapping configuration names to factory functions.

    Factories are called on every lookup so callers always receive a fresh
    dictionary they may modify without affecting other users.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._factories: dict[str, Callable[[], dict[str, Any]]] = {}

    def register(self, name: str, factory: Callable[[], dict[str, Any]]) -> None:
        """Register a configuration factory.

        Parameters
        ----------
        name : str
            Unique name for the configuration (e.g. "double")
        factory : Callable
            Zero-argument callable returning the configuration dictionary

        Raises
        ------
        ValueError
            If name already registered, or the factory's dictionary is missing
            one of the required keys
        """
        if name in self._factories:
            raise ValueError(
                f"Ziggurat config '{name}' is already registered. "
                f"Use a different name."
            )
        missing = [key for key in REQUIRED_KEYS if key not in factory()]
        if missing:
            raise ValueError(f"Ziggurat config '{name}' is missing keys: {missing}")
        self._factories[name] = factory
        logger.debug("Registered ziggurat config %s", name)

    def get(self, name: str) -> dict[str, Any]:
        """Get a configuration by name.

        Raises
        ------
        KeyError
            If the name is not registered
        """
        if name not in self._factories:
            raise KeyError(
                f"Ziggurat config '{name}' is not registered. "
                f"Available configs: {self.list_configs()}"
            )
        return self._factories[name]()

    def is_registered(self, name: str) -> bool:
        """Check if a configuration name is registered."""
        return name in self._factories

    def list_configs(self) -> list[str]:
        """Sorted list of all registered configuration names."""
        return sorted(self._factories.keys())

    def __repr__(self) -> str:
        """String representation of registry."""
        return f"ZigguratConfigRegistry({len(self._factories)} configs registered)"


# Global singleton instance
_GLOBAL_ZIGGURAT_REGISTRY = ZigguratConfigRegistry()


def register_ziggurat_config(name: str):
    """Decorator registering a configuration factory globally.

    >>> @register_ziggurat_config("my_double")
    ... def my_double():
    ...     config = get_double_config()
    ...     config["mix_mult"] = 0xD1342543DE82EF95
    ...     return config
    """

    def decorator(func):
        _GLOBAL_ZIGGURAT_REGISTRY.register(name, func)
        return func

    return decorator


def get_ziggurat_registry() -> ZigguratConfigRegistry:
    """Get the global Ziggurat configuration registry."""
    return _GLOBAL_ZIGGURAT_REGISTRY


def get_ziggurat_config(name: str) -> dict[str, Any]:
    """Get a fresh copy of a registered Ziggurat configuration."""
    return _GLOBAL_ZIGGURAT_REGISTRY.get(name)
