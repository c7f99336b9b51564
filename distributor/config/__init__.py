from .registry import (
    ZigguratConfigRegistry,
    register_ziggurat_config,
    get_ziggurat_registry,
    get_ziggurat_config,
)
from .ziggurat import get_double_config, get_float_config, get_float_long_config
from .linear import get_linear_config

__all__ = [
    "ZigguratConfigRegistry",
    "register_ziggurat_config",
    "get_ziggurat_registry",
    "get_ziggurat_config",
    "get_double_config",
    "get_float_config",
    "get_float_long_config",
    "get_linear_config",
]
