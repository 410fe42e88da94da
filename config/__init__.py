from config.base import BaseConfig
from config.network import DEFAULT_NETWORK, NetworkConfig, NetworksConfig

__all__ = [
    "BaseConfig",
    "DEFAULT_NETWORK",
    "NetworkConfig",
    "NetworksConfig",
]
