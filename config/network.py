from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.errors import UnknownNetworkError
from config.base import BaseConfig

DEFAULT_NETWORK = "base"


class NetworkConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    chain_id: int
    """EVM chain id written into every token entry"""
    coingecko_platform: str
    """platform slug used by CoinGecko for this network"""
    name: str
    """default name of the generated token list"""
    decimals: int = Field(18, ge=0)
    """decimals applied to every token of the network"""

    @field_validator("coingecko_platform", mode="before")
    @classmethod
    def check_platform(cls, v):
        if not isinstance(v, str):
            raise TypeError(f"Invalid type of platform slug: {type(v)}")
        if not v.strip():
            raise ValueError("Platform slug must not be empty")
        return v.strip()


class NetworksConfig(BaseConfig):
    networks: Dict[str, NetworkConfig]
    """networks: supported networks keyed by network key"""

    @classmethod
    def default(cls) -> "NetworksConfig":
        return cls.model_validate({"networks": DEFAULT_NETWORKS})

    @property
    def keys(self) -> List[str]:
        return sorted(self.networks)

    def get_network(self, key: str) -> NetworkConfig:
        if key not in self.networks:
            raise UnknownNetworkError(key, self.keys)
        return self.networks[key]


DEFAULT_NETWORKS = {
    "base": {
        "chain_id": 8453,
        "coingecko_platform": "base",
        "name": "Base Token List",
        "decimals": 18,
    },
    "bsc": {
        "chain_id": 56,
        "coingecko_platform": "binance-smart-chain",
        "name": "BSC Token List",
        "decimals": 18,
    },
    "ethereum": {
        "chain_id": 1,
        "coingecko_platform": "ethereum",
        "name": "Ethereum Token List",
        "decimals": 18,
    },
    "polygon": {
        "chain_id": 137,
        "coingecko_platform": "polygon-pos",
        "name": "Polygon Token List",
        "decimals": 18,
    },
}
