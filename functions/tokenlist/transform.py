from typing import Iterable, Iterator, List

from config.network import NetworkConfig
from functions.coingecko.coin_list import CoinRecord
from functions.tokenlist.schema import TokenInfo


def iter_tokens(coins: Iterable[CoinRecord], network: NetworkConfig) -> Iterator[TokenInfo]:
    """Yield a token for every coin with a contract address on the network, in upstream order."""
    for coin in coins:
        address = (coin.platforms or {}).get(network.coingecko_platform)
        if not address:
            continue

        yield TokenInfo(
            chain_id=network.chain_id,
            address=address,
            name=coin.name or "",
            symbol=coin.symbol.upper() if coin.symbol else "",
            decimals=network.decimals,
            logo_uri="",
        )


def transform_coins(coins: Iterable[CoinRecord], network: NetworkConfig) -> List[TokenInfo]:
    return list(iter_tokens(coins, network))
