import logging

from pathlib import Path
from typing import Optional

from config.network import NetworkConfig
from functions.coingecko.coin_list import CoinListFetcher
from functions.tokenlist.schema import TOKENLIST_KEYWORD, TokenList, utc_timestamp
from functions.tokenlist.transform import transform_coins


def create_token_list_base(network_key: str, network: NetworkConfig) -> TokenList:
    return TokenList(
        name=network.name,
        keywords=[network_key, TOKENLIST_KEYWORD],
        tokens=[],
    )


def output_file_name(network_key: str) -> str:
    return f"{network_key}-tokenlist.json"


def write_token_list(token_list: TokenList, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    # plain overwrite, an interrupted write can leave a truncated file
    path.write_text(token_list.dump_json(), encoding="utf-8")
    return path


class TokenListBuilder:
    """Build the token list of one network from the CoinGecko coin list."""

    network_key: str
    network: NetworkConfig
    fetcher: CoinListFetcher

    def __init__(
        self,
        *,
        network_key: str,
        network: NetworkConfig,
        fetcher: Optional[CoinListFetcher] = None,
        output_dir: Optional[Path] = None,
    ):
        self.network_key = network_key
        self.network = network
        self.fetcher = fetcher if fetcher is not None else CoinListFetcher()
        self.output_dir = output_dir if output_dir is not None else Path(".")

    @property
    def output_path(self) -> Path:
        return self.output_dir / output_file_name(self.network_key)

    def _finish(self, token_list: TokenList, coins) -> TokenList:
        token_list.tokens = transform_coins(coins, self.network)
        token_list.timestamp = utc_timestamp()
        logging.info(f"Kept {len(token_list.tokens)} of {len(coins)} coins with an address on [{self.network_key}]")
        return token_list

    def build(self) -> TokenList:
        token_list = create_token_list_base(self.network_key, self.network)
        coins = self.fetcher.fetch(self.network.coingecko_platform)
        return self._finish(token_list, coins)

    async def abuild(self) -> TokenList:
        token_list = create_token_list_base(self.network_key, self.network)
        coins = await self.fetcher.afetch(self.network.coingecko_platform)
        return self._finish(token_list, coins)

    def write(self, token_list: TokenList) -> Path:
        path = write_token_list(token_list, self.output_path)
        logging.info(f"Token list for [{self.network_key}] written to {path}")
        return path
