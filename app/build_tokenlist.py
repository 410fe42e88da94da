import asyncio
import logging
import sys
import argparse

from pathlib import Path
from typing import List, Optional

from common.errors import UnknownNetworkError
from config import DEFAULT_NETWORK, NetworksConfig
from functions.coingecko import COINGECKO_API_URL, CoinListFetcher
from functions.tokenlist import TokenListBuilder


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="build-tokenlist",
        description="Build a token list of one EVM network from the CoinGecko coin list.",
    )
    parser.add_argument(
        "network", type=str, nargs="?", default=DEFAULT_NETWORK, help="network key, e.g. base, bsc, ethereum",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", help="log level",
    )
    parser.add_argument(
        "--network-config", type=str, default=None, help="networks config file path, built-in table if omitted",
    )
    parser.add_argument(
        "--output-dir", type=str, default=".", help="directory of the generated token list",
    )
    parser.add_argument(
        "--base-url", type=str, default=COINGECKO_API_URL, help="CoinGecko API base url",
    )

    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    # setup logging
    logging.basicConfig(
        level=logging.getLevelName(args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.network_config is not None:
        networks_config = NetworksConfig.from_file(Path(args.network_config))
    else:
        networks_config = NetworksConfig.default()

    try:
        network = networks_config.get_network(args.network)
    except UnknownNetworkError as e:
        logging.error(str(e))
        sys.exit(1)

    builder = TokenListBuilder(
        network_key=args.network,
        network=network,
        fetcher=CoinListFetcher(base_url=args.base_url),
        output_dir=Path(args.output_dir),
    )
    token_list = await builder.abuild()
    builder.write(token_list)


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
