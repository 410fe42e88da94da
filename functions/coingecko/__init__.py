from functions.coingecko.coin_list import COINGECKO_API_URL, CoinRecord, CoinListFetcher

__all__ = [
    "COINGECKO_API_URL",
    "CoinRecord",
    "CoinListFetcher",
]
