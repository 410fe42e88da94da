import asyncio

import httpx
import pytest

from config import NetworksConfig
from functions.coingecko import CoinListFetcher

COINS = [
    {
        "id": "usd-coin",
        "symbol": "usdc",
        "name": "USDC",
        "platforms": {
            "ethereum": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
            "base": "0x833589fcd6edb6e08f4c7c32d4f71b54bda02913",
        },
    },
    {
        "id": "only-on-ethereum",
        "symbol": "ooe",
        "name": "Only On Ethereum",
        "platforms": {"ethereum": "0x1111111111111111111111111111111111111111"},
    },
    {
        "id": "degen-base",
        "symbol": "degen",
        "name": "Degen",
        "platforms": {"base": "0x4ed4e862860bed51a9570b96d89af5e1b0efefed"},
    },
]


@pytest.fixture
def networks_config() -> NetworksConfig:
    return NetworksConfig.default()


@pytest.fixture
def base_network(networks_config):
    return networks_config.get_network("base")


@pytest.fixture
def requests_seen():
    return []


@pytest.fixture
def coins_transport(requests_seen):
    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return httpx.Response(200, json=COINS)

    return httpx.MockTransport(handler)


@pytest.fixture
def failing_transport():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def fetcher(coins_transport):
    client = httpx.Client(transport=coins_transport)
    async_client = httpx.AsyncClient(transport=coins_transport)
    yield CoinListFetcher(client=client, async_client=async_client)
    client.close()
    asyncio.run(async_client.aclose())


@pytest.fixture
def failing_fetcher(failing_transport):
    client = httpx.Client(transport=failing_transport)
    async_client = httpx.AsyncClient(transport=failing_transport)
    yield CoinListFetcher(client=client, async_client=async_client)
    client.close()
    asyncio.run(async_client.aclose())
