import logging

from httpx import get as http_get, AsyncClient, Client, HTTPError, InvalidURL, Response
from typing import Dict, List, Optional
from pydantic import BaseModel, ValidationError

from common.errors import FetchError


class CoinRecord(BaseModel):
    id: Optional[str] = None
    symbol: Optional[str] = None
    name: Optional[str] = None
    platforms: Optional[Dict[str, Optional[str]]] = None
    """contract address of the coin keyed by platform slug"""


COINGECKO_API_URL = "https://api.coingecko.com/api/v3"


class CoinListFetcher:
    """Fetch the coin list of a platform from the CoinGecko service.

    Failures are logged and reported as an empty list.
    """

    base_url: str = COINGECKO_API_URL
    client: Optional[Client]
    async_client: Optional[AsyncClient]

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[Client] = None,
        async_client: Optional[AsyncClient] = None,
    ):
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client
        self.async_client = async_client

    @property
    def url(self) -> str:
        return self.base_url + "/coins/list"

    @staticmethod
    def params(platform: str) -> Dict[str, str]:
        return {
            "platform": platform,
            "include_platform": "true",
        }

    @staticmethod
    def _create_result(resp: Response) -> List[CoinRecord]:
        if resp.status_code != 200:
            raise FetchError(f"failed to query coin list: status: {resp.status_code}, response: {resp.text}")
        try:
            body = resp.json()
        except ValueError as e:
            raise FetchError(f"coin list body is not valid JSON: {e}") from e
        if not isinstance(body, list):
            raise FetchError(f"unexpected coin list body: expected an array, got {type(body).__name__}")

        coins = []
        for index, item in enumerate(body):
            try:
                coins.append(CoinRecord.model_validate(item))
            except ValidationError as e:
                logging.warning(f"Skipping malformed coin record #{index}: {e.error_count()} validation errors")
        return coins

    def fetch(self, platform: str) -> List[CoinRecord]:
        try:
            if self.client is not None:
                resp = self.client.get(self.url, params=self.params(platform), timeout=self.timeout)
            else:
                resp = http_get(self.url, params=self.params(platform), timeout=self.timeout)
            coins = self._create_result(resp)
        except (FetchError, HTTPError, InvalidURL) as e:
            logging.error(f"Failed to fetch CoinGecko coin list for platform {platform}: {e}")
            return []
        logging.info(f"Fetched {len(coins)} coins for platform {platform}")
        return coins

    async def afetch(self, platform: str) -> List[CoinRecord]:
        try:
            if self.async_client is not None:
                resp = await self.async_client.get(self.url, params=self.params(platform), timeout=self.timeout)
            else:
                async with AsyncClient() as client:
                    resp = await client.get(self.url, params=self.params(platform), timeout=self.timeout)
            coins = self._create_result(resp)
        except (FetchError, HTTPError, InvalidURL) as e:
            logging.error(f"Failed to fetch CoinGecko coin list for platform {platform}: {e}")
            return []
        logging.info(f"Fetched {len(coins)} coins for platform {platform}")
        return coins
