from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LOGO_URI = "https://example.com/logo.png"
TOKENLIST_KEYWORD = "tokenlist"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-31T08:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TokenInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chain_id: int = Field(alias="chainId")
    address: str = Field(min_length=1)
    name: str
    symbol: str
    decimals: int
    logo_uri: str = Field("", alias="logoURI")


class Version(BaseModel):
    major: int = 1
    minor: int = 0
    patch: int = 0


class TokenList(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    logo_uri: str = Field(DEFAULT_LOGO_URI, alias="logoURI")
    keywords: List[str]
    timestamp: str = Field(default_factory=utc_timestamp)
    version: Version = Field(default_factory=Version)
    tokens: List[TokenInfo] = []

    def dump_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
