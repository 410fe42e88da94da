from functions.tokenlist.schema import TokenInfo, TokenList, Version
from functions.tokenlist.transform import iter_tokens, transform_coins
from functions.tokenlist.builder import (
    TokenListBuilder,
    create_token_list_base,
    output_file_name,
    write_token_list,
)

__all__ = [
    "TokenInfo",
    "TokenList",
    "Version",
    "iter_tokens",
    "transform_coins",
    "TokenListBuilder",
    "create_token_list_base",
    "output_file_name",
    "write_token_list",
]
