from common.errors import FetchError, UnknownNetworkError

__all__ = [
    "FetchError",
    "UnknownNetworkError",
]
