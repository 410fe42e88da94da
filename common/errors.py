from typing import Sequence


class UnknownNetworkError(KeyError):
    """The network key has no entry in the networks config."""

    def __init__(self, key: str, supported: Sequence[str] = ()):
        self.key = key
        self.supported = list(supported)
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unsupported network key: {self.key}. Supported keys: {', '.join(self.supported)}"


class FetchError(RuntimeError):
    """The upstream coin list could not be fetched or decoded."""
