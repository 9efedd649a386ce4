"""Bittrex v3 REST API 클라이언트 패키지."""

from .exchange import BittrexClient
from .utils.exceptions import ConfigurationError, ExchangeError, InvalidArgument, TransportError
from .utils.logger import configure_logging

__version__ = "0.1.0"

__all__ = [
    "BittrexClient",
    "ConfigurationError",
    "ExchangeError",
    "InvalidArgument",
    "TransportError",
    "configure_logging",
    "__version__",
]
