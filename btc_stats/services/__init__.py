from .coingecko import CoinGeckoClient, get_price_client
from .errors import PriceFeedError

__all__ = ["CoinGeckoClient", "get_price_client", "PriceFeedError"]
