from typing import Optional


class PriceFeedError(Exception):
    """The price-index API could not be reached or returned unusable data"""
    error_code = "price_feed_error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
