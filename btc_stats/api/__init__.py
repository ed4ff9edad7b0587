"""
API Routers
"""
from .statistics import router as statistics_router
from .bitcoin import router as bitcoin_router
from .errors import register_exception_handlers

__all__ = ["statistics_router", "bitcoin_router", "register_exception_handlers"]
