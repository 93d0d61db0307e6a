"""
Core services for console components
"""
from .api_client import (
    ApiClient,
    ApiClientError,
    SessionExpiredError,
    get_api_client,
    init_api_client,
)
from .monitoring import ActivityLog, UpstreamMonitor
from .tokens import MemoryTokenStore, SessionTokenStore, TokenStore

__all__ = [
    'ApiClient',
    'ApiClientError',
    'SessionExpiredError',
    'get_api_client',
    'init_api_client',
    'ActivityLog',
    'UpstreamMonitor',
    'TokenStore',
    'SessionTokenStore',
    'MemoryTokenStore',
]
