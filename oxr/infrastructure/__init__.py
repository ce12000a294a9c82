from .client import DEFAULT_API_URL, ApiClient, Protocol

__all__ = ['DEFAULT_API_URL', 'ApiClient', 'Protocol']
