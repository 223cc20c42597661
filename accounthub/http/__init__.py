from .client import ApiClient, create_api_client, get_api_client

__all__ = ["ApiClient", "create_api_client", "get_api_client"]
