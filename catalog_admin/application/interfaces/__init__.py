from .catalog_http_client import CatalogHttpClient, QueryParams
from .user_prompt import UserPrompt

__all__ = [
    "CatalogHttpClient",
    "QueryParams",
    "UserPrompt",
]
