from functools import lru_cache

from app.clients.ohana import OhanaClient
from app.core.config import get_settings
from app.services.search import SearchService


# ============================================================
# CLIENTS
# ============================================================

@lru_cache()
def get_ohana_client() -> OhanaClient:
    settings = get_settings()
    return OhanaClient(
        api_endpoint=settings.OHANA_API_ENDPOINT,
        api_token=settings.OHANA_API_TOKEN,
        timeout=settings.OHANA_TIMEOUT,
        user_agent=settings.OHANA_USER_AGENT,
    )


# ============================================================
# SERVICES
# ============================================================

@lru_cache()
def get_search_service() -> SearchService:
    return SearchService(client=get_ohana_client())
