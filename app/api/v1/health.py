from fastapi import APIRouter

from app.core.config import get_settings
from app.core import reference_data
from app.core.controlled_vocabulary import KEYWORD_REMAPS, TERMINOLOGY

router = APIRouter(tags=["health"])

@router.get("/health")
async def health():
    settings = get_settings()

    return {
        "status": "healthy",
        "upstream": settings.OHANA_API_ENDPOINT,
        "monitoring": "Sentry active" if settings.SENTRY_DSN else "disabled",
        "reference": {
            "keywords": len(reference_data.keywords()),
            "locations": len(reference_data.CITIES),
            "programs": len(reference_data.PROGRAM_TERMS),
            "keyword_remaps": len(KEYWORD_REMAPS),
            "terminology": len(TERMINOLOGY),
        },
    }
