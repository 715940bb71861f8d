import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from app.core.config import Settings

logger = logging.getLogger(__name__)

def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry for error tracking"""
    if settings.SENTRY_DSN:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[FastApiIntegration()],
            traces_sample_rate=1.0,
            send_default_pii=False,
            environment=settings.ENVIRONMENT,
        )
        logger.info("Sentry initialized")
        return True

    logger.warning("Sentry DSN not found - error tracking disabled")
    return False
