# ============================================================
#   Ohana Web Search – API
#   Search gateway + autocomplete reference data
# ============================================================

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import sentry_sdk

from app.api.v1.router import api_router
from app.clients.exceptions import ConnectionFailed, OhanaError
from app.core.config import get_settings
from app.utils.log_config import configure_logging
from app.utils.sentry import init_sentry

# ============================================================
# ENV, LOGGING & SENTRY
# ============================================================
load_dotenv()
settings = get_settings()

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

init_sentry(settings)

# ============================================================
# FASTAPI APP
# ============================================================
app = FastAPI(title=settings.PROJECT_NAME)

# ============================================================
# CORS
# ============================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================
# UPSTREAM ERRORS
# ============================================================
@app.exception_handler(ConnectionFailed)
async def ohana_unavailable(request: Request, exc: ConnectionFailed):
    logger.error("Ohana API unreachable: %s", exc)
    sentry_sdk.capture_exception(exc)
    return JSONResponse(status_code=503, content={"detail": "Upstream directory unavailable"})


@app.exception_handler(OhanaError)
async def ohana_error(request: Request, exc: OhanaError):
    logger.error("Ohana API error: %s", exc)
    sentry_sdk.capture_exception(exc)
    return JSONResponse(status_code=502, content={"detail": "Upstream directory error"})

# ============================================================
# REGISTER ROUTERS
# ============================================================
app.include_router(api_router, prefix=settings.API_V1_PREFIX)

# ============================================================
# ROOT ROUTE
# ============================================================
@app.get("/")
async def root():
    return {
        "message": settings.PROJECT_NAME,
        "upstream": settings.OHANA_API_ENDPOINT,
        "status": "OK",
    }

# ============================================================
# UVICORN ENTRYPOINT
# ============================================================
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
