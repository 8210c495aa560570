import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from quickdigest.core.config import settings
from quickdigest.core.exceptions import AppException, app_exception_handler
from quickdigest.core.logging import setup_logging
from quickdigest.api.endpoints import router as api_router
from quickdigest.api.dependencies import (
    get_http_client,
    get_metadata_service,
    get_price_poller,
    get_transcript_fetcher,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("🚀 Application startup")
    poller = get_price_poller()
    if settings.PRICE_POLLER_ENABLED:
        await poller.start()
    yield
    await poller.stop()
    await get_http_client().aclose()
    for factory in (get_http_client, get_transcript_fetcher, get_metadata_service, get_price_poller):
        factory.cache_clear()
    logger.info("🛑 Application shutdown")


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.add_exception_handler(AppException, app_exception_handler)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request_id = str(uuid.uuid4())
    with logger.contextualize(request_id=request_id):
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "ok", "project": settings.PROJECT_NAME}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("quickdigest.main:app", host="0.0.0.0", port=8000, reload=True)
