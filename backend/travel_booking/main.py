"""FastAPI application for the travel booking calculator."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_booking.api.endpoints import router
from travel_booking.config import settings
from travel_booking.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting %s", settings.API_TITLE)
    uvicorn.run(app, host="0.0.0.0", port=8000)
