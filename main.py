"""
Main FastAPI Application
Entry point for the coffee order server
"""
import os
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from datetime import datetime

from app.config import settings
from app.errors import register_exception_handlers
from app.log import configure_logging, get_logger

# Import routers
from app.api.routes import orders, drink_choices, pages

configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "application_startup",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        data_dir=os.path.abspath(settings.DATA_DIR),
    )

    yield

    logger.info("application_shutdown")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Team coffee order collection with configurable drink choices",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(drink_choices.router, prefix="/api/drink-choices", tags=["Drink Choices"])
app.include_router(pages.router, tags=["Pages"], include_in_schema=False)

# Mount static files (page scripts and styles)
app.mount("/static", StaticFiles(directory=pages.STATIC_DIR), name="static")


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat()
    }


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
