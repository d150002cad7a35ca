"""
Main FastAPI application entry point.
Initializes the app, middleware, and routes.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from wordwise.config import settings
from wordwise.core.dependencies import get_view_controller
from wordwise.core.websocket_manager import broadcast_progress_event, websocket_manager

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Vocabulary coach with flashcards, games and an AI dictionary",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_unsubscribe_progress = None


@app.on_event("startup")
async def startup_event():
    """
    Run on application startup.
    Wire progress changes to the WebSocket broadcaster.
    """
    global _unsubscribe_progress

    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    controller = get_view_controller()
    _unsubscribe_progress = controller.progress.subscribe(broadcast_progress_event)
    logger.info(f"Content gateway: {controller.gateway.name}")

    logger.info("Application started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    global _unsubscribe_progress

    logger.info("Shutting down application...")
    if _unsubscribe_progress is not None:
        _unsubscribe_progress()
        _unsubscribe_progress = None
    logger.info("Application shutdown complete")


@app.get("/")
async def root():
    """Health check endpoint"""
    return JSONResponse(content={
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    })


@app.get("/health")
async def health_check():
    """
    Detailed health check endpoint.
    Reports the content gateway in use and open WebSocket connections.
    """
    controller = get_view_controller()
    health_status = {
        "status": "healthy",
        "services": {
            "api": "up",
            "content": controller.gateway.name,
            "websocket": websocket_manager.get_stats()
        }
    }

    return JSONResponse(content=health_status)


# Include routers
from wordwise.api.v1.endpoints import navigation
from wordwise.api.v1.endpoints import home
from wordwise.api.v1.endpoints import learn
from wordwise.api.v1.endpoints import practice
from wordwise.api.v1.endpoints import profile
from wordwise.api.v1.endpoints import search
from wordwise.api.v1.endpoints import dictionary
from wordwise.api.v1.endpoints import notifications
app.include_router(navigation.router, prefix=f"{settings.API_V1_PREFIX}/navigation", tags=["navigation"])
app.include_router(home.router, prefix=f"{settings.API_V1_PREFIX}/home", tags=["home"])
app.include_router(learn.router, prefix=f"{settings.API_V1_PREFIX}/learn", tags=["learn"])
app.include_router(practice.router, prefix=f"{settings.API_V1_PREFIX}/practice", tags=["practice"])
app.include_router(profile.router, prefix=f"{settings.API_V1_PREFIX}/profile", tags=["profile"])
app.include_router(search.router, prefix=f"{settings.API_V1_PREFIX}/search", tags=["search"])
app.include_router(dictionary.router, prefix=f"{settings.API_V1_PREFIX}/dictionary", tags=["dictionary"])
app.include_router(notifications.router, prefix=settings.API_V1_PREFIX, tags=["notifications"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "wordwise.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
