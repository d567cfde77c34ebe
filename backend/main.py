"""
FastAPI Main Application
Professional Video Marketplace Backend
"""
import logging

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from core.config import settings
from core.database import init_db
from api import auth, users, categories, videos, professionals, purchases, ratings, dashboard
from services.storage import MemStorage

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(store: MemStorage = None, seed_demo: bool = None) -> FastAPI:
    """
    Build the API around a store

    Args:
        store: Store owned by this app; a fresh one is created if omitted
        seed_demo: Seed the demo catalog at startup (defaults to SEED_DEMO_DATA)
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Backend API for a marketplace of paid career videos by professionals",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store if store is not None else MemStorage()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup_event():
        """Seed the store on startup"""
        logger.info("🚀 Starting Professional Video Marketplace API...")
        init_db(app.state.store, seed_demo)
        logger.info(f"✅ API running on {settings.API_URL}")

    # Health check endpoint
    @app.get("/")
    async def root():
        return {
            "message": "Welcome to Professional Video Marketplace API",
            "version": "1.0.0",
            "status": "healthy",
            "docs": f"{settings.API_URL}/docs",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring"""
        return {"status": "ok", "service": "backend-api"}

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
    app.include_router(videos.router, prefix="/api/videos", tags=["Videos"])
    app.include_router(professionals.router, prefix="/api/professionals", tags=["Professionals"])
    app.include_router(purchases.router, prefix="/api/purchases", tags=["Purchases"])
    app.include_router(ratings.router, prefix="/api/ratings", tags=["Ratings"])
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return JSONResponse(
            status_code=400,
            content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)},
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
