from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from content_creator.routers.content_routes import router as content_router
from content_creator.utils.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting AI Content Creator API")
    if settings.API_KEY == "content-creator":
        logger.warning("API_KEY not set, using the default development key")

    logger.info("API initialization complete")
    yield
    logger.info("Shutting down AI Content Creator API")


app = FastAPI(
    title="AI Content Creator",
    description="Template-based text generation from free-text prompts",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(content_router, prefix="/api", tags=["text"])

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "AI Content Creator API",
        "version": settings.APP_VERSION,
        "status": "running"
    }

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "content_creator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
