"""Main FastAPI application"""
from fastapi import FastAPI
from app.config import get_settings
from app.middleware.cors import setup_cors
from app.middleware.error_handler import ErrorHandlerMiddleware
from contextlib import asynccontextmanager
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(
        f"Starting lead forms ({settings.environment}): business -> {settings.business_form_url}, "
        f"contact -> {settings.contact_form_url}"
    )
    yield
    logger.info("Lead forms stopped")


app = FastAPI(
    title="Lead Forms",
    description="Business inquiry and contact forms that post leads to automation webhooks",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Setup CORS
setup_cors(app)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "leadforms", "environment": settings.environment}


# Import and include routers
from app.routers import pages, relay

app.include_router(relay.router, prefix="/api", tags=["Relay"])
app.include_router(pages.router, tags=["Pages"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5000)
