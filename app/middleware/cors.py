"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from app.config import get_settings


def setup_cors(app):
    """
    Configure CORS middleware for the application

    The forms may be served from a different origin than the relay, so the
    allow-list comes from settings.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
