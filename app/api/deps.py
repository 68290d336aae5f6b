from fastapi import Request

from app.core.config import Settings
from app.services.shortener import URLService


def get_url_service(request: Request) -> URLService:
    """FastAPI dependency: the engine owned by the running application."""
    return request.app.state.url_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
