"""Request dependencies that hand out the objects built once at startup."""
from typing import TYPE_CHECKING

from fastapi import Request

from config.settings import Settings

if TYPE_CHECKING:
    from services.image_provider import ImageProvider


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was created with."""
    return request.app.state.settings


def get_image_provider(request: Request) -> "ImageProvider":
    """Dependency returning the provider selected at startup."""
    return request.app.state.image_provider
