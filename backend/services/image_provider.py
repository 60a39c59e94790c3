from abc import ABC, abstractmethod
from typing import Optional, Any

import httpx

from config.settings import Settings
from core.errors import (
    ProviderError,
    NoImageGeneratedError,
    ProviderTimeoutError,
    UploadValidationError,
)
from models.fitness_image import UploadedImage
from services.upload_service import UploadService

class ImageProvider(ABC):
    """An external image-generation API that turns a photo plus a fitness goal into an image URL"""

    name: str = "provider"
    display_name: str = "Provider"

    def __init__(
        self,
        settings: Settings,
        api_key: Optional[str],
        timeout: Optional[float],
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.max_body_bytes = settings.MAX_OUTBOUND_BODY_BYTES
        self.upload_service = UploadService(settings)
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @abstractmethod
    async def transform_image(self, image: UploadedImage, description: str) -> str:
        """Send one generation request and return the resulting image URL"""

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self.transport)

    def _check_body_size(self, size: int) -> None:
        if self.max_body_bytes is not None and size > self.max_body_bytes:
            raise UploadValidationError(
                "Image is too large to send to the image provider.",
                details={"size": size, "limit": self.max_body_bytes}
            )

    async def _post(self, url: str, **kwargs: Any) -> Any:
        """Issue exactly one POST and return the decoded JSON body"""
        try:
            async with self._client() as client:
                response = await client.post(url, **kwargs)
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError() from e

        if response.status_code >= 400:
            details = _response_details(response)
            print(f"❌ {self.display_name} Error: {details}")
            raise ProviderError(f"{self.display_name} API error", details=details)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"{self.display_name} API error",
                details=f"Invalid JSON response: {response.text[:200]}"
            ) from e

    @staticmethod
    def _first_url(results: Any, body: Any) -> str:
        if not isinstance(results, list) or len(results) == 0:
            raise NoImageGeneratedError(details=body)

        first = results[0]
        url = first.get("url") if isinstance(first, dict) else None
        if not url:
            raise NoImageGeneratedError(details=body)
        return url

def _response_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

def create_image_provider(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> ImageProvider:
    """Pick the provider implementation named by IMAGE_PROVIDER"""
    from services.openai_image_service import OpenAIImageService
    from services.fal_image_service import FalImageService

    if settings.IMAGE_PROVIDER == "fal":
        return FalImageService(settings, transport=transport)
    return OpenAIImageService(settings, transport=transport)
