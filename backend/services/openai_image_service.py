from typing import Optional

import httpx

from config.settings import Settings
from models.fitness_image import UploadedImage, GenerationRequest
from services.image_provider import ImageProvider
from services.payload_encoder import build_multipart_payload
from services.transformation_prompt import build_transformation_prompt

class OpenAIImageService(ImageProvider):
    """Sends the photo to OpenAI's image edit endpoint as a multipart form"""

    name = "openai"
    display_name = "OpenAI"

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(
            settings,
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
            transport=transport
        )
        self.base_url = settings.OPENAI_BASE_URL.rstrip('/')
        self.model = settings.OPENAI_IMAGE_MODEL

    async def transform_image(self, image: UploadedImage, description: str) -> str:
        image_bytes = await self.upload_service.read_bytes(image)
        request = GenerationRequest(
            description=description,
            prompt=build_transformation_prompt(description),
            image_payload=image_bytes
        )
        payload = build_multipart_payload(image, image_bytes, request.prompt, self.model)
        self._check_body_size(payload.body_size())

        print("🎨 Sending to OpenAI for generation...")
        body = await self._post(
            f"{self.base_url}/images/edits",
            files=payload.files,
            data=payload.data,
            headers={"Authorization": f"Bearer {self.api_key}"}
        )

        results = body.get("data") if isinstance(body, dict) else None
        return self._first_url(results, body)
