import json
from typing import Optional

import httpx

from config.settings import Settings
from models.fitness_image import UploadedImage, GenerationRequest
from services.image_provider import ImageProvider
from services.payload_encoder import detect_mime_type, build_data_url
from services.transformation_prompt import build_transformation_prompt

class FalImageService(ImageProvider):
    """Sends the photo to a Fal.ai model as a base64 data URL inside a JSON body"""

    name = "fal"
    display_name = "Fal.ai"

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(
            settings,
            api_key=settings.FAL_KEY,
            timeout=settings.FAL_TIMEOUT_SECONDS,
            transport=transport
        )
        self.base_url = settings.FAL_BASE_URL.rstrip('/')
        self.model = settings.FAL_MODEL.strip('/')
        self.mime_detection = settings.MIME_DETECTION

    async def transform_image(self, image: UploadedImage, description: str) -> str:
        image_bytes = await self.upload_service.read_bytes(image)
        mime_type = detect_mime_type(image, self.mime_detection)
        request = GenerationRequest(
            description=description,
            prompt=build_transformation_prompt(description),
            image_payload=build_data_url(image_bytes, mime_type)
        )

        payload = {
            "prompt": request.prompt,
            "image_url": request.image_payload,
            "num_images": 1,
        }
        content = json.dumps(payload).encode("utf-8")
        self._check_body_size(len(content))

        print(f"🎨 Sending to Fal.ai ({self.model}) for generation...")
        body = await self._post(
            f"{self.base_url}/{self.model}",
            content=content,
            headers={
                "Authorization": f"Key {self.api_key}",
                "Content-Type": "application/json"
            }
        )

        results = body.get("images") if isinstance(body, dict) else None
        return self._first_url(results, body)
