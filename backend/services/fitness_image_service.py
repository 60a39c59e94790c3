from typing import Optional

from fastapi import UploadFile

from core.errors import FitnessImageError
from models.fitness_image import GenerationResult, UploadedImage
from services.image_provider import ImageProvider
from services.upload_service import UploadService

class FitnessImageService:
    def __init__(self, upload_service: UploadService, provider: ImageProvider):
        self.upload_service = upload_service
        self.provider = provider

    async def generate(self, upload: Optional[UploadFile], description: Optional[str]) -> GenerationResult:
        """
        Relay one uploaded photo and fitness goal to the configured provider.

        Every failure is folded into a GenerationResult carrying the HTTP
        status to respond with. The stored upload is deleted once the provider
        call has been attempted, whether it succeeded or not.
        """
        stored: Optional[UploadedImage] = None
        try:
            self.upload_service.validate_fields(upload, description)

            print(f"✅ Image received: {upload.filename}")
            print(f"✅ Description: {description}")

            stored = await self.upload_service.save(upload)
            image_url = await self.provider.transform_image(stored, description)

            print("✨ Image generated successfully!")
            print(f"🔗 Image URL: {image_url}")
            return GenerationResult(success=True, image_url=image_url)

        except FitnessImageError as e:
            print(f"❌ Error generating image: {e.message}")
            return GenerationResult(
                success=False,
                error=e.message,
                details=e.details,
                status_code=e.status_code
            )
        except Exception as e:
            print(f"❌ Error generating image: {str(e)}")
            return GenerationResult(
                success=False,
                error="Failed to generate image",
                details=str(e),
                status_code=500
            )
        finally:
            if stored is not None:
                await self.upload_service.discard(stored)
