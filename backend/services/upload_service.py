import asyncio
import os
import uuid
from pathlib import Path
from typing import Optional

from fastapi import Depends, Request, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from config.settings import Settings
from core.dependencies import get_settings
from core.errors import UploadValidationError
from models.fitness_image import UploadedImage

class UploadService:
    """Scratch storage for uploaded photos. Every stored file belongs to exactly one request."""

    def __init__(self, settings: Settings):
        self.upload_dir = Path(settings.UPLOAD_DIR)
        self.max_upload_size = settings.MAX_UPLOAD_SIZE
        self.allowed_types = settings.ALLOWED_IMAGE_TYPES
        self.enforce_types = settings.enforces_image_types()

    def check_limits(self, image: Optional[UploadFile]) -> None:
        """Reject disallowed MIME types and oversize files"""
        if image is None or not image.filename:
            return

        if self.enforce_types and image.content_type not in self.allowed_types:
            raise UploadValidationError(
                "Invalid file type. Only JPEG and PNG images are allowed.",
                details={"content_type": image.content_type}
            )

        size = measure_upload(image)
        if size > self.max_upload_size:
            raise UploadValidationError(
                f"File too large. Maximum size is {self.max_upload_size // (1024 * 1024)}MB.",
                details={"size": size, "limit": self.max_upload_size}
            )

    def validate_fields(self, image: Optional[UploadFile], description: Optional[str]) -> None:
        if image is None or not image.filename:
            raise UploadValidationError("No image uploaded. Please upload a photo.")

        if not description:
            raise UploadValidationError("No description provided. Please describe your fitness goal.")

    def ensure_upload_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def save(self, image: UploadFile) -> UploadedImage:
        """Write the upload to a fresh path in the scratch directory"""
        suffix = Path(image.filename or "").suffix
        path = self.upload_dir / f"{uuid.uuid4().hex}{suffix}"

        await image.seek(0)
        content = await image.read()

        def _write():
            self.ensure_upload_dir()
            try:
                path.write_bytes(content)
            except OSError:
                # A partial write must not outlive the request
                path.unlink(missing_ok=True)
                raise

        await asyncio.to_thread(_write)

        return UploadedImage(
            path=path,
            original_filename=image.filename,
            content_type=image.content_type or "application/octet-stream",
            size=len(content)
        )

    async def read_bytes(self, image: UploadedImage) -> bytes:
        return await asyncio.to_thread(image.path.read_bytes)

    async def discard(self, image: UploadedImage) -> bool:
        """Delete the stored file. A file that is already gone is not an error."""
        try:
            await asyncio.to_thread(image.path.unlink)
            print("🧹 Cleaned up temporary file")
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            print(f"❌ Error deleting file {image.path}: {e}")
            return False

def measure_upload(image: UploadFile) -> int:
    if image.size is not None:
        return image.size

    position = image.file.tell()
    image.file.seek(0, os.SEEK_END)
    size = image.file.tell()
    image.file.seek(position)
    return size

def get_upload_service(settings: Settings = Depends(get_settings)) -> UploadService:
    return UploadService(settings)

async def get_image_upload(
    request: Request,
    upload_service: UploadService = Depends(get_upload_service)
) -> Optional[UploadFile]:
    """
    Dependency that pulls the `image` part out of the form and enforces upload
    limits before the route body runs.

    A text field or a file part without a filename counts as no upload.
    """
    form = await request.form()
    image = form.get("image")
    if not isinstance(image, StarletteUploadFile) or not image.filename:
        return None

    upload_service.check_limits(image)
    return image
