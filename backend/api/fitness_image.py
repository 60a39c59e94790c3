from fastapi import APIRouter, Depends, Form, UploadFile
from fastapi.responses import JSONResponse
from typing import Optional

from core.dependencies import get_image_provider
from models.fitness_image import (
    GenerateFitnessImageResponse,
    ErrorResponse,
    ProviderStatusResponse,
)
from services.fitness_image_service import FitnessImageService
from services.image_provider import ImageProvider
from services.upload_service import UploadService, get_upload_service, get_image_upload

router = APIRouter(tags=["fitness-image"])

def get_fitness_image_service(
    upload_service: UploadService = Depends(get_upload_service),
    provider: ImageProvider = Depends(get_image_provider)
):
    return FitnessImageService(upload_service, provider)

@router.post(
    "/generate-fitness-image",
    response_model=GenerateFitnessImageResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    }
)
async def generate_fitness_image(
    description: Optional[str] = Form(None, description="Fitness goal"),
    image: Optional[UploadFile] = Depends(get_image_upload),
    service: FitnessImageService = Depends(get_fitness_image_service)
):
    """Generate a fitness transformation of the uploaded photo"""
    print("📸 Received request to generate fitness image")

    result = await service.generate(image, description)

    if not result.success:
        return JSONResponse(
            status_code=result.status_code,
            content=ErrorResponse(error=result.error, details=result.details).model_dump(exclude_none=True)
        )

    return GenerateFitnessImageResponse(image_url=result.image_url)

@router.get("/provider/health", response_model=ProviderStatusResponse)
async def check_provider_config(provider: ImageProvider = Depends(get_image_provider)):
    """Check if the active image provider has a credential configured"""
    configured = provider.is_configured

    return ProviderStatusResponse(
        provider=provider.name,
        configured=configured,
        message=f"{provider.display_name} API key configured" if configured else f"{provider.display_name} API key not set"
    )
