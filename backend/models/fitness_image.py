from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any, Union, Dict, Tuple
from pathlib import Path

class UploadedImage(BaseModel):
    """A photo stored in the scratch directory for the lifetime of one request."""
    path: Path
    original_filename: str
    content_type: str
    size: int

class GenerationRequest(BaseModel):
    description: str
    prompt: str
    image_payload: Union[bytes, str]  # raw bytes (multipart) or data URL (base64)

class GenerationResult(BaseModel):
    success: bool
    image_url: Optional[str] = None
    error: Optional[str] = None
    details: Optional[Any] = None
    status_code: int = 200

class MultipartPayload(BaseModel):
    files: Dict[str, Tuple[str, bytes, str]]
    data: Dict[str, str]

    def body_size(self) -> int:
        file_bytes = sum(len(content) for _, content, _ in self.files.values())
        return file_bytes + sum(len(value.encode("utf-8")) for value in self.data.values())

class GenerateFitnessImageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    image_url: str = Field(..., alias="imageUrl")
    message: str = "Fitness transformation generated successfully!"

class ErrorResponse(BaseModel):
    error: str
    details: Optional[Any] = None

class HealthResponse(BaseModel):
    status: str
    timestamp: str

class ProviderStatusResponse(BaseModel):
    provider: str
    configured: bool
    message: str
