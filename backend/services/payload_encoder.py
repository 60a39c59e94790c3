import base64
from typing import Optional

from models.fitness_image import UploadedImage, MultipartPayload

OUTPUT_SIZE = "1024x1024"

def build_multipart_payload(
    image: UploadedImage,
    image_bytes: bytes,
    prompt: str,
    model: Optional[str] = None
) -> MultipartPayload:
    """Build the multipart form fields for an image edit request"""
    data = {
        "prompt": prompt,
        "n": "1",
        "size": OUTPUT_SIZE,
        "response_format": "url",
    }
    if model:
        data["model"] = model

    return MultipartPayload(
        files={"image": (image.original_filename, image_bytes, image.content_type)},
        data=data
    )

def detect_mime_type(image: UploadedImage, strategy: str = "extension") -> str:
    """
    Pick the MIME type used to label a data URL.

    The "extension" strategy only looks at the stored file's suffix: .png is
    image/png and everything else is treated as image/jpeg. The
    "content_type" strategy trusts the MIME type declared with the upload.
    """
    if strategy == "content_type":
        return image.content_type
    if strategy != "extension":
        raise ValueError(f"Unknown MIME detection strategy: {strategy}")

    if image.path.suffix.lower() == ".png":
        return "image/png"
    return "image/jpeg"

def build_data_url(image_bytes: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
