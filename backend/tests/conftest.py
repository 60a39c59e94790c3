"""
Shared pytest fixtures and configuration for all tests
"""
import pytest
import sys
from pathlib import Path

# Add backend to Python path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import httpx

JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00"
PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def upload_dir(tmp_path):
    """Scratch directory for uploads, not created yet"""
    return tmp_path / "uploads"


@pytest.fixture
def make_settings(upload_dir):
    """Build Settings without reading any local .env file"""
    from config.settings import Settings

    def _make(**overrides):
        values = {
            "UPLOAD_DIR": upload_dir,
            "OPENAI_API_KEY": "sk-test",
            "FAL_KEY": "fal-test",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


@pytest.fixture
def jpeg_bytes():
    """A 500 KB payload with a JPEG header"""
    return JPEG_HEADER + b"\x00" * (500 * 1024)


@pytest.fixture
def png_bytes():
    return PNG_HEADER + b"\x01" * 2048


@pytest.fixture
def make_uploaded_image(tmp_path):
    """Write bytes to disk and describe them as a stored upload"""
    from models.fitness_image import UploadedImage

    def _make(content: bytes, filename: str = "photo.jpg", content_type: str = "image/jpeg"):
        path = tmp_path / f"stored{Path(filename).suffix}"
        path.write_bytes(content)
        return UploadedImage(
            path=path,
            original_filename=filename,
            content_type=content_type,
            size=len(content)
        )

    return _make


@pytest.fixture
def make_client(make_settings):
    """Provide a FastAPI test client wired to a mocked provider transport"""
    from fastapi.testclient import TestClient
    from main import create_app
    from services.image_provider import create_image_provider

    def _make(handler=None, provider=None, **setting_overrides):
        app_settings = make_settings(**setting_overrides)
        if provider is None:
            transport = httpx.MockTransport(handler) if handler else None
            provider = create_image_provider(app_settings, transport=transport)
        return TestClient(create_app(app_settings, provider))

    return _make
