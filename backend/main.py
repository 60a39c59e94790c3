from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# Only load .env file if not running on Heroku
if not os.getenv("DYNO"):  # DYNO is a Heroku-specific environment variable
    from dotenv import load_dotenv
    load_dotenv()
    print("🔧 Local development: Loaded .env file")
else:
    print("☁️ Running on Heroku: Using environment variables")

from api import fitness_image
from config.settings import Settings
from core.cors import add_cors
from core.errors import FitnessImageError
from models.fitness_image import ErrorResponse, HealthResponse
from services.image_provider import ImageProvider, create_image_provider
from services.upload_service import UploadService

def print_startup_banner(settings: Settings, provider: ImageProvider):
    print("")
    print("🚀 ================================")
    print("🚀 FITNESS BACKEND SERVER STARTED")
    print("🚀 ================================")
    print(f"🚀 Server running on port {settings.PORT}")
    print(f"🚀 Image provider: {provider.display_name}")
    print(f"🚀 Health check: http://localhost:{settings.PORT}/health")
    print(f"🚀 Generate endpoint: http://localhost:{settings.PORT}/generate-fitness-image")
    print("🚀 ================================")
    print("")
    if not provider.is_configured:
        print(f"⚠️ {provider.display_name} API key not set, generation requests will fail upstream")

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    try:
        UploadService(settings).ensure_upload_dir()
        print("✅ Uploads directory ready")
    except OSError as e:
        print(f"❌ Error creating uploads directory: {e}")

    print_startup_banner(settings, app.state.image_provider)
    yield

def create_app(settings: Optional[Settings] = None, image_provider: Optional[ImageProvider] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.image_provider = image_provider or create_image_provider(settings)

    add_cors(app, settings.CORS_ALLOW_ORIGIN)

    @app.exception_handler(FitnessImageError)
    async def fitness_image_error_handler(request: Request, exc: FitnessImageError):
        print(f"❌ Request rejected: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, details=exc.details).model_dump(exclude_none=True)
        )

    app.include_router(fitness_image.router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        now = datetime.now(timezone.utc)
        return HealthResponse(
            status="Server is running!",
            timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        )

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.settings.HOST, port=app.state.settings.PORT)
