"""FastAPI application entry point."""

from presentation.app import create_app
from infrastructure.config import get_settings


settings = get_settings()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
