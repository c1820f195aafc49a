# inventory_backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    APP_TITLE: str = "Inventory Management API"
    API_PREFIX: str = "/api"

    # Bind address for the uvicorn server
    HOST: str = "127.0.0.1"
    PORT: int = 3001

    # Admin UI origin (React dev server by default)
    FRONTEND_URL: str = "http://localhost:3000"

    # Load the five demo products on startup
    SEED_DEMO_DATA: bool = True

    # Rows committed per pandas chunk during CSV import
    IMPORT_CHUNK_SIZE: int = 500
    EXPORT_FILENAME: str = "products.csv"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
