# inventory_backend/main.py
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import uvicorn

from inventory_backend.config import settings
from inventory_backend.database import InventoryDB, init_db
from inventory_backend.routes.products import router as products_router
from inventory_backend.utils.logger import setup_logger

load_dotenv()

logger = setup_logger()


def create_app(db: Optional[InventoryDB] = None) -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE, version="1.0.0")

    # The inventory lives as long as the app instance
    app.state.db = db if db is not None else init_db()

    # CORS Configuration
    origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Router registration
    app.include_router(products_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def read_root():
        return {"message": "Inventory backend is running!"}

    logger.info(f"API available at {settings.API_PREFIX}/products")
    return app


app = create_app()


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
