import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobboard.config import get_settings
from jobboard.infrastructure.database import engine, initialize_database
from jobboard.interfaces.api.errors import register_exception_handlers
from jobboard.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    logging.getLogger("jobboard").setLevel(settings.log_level.upper())

    app = FastAPI(title="Job Board Messaging API", lifespan=lifespan)

    # Autoriza peticiones desde el cliente web (Vite en localhost:5173 por defecto).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
