from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import uvicorn
import logging

from config import settings, configure_logging
from core.exceptions import AppException, TooManyRequestsException
from models.common import create_error_response, HealthCheckResponse
from routes import (
    auth_router,
    usuarios_router,
    animales_router,
    historial_router,
    tareas_router,
    solicitudes_router,
)
from database.db import create_tables, engine, get_database_url

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    logger.info(f"Base de datos: {get_database_url()}")
    try:
        create_tables()
    except SQLAlchemyError as e:
        logger.warning(f"No se pudieron crear tablas en la base de datos: {e}")
    yield
    # Shutdown
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="API REST para la gestión de un refugio de animales y sus adopciones.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== Manejo de errores ====================

@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    """Traduce cualquier AppException a la respuesta de error estándar."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    headers = None
    if isinstance(exc, TooManyRequestsException) and exc.details.get("retry_after"):
        headers = {"Retry-After": str(exc.details["retry_after"])}
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.error_name, exc.message, exc.details),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Errores de validación del cuerpo o de los parámetros: 400."""
    return JSONResponse(
        status_code=400,
        content=create_error_response(
            "Validation",
            "Datos de entrada inválidos",
            {"errors": jsonable_encoder(exc.errors())}
        ),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error no controlado en {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=create_error_response("InternalServerError", "Error interno del servidor"),
    )


# ==================== Rutas ====================

@app.get("/")
def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": f"{settings.app_name} - Refugio de Animales",
        "version": settings.app_version,
        "status": "active",
        "environment": "production" if settings.is_production else "development",
        "docs": "/docs",
        "redoc": "/redoc"
    }


app.include_router(auth_router)
app.include_router(usuarios_router)
app.include_router(animales_router)
app.include_router(historial_router)
app.include_router(tareas_router)
app.include_router(solicitudes_router)


@app.get("/health", response_model=HealthCheckResponse)
def health_check():
    """Health check endpoint con verificación de base de datos."""
    db_status = "unknown"
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Health check: Error de conexión a BD: {e}")
        db_status = "disconnected"

    return HealthCheckResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        service=settings.app_name,
        version=settings.app_version,
        database=db_status,
        environment="production" if settings.is_production else "development"
    )


if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
