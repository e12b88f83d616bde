"""
Modelos comunes de respuesta para la API.

Estos modelos proporcionan respuestas consistentes y estandarizadas
para todos los endpoints de la API
"""
from typing import Optional, List, Any
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SuccessResponse(BaseModel):
    """Respuesta estándar exitosa."""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo de la operación")
    data: Optional[Any] = Field(None, description="Datos de respuesta")
    timestamp: datetime = Field(default_factory=_utcnow, description="Timestamp de la respuesta")


class ListResponse(BaseModel):
    """Respuesta estándar para listados."""
    success: bool = Field(True, description="Indica si la operación fue exitosa")
    data: List[Any] = Field(..., description="Registros encontrados")


class ErrorResponse(BaseModel):
    """Respuesta estándar de error."""
    success: bool = Field(False, description="Indica que la operación falló")
    error: str = Field(..., description="Tipo de error")
    message: str = Field(..., description="Mensaje descriptivo del error")
    details: Optional[dict] = Field(None, description="Detalles adicionales del error")
    timestamp: datetime = Field(default_factory=_utcnow, description="Timestamp de la respuesta")


class DeleteResponse(BaseModel):
    """Respuesta estándar para operaciones de eliminación."""
    success: bool = Field(True, description="Indica si la eliminación fue exitosa")
    message: str = Field(..., description="Mensaje descriptivo")
    deleted_id: int = Field(..., description="ID del registro eliminado")
    soft_delete: bool = Field(True, description="Indica si fue soft delete (true) o hard delete (false)")
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")
    timestamp: datetime = Field(default_factory=_utcnow)


def create_success_response(message: str, data: Any = None) -> dict:
    """Helper para crear respuestas exitosas."""
    return SuccessResponse(message=message, data=data).model_dump(mode="json")


def create_list_response(items: List[Any]) -> dict:
    """Helper para crear respuestas de listado."""
    return ListResponse(data=items).model_dump(mode="json")


def create_error_response(error: str, message: str, details: Optional[dict] = None) -> dict:
    """Helper para crear respuestas de error (serializable a JSON)."""
    return ErrorResponse(error=error, message=message, details=details or None).model_dump(mode="json")


def create_delete_response(message: str, deleted_id: int, soft_delete: bool = True) -> dict:
    """Helper para crear respuestas de eliminación."""
    return DeleteResponse(
        message=message,
        deleted_id=deleted_id,
        soft_delete=soft_delete
    ).model_dump(mode="json")
