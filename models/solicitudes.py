from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum


class EstadoSolicitud(str, Enum):
    PENDIENTE = "PENDIENTE"
    APROBADA = "APROBADA"
    RECHAZADA = "RECHAZADA"
    COMPLETADA = "COMPLETADA"
    CANCELADA = "CANCELADA"


# Grafo de transiciones previsto para el ciclo de vida de una solicitud.
# Solo se valida con ENFORCE_SOLICITUD_TRANSITIONS=true.
TRANSICIONES_SOLICITUD: dict[EstadoSolicitud, frozenset[EstadoSolicitud]] = {
    EstadoSolicitud.PENDIENTE: frozenset({
        EstadoSolicitud.APROBADA,
        EstadoSolicitud.RECHAZADA,
        EstadoSolicitud.CANCELADA,
    }),
    EstadoSolicitud.APROBADA: frozenset({
        EstadoSolicitud.COMPLETADA,
        EstadoSolicitud.CANCELADA,
    }),
    EstadoSolicitud.RECHAZADA: frozenset(),
    EstadoSolicitud.COMPLETADA: frozenset(),
    EstadoSolicitud.CANCELADA: frozenset(),
}


class SolicitudCreate(BaseModel):
    """El solicitante se toma del token; toda solicitud nace PENDIENTE."""
    id_animal: int = Field(..., ge=1)
    observaciones: Optional[str] = None


class SolicitudUpdate(BaseModel):
    estado: EstadoSolicitud
    observaciones: Optional[str] = None


class Solicitud(BaseModel):
    id_solicitud: int
    id_usuario: int
    id_animal: int
    observaciones: Optional[str] = None
    estado: EstadoSolicitud
    activo: bool = True
    fecha_solicitud: Optional[datetime] = None
    nombre_usuario: Optional[str] = None
    nombre_animal: Optional[str] = None
