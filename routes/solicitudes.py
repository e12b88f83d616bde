"""
Solicitudes de adopción routes.

- Staff (ADMIN, VOLUNTARIO) consulta y cambia el estado de las solicitudes.
- ADOPTANTE (y el staff) crea solicitudes a su nombre.
- Cualquier usuario autenticado consulta las suyas en /mias.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from models.solicitudes import Solicitud, SolicitudCreate, SolicitudUpdate, EstadoSolicitud
from models.usuarios import Role
from models.common import (
    create_success_response,
    create_list_response,
    create_delete_response,
)
from core.exceptions import AppException, DatabaseException
from services.solicitud_service import SolicitudService
from dependencies import get_solicitud_service
from auth import (
    TokenIdentity,
    get_current_identity,
    require_any_role,
    STAFF_ROLES,
    SOLICITANTE_ROLES,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/solicitudes", tags=["solicitudes"])


@router.get("")
def listar_solicitudes(
    estado: Optional[EstadoSolicitud] = Query(None, description="Filtrar por estado"),
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: SolicitudService = Depends(get_solicitud_service),
):
    """List active solicitudes, most recent first."""
    try:
        return create_list_response(service.get_solicitudes(estado=estado))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing solicitudes: {e}", exc_info=True)
        raise DatabaseException("Error al listar solicitudes")


@router.get("/mias")
def mis_solicitudes(
    current_user: TokenIdentity = Depends(get_current_identity),
    service: SolicitudService = Depends(get_solicitud_service),
):
    """Solicitudes activas del usuario autenticado."""
    try:
        return create_list_response(service.get_solicitudes_usuario(current_user.id))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing solicitudes for usuario {current_user.id}: {e}", exc_info=True)
        raise DatabaseException("Error al listar sus solicitudes")


@router.get("/{solicitud_id}", response_model=Solicitud)
def obtener_solicitud(
    solicitud_id: int,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: SolicitudService = Depends(get_solicitud_service),
):
    try:
        return service.get_solicitud(solicitud_id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error getting solicitud {solicitud_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener solicitud")


@router.post("", status_code=status.HTTP_201_CREATED)
def crear_solicitud(
    payload: SolicitudCreate,
    current_user: TokenIdentity = Depends(require_any_role(*SOLICITANTE_ROLES)),
    service: SolicitudService = Depends(get_solicitud_service),
):
    """
    Create an adoption request for the authenticated user.

    Returns:
        La solicitud creada, siempre en estado PENDIENTE

    Errors:
        404 si el animal no existe, 400 si no está disponible
    """
    try:
        solicitud = service.create_solicitud(current_user.id, payload)
        return create_success_response("Solicitud creada correctamente", solicitud)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error creating solicitud: {e}", exc_info=True)
        raise DatabaseException("Error al crear solicitud")


@router.put("/{solicitud_id}")
def actualizar_solicitud(
    solicitud_id: int,
    payload: SolicitudUpdate,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: SolicitudService = Depends(get_solicitud_service),
):
    """Cambia el estado de una solicitud (APROBADA, RECHAZADA, ...)."""
    try:
        solicitud = service.update_solicitud(solicitud_id, payload)
        return create_success_response("Solicitud actualizada correctamente", solicitud)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error updating solicitud {solicitud_id}: {e}", exc_info=True)
        raise DatabaseException("Error al actualizar solicitud")


@router.delete("/{solicitud_id}")
def desactivar_solicitud(
    solicitud_id: int,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: SolicitudService = Depends(get_solicitud_service),
):
    """Soft delete (activo = false)."""
    try:
        service.deactivate_solicitud(solicitud_id)
        return create_delete_response(
            message="Solicitud dada de baja correctamente",
            deleted_id=solicitud_id,
            soft_delete=True
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error deactivating solicitud {solicitud_id}: {e}", exc_info=True)
        raise DatabaseException("Error al dar de baja solicitud")
