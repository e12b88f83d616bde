"""
Tareas de voluntarios.

Consulta para ADMIN y VOLUNTARIO; gestión solo para ADMIN.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from models.tareas import Tarea, TareaCreate, TareaUpdate
from models.usuarios import Role
from models.common import (
    create_success_response,
    create_list_response,
    create_delete_response,
)
from core.exceptions import AppException, DatabaseException
from services.tarea_service import TareaService
from dependencies import get_tarea_service
from auth import require_any_role, STAFF_ROLES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tareas", tags=["tareas"])


@router.get("")
def listar_tareas(
    estado: Optional[str] = Query(None, description="Filtrar por estado"),
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: TareaService = Depends(get_tarea_service),
):
    try:
        return create_list_response(service.get_tareas(estado=estado))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing tareas: {e}", exc_info=True)
        raise DatabaseException("Error al listar tareas")


@router.get("/voluntario/{id_voluntario}")
def tareas_de_voluntario(
    id_voluntario: int,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: TareaService = Depends(get_tarea_service),
):
    try:
        return create_list_response(service.get_tareas_voluntario(id_voluntario))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing tareas for voluntario {id_voluntario}: {e}", exc_info=True)
        raise DatabaseException("Error al listar tareas del voluntario")


@router.get("/{tarea_id}", response_model=Tarea)
def obtener_tarea(
    tarea_id: int,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: TareaService = Depends(get_tarea_service),
):
    try:
        return service.get_tarea(tarea_id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error getting tarea {tarea_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener tarea")


@router.post("", status_code=status.HTTP_201_CREATED)
def crear_tarea(
    payload: TareaCreate,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: TareaService = Depends(get_tarea_service),
):
    """
    Create a task (ADMIN ONLY).

    Errors:
        404 si `id_voluntario` no existe
    """
    try:
        tarea = service.create_tarea(payload)
        return create_success_response("Tarea creada correctamente", tarea)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error creating tarea: {e}", exc_info=True)
        raise DatabaseException("Error al crear tarea")


@router.put("/{tarea_id}")
def actualizar_tarea(
    tarea_id: int,
    payload: TareaUpdate,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: TareaService = Depends(get_tarea_service),
):
    try:
        tarea = service.update_tarea(tarea_id, payload)
        return create_success_response("Tarea actualizada correctamente", tarea)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error updating tarea {tarea_id}: {e}", exc_info=True)
        raise DatabaseException("Error al actualizar tarea")


@router.delete("/{tarea_id}")
def eliminar_tarea(
    tarea_id: int,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: TareaService = Depends(get_tarea_service),
):
    try:
        service.delete_tarea(tarea_id)
        return create_delete_response(
            message="Tarea eliminada correctamente",
            deleted_id=tarea_id,
            soft_delete=False
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error deleting tarea {tarea_id}: {e}", exc_info=True)
        raise DatabaseException("Error al eliminar tarea")
