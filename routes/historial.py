"""
Historial médico routes (ADMIN y VOLUNTARIO).
"""

from fastapi import APIRouter, Depends, status
import logging

from models.historial import Historial, HistorialCreate, HistorialUpdate
from models.common import (
    create_success_response,
    create_list_response,
    create_delete_response,
)
from core.exceptions import AppException, DatabaseException
from services.historial_service import HistorialService
from dependencies import get_historial_service
from auth import require_any_role, STAFF_ROLES

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/historial",
    tags=["historial"],
    dependencies=[Depends(require_any_role(*STAFF_ROLES))],
)


@router.get("")
def listar_historial(service: HistorialService = Depends(get_historial_service)):
    try:
        return create_list_response(service.get_historiales())
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing historial: {e}", exc_info=True)
        raise DatabaseException("Error al listar historial médico")


@router.get("/animal/{animal_id}")
def historial_de_animal(
    animal_id: int,
    service: HistorialService = Depends(get_historial_service),
):
    """Historial completo de un animal, del más reciente al más antiguo."""
    try:
        return create_list_response(service.get_historial_animal(animal_id))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing historial for animal {animal_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener historial del animal")


@router.get("/{historial_id}", response_model=Historial)
def obtener_historial(
    historial_id: int,
    service: HistorialService = Depends(get_historial_service),
):
    try:
        return service.get_historial(historial_id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error getting historial {historial_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener historial médico")


@router.post("", status_code=status.HTTP_201_CREATED)
def crear_historial(
    payload: HistorialCreate,
    service: HistorialService = Depends(get_historial_service),
):
    """
    Registra una entrada médica.

    Errors:
        404 si el animal no existe
    """
    try:
        entrada = service.create_historial(payload)
        return create_success_response("Historial médico registrado correctamente", entrada)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error creating historial: {e}", exc_info=True)
        raise DatabaseException("Error al registrar historial médico")


@router.put("/{historial_id}")
def actualizar_historial(
    historial_id: int,
    payload: HistorialUpdate,
    service: HistorialService = Depends(get_historial_service),
):
    try:
        entrada = service.update_historial(historial_id, payload)
        return create_success_response("Historial médico actualizado correctamente", entrada)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error updating historial {historial_id}: {e}", exc_info=True)
        raise DatabaseException("Error al actualizar historial médico")


@router.delete("/{historial_id}")
def eliminar_historial(
    historial_id: int,
    service: HistorialService = Depends(get_historial_service),
):
    """Hard delete."""
    try:
        service.delete_historial(historial_id)
        return create_delete_response(
            message="Historial médico eliminado correctamente",
            deleted_id=historial_id,
            soft_delete=False
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error deleting historial {historial_id}: {e}", exc_info=True)
        raise DatabaseException("Error al eliminar historial médico")
