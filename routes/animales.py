"""
Animal routes.

Consulta pública; altas, cambios y bajas solo para ADMIN y VOLUNTARIO.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from models.animales import Animal, AnimalCreate, AnimalUpdate, EstadoAnimal
from models.common import (
    create_success_response,
    create_list_response,
    create_delete_response,
)
from core.exceptions import AppException, DatabaseException
from services.animal_service import AnimalService
from dependencies import get_animal_service
from auth import require_any_role, STAFF_ROLES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/animales", tags=["animales"])


@router.get("")
def listar_animales(
    estado: Optional[EstadoAnimal] = Query(None, description="Filtrar por estado"),
    service: AnimalService = Depends(get_animal_service),
):
    """
    List active animals (public).

    Los animales dados de baja no aparecen en el listado.
    """
    try:
        return create_list_response(service.get_animales(estado=estado))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing animales: {e}", exc_info=True)
        raise DatabaseException("Error al listar animales")


@router.get("/{animal_id}", response_model=Animal)
def obtener_animal(
    animal_id: int,
    service: AnimalService = Depends(get_animal_service),
):
    """Get an animal by ID (public), aunque esté dado de baja."""
    try:
        return service.get_animal(animal_id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error getting animal {animal_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener animal")


@router.post("", status_code=status.HTTP_201_CREATED)
def crear_animal(
    payload: AnimalCreate,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: AnimalService = Depends(get_animal_service),
):
    try:
        animal = service.create_animal(payload)
        return create_success_response("Animal registrado correctamente", animal)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error creating animal: {e}", exc_info=True)
        raise DatabaseException("Error al registrar animal")


@router.put("/{animal_id}")
def actualizar_animal(
    animal_id: int,
    payload: AnimalUpdate,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: AnimalService = Depends(get_animal_service),
):
    """Update the fields sent in the body; omitted fields keep their value."""
    try:
        animal = service.update_animal(animal_id, payload)
        return create_success_response("Animal actualizado correctamente", animal)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error updating animal {animal_id}: {e}", exc_info=True)
        raise DatabaseException("Error al actualizar animal")


@router.delete("/{animal_id}")
def desactivar_animal(
    animal_id: int,
    current_user=Depends(require_any_role(*STAFF_ROLES)),
    service: AnimalService = Depends(get_animal_service),
):
    """Soft delete (activo = false)."""
    try:
        service.deactivate_animal(animal_id)
        return create_delete_response(
            message="Animal dado de baja correctamente",
            deleted_id=animal_id,
            soft_delete=True
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error deactivating animal {animal_id}: {e}", exc_info=True)
        raise DatabaseException("Error al dar de baja animal")
