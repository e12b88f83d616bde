"""
Service for Animal business logic.

Handles all business operations related to the shelter's animals.
"""

from typing import List, Optional, Dict, Any
import logging

from services.base_service import BaseService
from repositories.animal_repository import AnimalRepository
from database.models import AnimalORM
from models.animales import AnimalCreate, AnimalUpdate, Animal, EstadoAnimal
from core.utils import enum_to_value, apply_updates
from utils.datetime_utils import local_today

logger = logging.getLogger(__name__)


class AnimalService(BaseService[AnimalORM, AnimalRepository]):
    """Service for managing animal business logic."""

    def __init__(self, repository: AnimalRepository):
        super().__init__(repository)

    def get_animales(self, estado: Optional[EstadoAnimal] = None) -> List[Dict[str, Any]]:
        """
        Lista los animales activos.

        Args:
            estado: Filtrar por estado (optional)

        Returns:
            Lista de animales serializados
        """
        animales = self.repository.find_activos(estado=enum_to_value(estado))
        return [self._to_response_dict(a) for a in animales]

    def get_animal(self, animal_id: int) -> Animal:
        """
        Get animal by ID, aunque esté dado de baja.

        Raises:
            NotFoundException: If animal not found
        """
        animal = self.repository.get_by_id_or_fail(animal_id)
        return self._to_response_model(animal)

    def create_animal(self, animal_data: AnimalCreate) -> Animal:
        """
        Registra un animal nuevo (activo).

        Args:
            animal_data: Datos del animal

        Returns:
            Created animal
        """
        data = animal_data.model_dump()
        if data.get("fecha_ingreso") is None:
            data["fecha_ingreso"] = local_today()

        animal_orm = AnimalORM(**{k: enum_to_value(v) for k, v in data.items()})
        animal_orm.activo = True

        created = self.repository.create(animal_orm)
        self.repository.commit()

        logger.info(f"Animal {created.id} ({created.nombre}) registrado")

        return self._to_response_model(created)

    def update_animal(self, animal_id: int, animal_update: AnimalUpdate) -> Animal:
        """
        Actualiza los campos enviados de un animal.

        Raises:
            NotFoundException: If animal not found
            BusinessException: If the animal was deactivated
        """
        animal = self.repository.get_by_id_or_fail(animal_id)
        self.validate_active(animal)

        apply_updates(animal, animal_update.model_dump(exclude_unset=True))

        updated = self.repository.update(animal)
        self.repository.commit()

        logger.info(f"Animal {animal_id} actualizado")

        return self._to_response_model(updated)

    def deactivate_animal(self, animal_id: int) -> None:
        """
        Soft delete (activo = false). Sigue siendo consultable por ID.

        Raises:
            NotFoundException: If animal not found
            BusinessException: If already deactivated
        """
        self.delete(animal_id, hard=False)

    def _to_response_model(self, animal: AnimalORM) -> Animal:
        return Animal(
            id_animal=animal.id,
            nombre=animal.nombre,
            especie=animal.especie,
            raza=animal.raza,
            edad=animal.edad,
            sexo=animal.sexo,
            descripcion=animal.descripcion,
            estado=animal.estado,
            foto_url=animal.foto_url,
            fecha_ingreso=animal.fecha_ingreso,
            activo=bool(animal.activo),
        )

    def _to_response_dict(self, animal: AnimalORM) -> Dict[str, Any]:
        return self._to_response_model(animal).model_dump(mode="json")
