"""
Servicio del historial médico de los animales.
"""

from typing import List, Dict, Any
import logging

from services.base_service import BaseService
from repositories.historial_repository import HistorialRepository
from repositories.animal_repository import AnimalRepository
from database.models import HistorialMedicoORM
from models.historial import HistorialCreate, HistorialUpdate, Historial
from core.utils import apply_updates
from utils.datetime_utils import local_today

logger = logging.getLogger(__name__)


class HistorialService(BaseService[HistorialMedicoORM, HistorialRepository]):
    """Entradas del historial médico (borrado físico)."""

    def __init__(
        self,
        repository: HistorialRepository,
        animal_repository: AnimalRepository
    ):
        """
        Args:
            repository: HistorialRepository instance
            animal_repository: AnimalRepository para validar el animal referido
        """
        super().__init__(repository)
        self.animal_repository = animal_repository

    def get_historiales(self) -> List[Dict[str, Any]]:
        entradas = self.repository.get_all(order_by="fecha", order_desc=True)
        return [self._to_response_dict(h) for h in entradas]

    def get_historial(self, historial_id: int) -> Historial:
        """
        Raises:
            NotFoundException: If entry not found
        """
        return self._to_response_model(self.repository.get_by_id_or_fail(historial_id))

    def get_historial_animal(self, animal_id: int) -> List[Dict[str, Any]]:
        """
        Historial completo de un animal.

        Raises:
            NotFoundException: If animal not found
        """
        self.animal_repository.get_by_id_or_fail(animal_id)
        entradas = self.repository.find_by_animal(animal_id)
        return [self._to_response_dict(h) for h in entradas]

    def create_historial(self, data: HistorialCreate) -> Historial:
        """
        Registra una entrada médica; sin `fecha` se usa la de hoy.

        Raises:
            NotFoundException: If the animal does not exist
        """
        self.animal_repository.get_by_id_or_fail(data.animal_id)

        payload = data.model_dump()
        if payload.get("fecha") is None:
            payload["fecha"] = local_today()

        created = self.repository.create(HistorialMedicoORM(**payload))
        self.repository.commit()

        logger.info(f"Historial {created.id} registrado para animal {created.animal_id}")

        return self._to_response_model(created)

    def update_historial(self, historial_id: int, data: HistorialUpdate) -> Historial:
        """
        Raises:
            NotFoundException: If entry or new animal not found
        """
        entrada = self.repository.get_by_id_or_fail(historial_id)
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("animal_id") is not None:
            self.animal_repository.get_by_id_or_fail(update_data["animal_id"])

        apply_updates(entrada, update_data)

        updated = self.repository.update(entrada)
        self.repository.commit()

        logger.info(f"Historial {historial_id} actualizado")

        return self._to_response_model(updated)

    def delete_historial(self, historial_id: int) -> None:
        self.delete(historial_id, hard=True)

    def _to_response_model(self, entrada: HistorialMedicoORM) -> Historial:
        return Historial(
            id_historial=entrada.id,
            animal_id=entrada.animal_id,
            fecha=entrada.fecha,
            diagnostico=entrada.diagnostico,
            tratamiento=entrada.tratamiento,
            veterinario=entrada.veterinario,
            notas=entrada.notas,
            nombre_animal=entrada.animal.nombre if entrada.animal else None,
        )

    def _to_response_dict(self, entrada: HistorialMedicoORM) -> Dict[str, Any]:
        return self._to_response_model(entrada).model_dump(mode="json")
