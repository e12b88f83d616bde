"""
Repositorio para el historial médico de los animales.
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import HistorialMedicoORM


class HistorialRepository(BaseRepository[HistorialMedicoORM]):
    """Repositorio del historial médico (sin borrado lógico)."""

    resource_name = "Historial"

    def __init__(self, db: Session):
        super().__init__(db, HistorialMedicoORM)

    def find_by_animal(self, animal_id: int) -> List[HistorialMedicoORM]:
        """Entradas de un animal, de la más reciente a la más antigua."""
        return self.get_all(order_by="fecha", order_desc=True, animal_id=animal_id)
