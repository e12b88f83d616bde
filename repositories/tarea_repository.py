"""
Repositorio para las tareas de voluntarios.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import TareaVoluntarioORM


class TareaRepository(BaseRepository[TareaVoluntarioORM]):
    """Repositorio de tareas (sin borrado lógico)."""

    resource_name = "Tarea"

    def __init__(self, db: Session):
        super().__init__(db, TareaVoluntarioORM)

    def find_by_estado(self, estado: Optional[str] = None) -> List[TareaVoluntarioORM]:
        return self.get_all(order_by="fecha_limite", estado=estado)

    def find_by_voluntario(self, id_voluntario: int) -> List[TareaVoluntarioORM]:
        return self.get_all(order_by="fecha_limite", id_voluntario=id_voluntario)
