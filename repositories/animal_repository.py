"""
Repositorio para la entidad Animal.
Gestiona todas las operaciones de base de datos relacionadas con los animales del refugio.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import AnimalORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)


class AnimalRepository(BaseRepository[AnimalORM]):
    """Repositorio para la entidad Animal."""

    resource_name = "Animal"

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de animales.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, AnimalORM)

    def find_activos(self, estado: Optional[str] = None) -> List[AnimalORM]:
        """
        Lista los animales activos, opcionalmente filtrados por estado.

        Args:
            estado: DISPONIBLE, ADOPTADO, EN_CUARENTENA o RESERVADO

        Returns:
            Animales ordenados por nombre
        """
        return self.get_all(order_by="nombre", estado=estado)

    def get_for_update(self, id: int) -> Optional[AnimalORM]:
        """
        Lee un animal bloqueando su fila hasta el fin de la transacción
        (SELECT ... FOR UPDATE; SQLite lo ignora).
        """
        try:
            return (
                self.db.query(AnimalORM)
                .filter(AnimalORM.id == id)
                .with_for_update()
                .one_or_none()
            )
        except Exception as e:
            logger.error(f"Error locking animal {id}: {e}")
            raise DatabaseException("Error al obtener animal")

    @staticmethod
    def is_available(animal: Optional[AnimalORM]) -> bool:
        """Un animal está disponible si existe, está activo y su estado es DISPONIBLE."""
        return animal is not None and bool(animal.activo) and animal.estado == "DISPONIBLE"
