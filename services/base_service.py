"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic
import logging

from core.exceptions import BusinessException

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar('T')  # ORM Model
R = TypeVar('R')  # Repository


class BaseService(Generic[T, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.
    """

    def __init__(self, repository: R):
        """
        Inicializa el servicio.

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository

    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found
        """
        return self.repository.get_by_id_or_fail(id)

    def delete(self, id: int, hard: bool = False) -> None:
        """
        Elimina una entidad.

        Args:
            id: ID de la entidad
            hard: Si True, realiza una eliminación física; de lo contrario, una eliminación suave

        Raises:
            NotFoundException: If entity is not found
            BusinessException: Si ya estaba dada de baja
        """
        entity = self.get_by_id_or_fail(id)

        if not hard and not self.repository.is_active(entity):
            raise BusinessException(f"{self.repository.resource_name} ya está desactivado")

        self.repository.delete(entity, hard=hard)
        self.repository.commit()

        logger.info(
            f"{self.repository.resource_name} {id} "
            f"{'eliminado' if hard else 'desactivado'}"
        )

    def validate_active(self, entity: T) -> None:
        """
        Valida que una entidad no esté dada de baja.

        Raises:
            BusinessException: If entity is inactive
        """
        if not self.repository.is_active(entity):
            raise BusinessException("El registro está desactivado y no puede ser utilizado")
