"""
Repositorio para la entidad Usuario.
Gestiona todas las operaciones de base de datos relacionadas con los usuarios.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, Query

from repositories.base_repository import BaseRepository
from database.models import UsuarioORM
from core.exceptions import DatabaseException
import logging

logger = logging.getLogger(__name__)

ACTIVO = "ACTIVO"
INACTIVO = "INACTIVO"


class UsuarioRepository(BaseRepository[UsuarioORM]):
    """Repositorio para la gestión de entidades de usuario.

    El borrado lógico de usuarios es `estado = INACTIVO`.
    """

    resource_name = "Usuario"

    def __init__(self, db: Session):
        """
        Inicializa el repositorio de usuarios.

        Args:
            db: SQLAlchemy session
        """
        super().__init__(db, UsuarioORM)

    @property
    def supports_soft_delete(self) -> bool:
        return True

    def _filter_active(self, query: Query) -> Query:
        return query.filter(UsuarioORM.estado == ACTIVO)

    def _mark_inactive(self, entity: UsuarioORM) -> None:
        entity.estado = INACTIVO

    def is_active(self, entity: UsuarioORM) -> bool:
        return entity.estado == ACTIVO

    def find_by_correo(self, correo: str) -> Optional[UsuarioORM]:
        """
        Busca un usuario por correo (comparación exacta, tal como se guardó).

        Args:
            correo: correo del usuario

        Returns:
            Usuario ORM instance or None si no se encuentra
        """
        try:
            return self.db.query(UsuarioORM).filter(
                UsuarioORM.correo == correo
            ).one_or_none()
        except Exception as e:
            logger.error(f"Error finding usuario by correo {correo}: {e}")
            raise DatabaseException("Error al buscar usuario por correo")

    def find_by_rol(
        self,
        rol: str,
        include_inactive: bool = False
    ) -> List[UsuarioORM]:
        """
        Busca todos los usuarios con un rol específico.

        Args:
            rol: Rol a filtrar (ADMIN, VOLUNTARIO, ADOPTANTE, VISITANTE)
            include_inactive: Si se incluyen usuarios INACTIVO

        Returns:
            Lista de usuarios con el rol especificado
        """
        return self.get_all(include_inactive=include_inactive, order_by="nombre", rol=rol)

    def exists_correo(
        self,
        correo: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """
        Verifica si un correo ya está registrado.

        Args:
            correo: Correo a verificar
            exclude_id: ID de usuario opcional para excluir de la verificación (para actualizaciones)

        Returns:
            True si el correo existe, False en caso contrario
        """
        try:
            query = self.db.query(UsuarioORM).filter(
                UsuarioORM.correo == correo
            )

            if exclude_id is not None:
                query = query.filter(UsuarioORM.id != exclude_id)

            return query.first() is not None
        except Exception as e:
            logger.error(f"Error checking if correo exists {correo}: {e}")
            raise DatabaseException("Error al verificar correo")
