"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades
"""

from typing import TypeVar, Generic, List, Optional, Type, Any
from sqlalchemy.orm import Session, Query
from sqlalchemy import desc, asc
import logging

from core.exceptions import NotFoundException, DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar

    Esta clase debe ser heredada por repositorios de entidades específicos.
    Las entidades con borrado lógico usan la columna booleana `activo`;
    las que lo marcan de otra forma sobrescriben `_filter_active` y
    `_mark_inactive`.
    """

    # Nombre legible de la entidad para mensajes de error
    resource_name: str = "Registro"

    def __init__(self, db: Session, model_class: Type[T]):
        """
        Inicializa el repositorio.

        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
        """
        self.db = db
        self.model_class = model_class

    # ==================== Borrado lógico ====================

    @property
    def supports_soft_delete(self) -> bool:
        return hasattr(self.model_class, "activo")

    def _filter_active(self, query: Query) -> Query:
        """Restringe `query` a los registros activos."""
        if self.supports_soft_delete:
            return query.filter(self.model_class.activo.is_(True))
        return query

    def _mark_inactive(self, entity: T) -> None:
        entity.activo = False

    def is_active(self, entity: T) -> bool:
        """Indica si la entidad sigue activa (siempre True si no hay borrado lógico)."""
        return bool(getattr(entity, "activo", True))

    # ==================== Lectura ====================

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID, esté activa o no.

        Args:
            id: ID de la entidad

        Returns:
            The entity or None if not found
        """
        try:
            return self.db.get(self.model_class, id)
        except Exception as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error al obtener {self.resource_name.lower()}")

    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.

        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.get_by_id(id)
        if not entity:
            raise NotFoundException(resource=self.resource_name, identifier=id)
        return entity

    def get_all(
        self,
        include_inactive: bool = False,
        order_by: Optional[str] = None,
        order_desc: bool = False,
        **filters: Any
    ) -> List[T]:
        """
        Obtiene todas las entidades que coinciden con los filtros.

        Args:
            include_inactive: Si se incluyen los registros dados de baja
            order_by: Field name to order by
            order_desc: Whether to order descending
            **filters: Igualdades adicionales (se ignoran los valores None)

        Returns:
            List of entities
        """
        try:
            query = self.db.query(self.model_class)

            if not include_inactive:
                query = self._filter_active(query)

            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)

            if order_by and hasattr(self.model_class, order_by):
                order_field = getattr(self.model_class, order_by)
                query = query.order_by(desc(order_field) if order_desc else asc(order_field))

            return query.all()
        except Exception as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al listar {self.resource_name.lower()}")

    def count(self, include_inactive: bool = False, **filters: Any) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.
        """
        try:
            query = self.db.query(self.model_class)

            if not include_inactive:
                query = self._filter_active(query)

            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)

            return query.count()
        except Exception as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al contar {self.resource_name.lower()}")

    # ==================== Escritura ====================

    def create(self, entity: T) -> T:
        """
        Crea una nueva entidad.

        Args:
            entity: La entidad a crear

        Returns:
            The created entity
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except Exception as e:
            logger.error(f"Error creating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al crear {self.resource_name.lower()}")

    def update(self, entity: T) -> T:
        """
        Actualiza una entidad existente.

        Args:
            entity: La entidad a actualizar

        Returns:
            The updated entity
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except Exception as e:
            logger.error(f"Error updating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al actualizar {self.resource_name.lower()}")

    def delete(self, entity: T, hard: bool = False) -> None:
        """
        Elimina una entidad (eliminación suave por defecto).

        Args:
            entity: La entidad a eliminar
            hard: Si True, realizar eliminación dura; de lo contrario, eliminación suave
        """
        try:
            if hard:
                self.db.delete(entity)
            else:
                self._mark_inactive(entity)
                self.db.add(entity)

            self.db.flush()
        except Exception as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al eliminar {self.resource_name.lower()}")

    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except Exception as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")

    def rollback(self) -> None:
        """Realiza el rollback de la transacción actual."""
        self.db.rollback()
