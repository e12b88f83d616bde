"""
Service for Usuario business logic.

Handles all business operations related to usuarios (users).
"""

from typing import List, Optional, Dict, Any
import logging

from services.base_service import BaseService
from repositories.usuario_repository import UsuarioRepository
from database.models import UsuarioORM
from models.usuarios import (
    UsuarioCreate,
    UsuarioUpdateRequest,
    Usuario,
    Role,
    EstadoUsuario,
    PUBLIC_ROLES,
)
from core.exceptions import DuplicateException, ForbiddenException
from core.security import hash_password
from core.utils import enum_to_value, apply_updates

logger = logging.getLogger(__name__)


class UsuarioService(BaseService[UsuarioORM, UsuarioRepository]):
    """Service for managing usuario business logic."""

    def __init__(self, repository: UsuarioRepository):
        """
        Initialize usuario service.

        Args:
            repository: UsuarioRepository instance
        """
        super().__init__(repository)

    def register_usuario(self, usuario_data: UsuarioCreate) -> Usuario:
        """
        Public self-registration.

        Raises:
            ForbiddenException: If a staff role is requested
            DuplicateException: If correo already exists
        """
        if usuario_data.rol not in PUBLIC_ROLES:
            raise ForbiddenException(
                message="El registro público solo permite los roles ADOPTANTE o VISITANTE",
                details={"rol": usuario_data.rol.value}
            )
        return self.create_usuario(usuario_data)

    def create_usuario(self, usuario_data: UsuarioCreate) -> Usuario:
        """
        Create a new usuario (estado ACTIVO) with the role given in the payload.

        Args:
            usuario_data: Usuario creation data

        Returns:
            Created usuario

        Raises:
            DuplicateException: If correo already exists
        """
        if self.repository.exists_correo(usuario_data.correo):
            raise DuplicateException(
                resource="Usuario",
                field="correo",
                value=usuario_data.correo
            )

        usuario_orm = UsuarioORM(
            nombre=usuario_data.nombre,
            correo=usuario_data.correo,
            telefono=usuario_data.telefono,
            direccion=usuario_data.direccion,
            rol=enum_to_value(usuario_data.rol),
            password_hash=hash_password(usuario_data.password),
            estado=EstadoUsuario.ACTIVO.value,
        )

        created = self.repository.create(usuario_orm)
        self.repository.commit()

        logger.info(f"Usuario {created.id} ({created.correo}) creado con rol {created.rol}")

        return self._to_response_model(created)

    def get_usuario(self, usuario_id: int) -> Usuario:
        """
        Get a usuario by ID (also when INACTIVO).

        Raises:
            NotFoundException: If usuario not found
        """
        usuario = self.repository.get_by_id_or_fail(usuario_id)
        return self._to_response_model(usuario)

    def get_usuarios(
        self,
        rol: Optional[Role] = None,
        include_inactive: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Get list of usuarios, ACTIVO only unless `include_inactive`.

        Args:
            rol: Filter by role (optional)
            include_inactive: Include INACTIVO users
        """
        if rol:
            usuarios = self.repository.find_by_rol(
                rol=enum_to_value(rol),
                include_inactive=include_inactive
            )
        else:
            usuarios = self.repository.get_all(
                include_inactive=include_inactive,
                order_by="nombre"
            )

        return [self._to_response_dict(u) for u in usuarios]

    def update_usuario(
        self,
        usuario_id: int,
        usuario_update: UsuarioUpdateRequest
    ) -> Usuario:
        """
        Update profile fields of a usuario. The password is not touched here.

        Raises:
            NotFoundException: If usuario not found
            DuplicateException: If the new correo belongs to someone else
            BusinessException: If usuario is INACTIVO
        """
        usuario = self.repository.get_by_id_or_fail(usuario_id)
        self.validate_active(usuario)

        update_data = usuario_update.model_dump(exclude_unset=True)

        if "correo" in update_data and update_data["correo"] is not None:
            if self.repository.exists_correo(update_data["correo"], exclude_id=usuario_id):
                raise DuplicateException(
                    resource="Usuario",
                    field="correo",
                    value=update_data["correo"]
                )

        apply_updates(usuario, update_data)

        updated = self.repository.update(usuario)
        self.repository.commit()

        logger.info(f"Usuario {usuario_id} actualizado")

        return self._to_response_model(updated)

    def change_password(self, usuario_id: int, new_password: str) -> None:
        """
        Replace a usuario's password hash.

        Raises:
            NotFoundException: If usuario not found
        """
        usuario = self.repository.get_by_id_or_fail(usuario_id)

        usuario.password_hash = hash_password(new_password)

        self.repository.update(usuario)
        self.repository.commit()

        logger.info(f"Contraseña actualizada para usuario {usuario_id}")

    def deactivate_usuario(self, usuario_id: int) -> None:
        """
        Soft delete: estado pasa a INACTIVO.

        Raises:
            NotFoundException: If usuario not found
            BusinessException: If usuario is already INACTIVO
        """
        self.delete(usuario_id, hard=False)

    def _to_response_model(self, usuario: UsuarioORM) -> Usuario:
        """
        Convert ORM model to Pydantic response model (without password hash).
        """
        return Usuario(
            id_usuario=usuario.id,
            nombre=usuario.nombre,
            correo=usuario.correo,
            telefono=usuario.telefono,
            direccion=usuario.direccion,
            rol=usuario.rol,
            estado=usuario.estado,
            fecha_registro=usuario.fecha_registro
        )

    def _to_response_dict(self, usuario: UsuarioORM) -> Dict[str, Any]:
        return self._to_response_model(usuario).model_dump(mode="json")
