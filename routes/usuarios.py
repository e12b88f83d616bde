"""
Usuario routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for usuario endpoints.
All business logic is delegated to the UsuarioService layer.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import Optional
import logging

from models.usuarios import (
    Usuario,
    UsuarioCreate,
    Role,
    UsuarioUpdateRequest,
    UsuarioPrivilegedCreate,
    PasswordChangeRequest,
)
from models.common import (
    create_success_response,
    create_list_response,
    create_delete_response,
)
from core.exceptions import AppException, DatabaseException
from services.usuario_service import UsuarioService
from dependencies import get_usuario_service
from auth import require_any_role

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/usuarios", tags=["usuarios"])


# ==================== Endpoints ====================


@router.post("/register", status_code=status.HTTP_201_CREATED)
def registrar_usuario(
    payload: UsuarioCreate,
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    Registro público (sin autenticación).

    IMPORTANT: solo admite los roles ADOPTANTE (por defecto) y VISITANTE.
    Para crear voluntarios o administradores use POST /api/usuarios.
    """
    try:
        usuario = service.register_usuario(payload)
        return create_success_response("Usuario registrado correctamente", usuario)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error registering usuario: {e}", exc_info=True)
        raise DatabaseException("Error al registrar usuario")


@router.post("", status_code=status.HTTP_201_CREATED)
def crear_usuario(
    payload: UsuarioPrivilegedCreate,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    Create a new usuario with any role (ADMIN ONLY).

    Args:
        payload: Usuario creation data with role
        current_user: Current authenticated admin user
        service: Injected UsuarioService

    Returns:
        Created usuario
    """
    try:
        usuario = service.create_usuario(payload)
        return create_success_response("Usuario creado correctamente", usuario)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error creating privileged usuario: {e}", exc_info=True)
        raise DatabaseException("Error al crear usuario")


@router.get("")
def listar_usuarios(
    rol: Optional[Role] = Query(None, description="Filtrar por rol"),
    include_inactive: bool = Query(False, description="Incluir usuarios INACTIVO"),
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    List usuarios (ADMIN ONLY).

    Por defecto solo los ACTIVO; `include_inactive=true` muestra todos.
    """
    try:
        return create_list_response(
            service.get_usuarios(rol=rol, include_inactive=include_inactive)
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error listing usuarios: {e}", exc_info=True)
        raise DatabaseException("Error al listar usuarios")


@router.get("/{usuario_id}", response_model=Usuario)
def obtener_usuario(
    usuario_id: int,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    Get a usuario by ID (ADMIN ONLY), también si está INACTIVO.
    """
    try:
        return service.get_usuario(usuario_id)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error getting usuario {usuario_id}: {e}", exc_info=True)
        raise DatabaseException("Error al obtener usuario")


@router.put("/{usuario_id}")
def actualizar_usuario(
    usuario_id: int,
    payload: UsuarioUpdateRequest,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    Update profile fields (nombre, correo, telefono, direccion, rol).

    La contraseña se cambia con PATCH /api/usuarios/{id}/password.
    """
    try:
        usuario = service.update_usuario(usuario_id, payload)
        return create_success_response("Usuario actualizado correctamente", usuario)
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error updating usuario {usuario_id}: {e}", exc_info=True)
        raise DatabaseException("Error al actualizar usuario")


@router.patch("/{usuario_id}/password")
def cambiar_password(
    usuario_id: int,
    payload: PasswordChangeRequest,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """Reemplaza la contraseña; siempre se guarda un hash bcrypt nuevo."""
    try:
        service.change_password(usuario_id, payload.password)
        return create_success_response(
            "Contraseña actualizada correctamente",
            {"id_usuario": usuario_id}
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error changing password for usuario {usuario_id}: {e}", exc_info=True)
        raise DatabaseException("Error al cambiar la contraseña")


@router.delete("/{usuario_id}")
def desactivar_usuario(
    usuario_id: int,
    current_user=Depends(require_any_role(Role.ADMIN)),
    service: UsuarioService = Depends(get_usuario_service),
):
    """
    Deactivate a usuario (soft delete: estado = INACTIVO).

    The usuario can no longer log in but stays retrievable by ID.
    """
    try:
        service.deactivate_usuario(usuario_id)
        return create_delete_response(
            message="Usuario desactivado correctamente",
            deleted_id=usuario_id,
            soft_delete=True
        )
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error deactivating usuario {usuario_id}: {e}", exc_info=True)
        raise DatabaseException("Error al desactivar usuario")
