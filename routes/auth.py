"""
Login route.

El limitador de intentos corre como dependencia, antes de tocar la base de
datos; cada intento consume cupo sea cual sea su resultado.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
from typing import Optional
import logging

from core.exceptions import AppException, DatabaseException
from core.rate_limit import limit_login_attempts, client_ip
from dependencies import get_auth_service
from services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


class LoginRequest(BaseModel):
    """Request model for JSON login."""
    correo: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UsuarioSesion(BaseModel):
    id_usuario: int
    nombre: str
    correo: str
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    rol: str
    estado: str


class LoginResponse(BaseModel):
    """Response model for login with user data."""
    token: str
    usuario: UsuarioSesion


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(limit_login_attempts)],
)
def login(
    login_data: LoginRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    """
    Login con correo y contraseña.

    Returns:
        Token JWT y datos públicos del usuario

    Errors:
        401 credenciales inválidas o usuario inactivo, 429 demasiados intentos
    """
    try:
        return service.login(login_data.correo, login_data.password, ip=client_ip(request))
    except AppException:
        raise
    except Exception as e:
        logger.error(f"Error en login: {e}", exc_info=True)
        raise DatabaseException("Error al iniciar sesión")
