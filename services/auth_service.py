"""
Servicio de autenticación: valida credenciales y emite el token de sesión.
"""

from typing import Dict, Any
import logging

from repositories.usuario_repository import UsuarioRepository
from core.exceptions import InvalidCredentialsException, InactiveAccountException
from core.security import verify_password
from models.usuarios import EstadoUsuario
from auth import create_token_for_usuario

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit.login")


class AuthService:
    """Login por correo y contraseña."""

    def __init__(self, repository: UsuarioRepository):
        self.repository = repository

    def login(self, correo: str, password: str, ip: str = "unknown") -> Dict[str, Any]:
        """
        Autentica a un usuario.

        El orden de las comprobaciones importa: la cuenta inactiva solo se
        revela a quien ya demostró conocer la contraseña.

        Args:
            correo: Correo registrado
            password: Contraseña en texto plano
            ip: IP de origen (solo para la bitácora)

        Returns:
            {"token": ..., "usuario": {...}} sin el hash de la contraseña

        Raises:
            InvalidCredentialsException: Correo desconocido o contraseña incorrecta
            InactiveAccountException: Credenciales correctas pero estado INACTIVO
        """
        usuario = self.repository.find_by_correo(correo)

        if usuario is None or not usuario.password_hash:
            audit_logger.warning(f"Login fallido (usuario inexistente) correo={correo!r} ip={ip}")
            raise InvalidCredentialsException()

        if not verify_password(password, usuario.password_hash):
            audit_logger.warning(f"Login fallido (contraseña incorrecta) correo={correo!r} ip={ip}")
            raise InvalidCredentialsException()

        if usuario.estado != EstadoUsuario.ACTIVO.value:
            audit_logger.warning(f"Login rechazado (usuario inactivo) correo={correo!r} ip={ip}")
            raise InactiveAccountException()

        token = create_token_for_usuario(usuario)
        audit_logger.info(f"Login exitoso correo={correo!r} id={usuario.id} ip={ip}")

        return {
            "token": token,
            "usuario": {
                "id_usuario": usuario.id,
                "nombre": usuario.nombre,
                "correo": usuario.correo,
                "telefono": usuario.telefono,
                "direccion": usuario.direccion,
                "rol": usuario.rol,
                "estado": usuario.estado,
            },
        }
