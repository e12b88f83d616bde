"""
Utilidades de seguridad: hashing de contraseñas y verificación de roles.
"""

from typing import Optional
import logging

import bcrypt

from config import settings
from core.exceptions import ForbiddenException

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Genera un hash bcrypt con sal aleatoria.

    Args:
        password: Contraseña en texto plano
        rounds: Factor de costo (por defecto `settings.bcrypt_rounds`)

    Returns:
        Hash en formato modular crypt ($2b$<costo>$...), listo para guardar
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Verifica una contraseña contra el hash bcrypt almacenado.

    Un hash vacío o corrupto nunca coincide.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError as e:
        # hash mal formado o contraseña de más de 72 bytes
        logger.warning(f"No se pudo verificar la contraseña: {e}")
        return False


def require_role(user_role: str, *allowed_roles: str) -> None:
    """
    Check if user has one of the allowed roles.

    Args:
        user_role: Role of the current user
        allowed_roles: Tuple of allowed roles

    Raises:
        ForbiddenException: If user role is not in allowed roles
    """
    if user_role not in allowed_roles:
        raise ForbiddenException(
            message="Permisos insuficientes",
            details={
                "user_role": user_role,
                "required_roles": list(allowed_roles)
            }
        )
