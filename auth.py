import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi import Depends, Request
from pydantic import BaseModel

from config import settings
from core.exceptions import UnauthorizedException, ForbiddenException
from core.security import require_role
from models.usuarios import Role

logger = logging.getLogger(__name__)

# auto_error=False: la ausencia de token se reporta con nuestro propio 401
bearer_scheme = HTTPBearer(auto_error=False)


class TokenIdentity(BaseModel):
    """Identidad extraída de un token válido (no se consulta la base de datos)."""
    id: int
    correo: str
    rol: Role


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token including standard claims (sub, iat, exp, iss, aud).

    `data` should include an identifier under the "sub" key (user id).
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(seconds=settings.jwt_expires_in))
    if "sub" not in to_encode:
        raise ValueError("`data` must include `sub` (subject / user id)")
    to_encode["sub"] = str(to_encode["sub"])
    to_encode.update({
        "exp": expire,
        "iat": now,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_token_for_usuario(usuario) -> str:
    """Token de sesión con la identidad que usa el control de acceso."""
    return create_access_token({
        "sub": usuario.id,
        "id": usuario.id,
        "correo": usuario.correo,
        "rol": usuario.rol,
    })


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token.

    Validates signature, expiration, issuer and audience. Raises
    ForbiddenException(403) for any invalid token state.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
        return payload
    except ExpiredSignatureError:
        logger.info("Token expirado")
        raise ForbiddenException("Token inválido o expirado")
    except JWTError as e:
        logger.info(f"Token inválido o claim mismatch: {e}")
        raise ForbiddenException("Token inválido o expirado")


def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenIdentity:
    """Dependencia que exige un token Bearer válido.

    - Sin cabecera Authorization (o esquema distinto de Bearer): 401
    - Token con firma, emisor, audiencia o expiración inválidos: 403

    La identidad queda además en `request.state.usuario`.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Token no proporcionado")

    payload = decode_token(credentials.credentials)
    try:
        identity = TokenIdentity(
            id=payload.get("id", payload.get("sub")),
            correo=payload.get("correo"),
            rol=payload.get("rol"),
        )
    except ValueError as e:
        logger.info(f"Token con claims incompletos: {e}")
        raise ForbiddenException("Token inválido o expirado")

    request.state.usuario = identity
    return identity


def require_any_role(*allowed_roles: Role):
    """Dependency factory that ensures the current user has one of the allowed roles.

    Usage in route: current_user = Depends(require_any_role(Role.ADMIN, Role.VOLUNTARIO))
    """
    allowed = tuple(r.value for r in allowed_roles)

    def _dependency(current_user: TokenIdentity = Depends(get_current_identity)) -> TokenIdentity:
        require_role(current_user.rol.value, *allowed)
        return current_user

    return _dependency


# Conjuntos de roles usados por los routers
STAFF_ROLES = (Role.ADMIN, Role.VOLUNTARIO)
SOLICITANTE_ROLES = (Role.ADMIN, Role.VOLUNTARIO, Role.ADOPTANTE)
