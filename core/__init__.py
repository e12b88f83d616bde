""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Excepciones personalizadas
- Utilidades de seguridad (bcrypt, roles)
- Limitador de intentos de login
"""

from .exceptions import (
    AppException,
    BusinessException,
    NotFoundException,
    UnauthorizedException,
    InvalidCredentialsException,
    InactiveAccountException,
    ValidationException,
    DuplicateException,
    ForbiddenException,
    TooManyRequestsException,
    DatabaseException,
)
from .security import (
    hash_password,
    verify_password,
    require_role,
)
from .rate_limit import (
    SlidingWindowRateLimiter,
    login_rate_limiter,
    limit_login_attempts,
)
from .utils import (
    enum_to_value,
    apply_updates,
)

__all__ = [
    # Excepciones
    "AppException",
    "BusinessException",
    "NotFoundException",
    "UnauthorizedException",
    "InvalidCredentialsException",
    "InactiveAccountException",
    "ValidationException",
    "DuplicateException",
    "ForbiddenException",
    "TooManyRequestsException",
    "DatabaseException",
    # seguridad
    "hash_password",
    "verify_password",
    "require_role",
    # rate limit
    "SlidingWindowRateLimiter",
    "login_rate_limiter",
    "limit_login_attempts",
    # utils
    "enum_to_value",
    "apply_updates",
]
