from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    VOLUNTARIO = "VOLUNTARIO"
    ADOPTANTE = "ADOPTANTE"
    VISITANTE = "VISITANTE"


class EstadoUsuario(str, Enum):
    ACTIVO = "ACTIVO"
    INACTIVO = "INACTIVO"


# Roles que cualquiera puede elegir al registrarse sin autenticación
PUBLIC_ROLES = (Role.ADOPTANTE, Role.VISITANTE)


def _check_password(v: str) -> str:
    if not v.strip():
        raise ValueError("no puede estar vacío")
    # bcrypt solo admite 72 bytes
    if len(v.encode("utf-8")) > 72:
        raise ValueError("no puede superar 72 bytes")
    return v


class UsuarioBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    correo: str = Field(..., min_length=3, max_length=150, pattern=r"^[^@\s]+@[^@\s]+$")
    telefono: Optional[str] = Field(None, max_length=20)
    direccion: Optional[str] = Field(None, max_length=255)


class UsuarioCreate(UsuarioBase):
    """Modelo para el registro público de usuarios.

    Sin autenticación solo se aceptan los roles ADOPTANTE y VISITANTE;
    los roles de staff se crean desde el endpoint de administración.
    """
    rol: Role = Role.ADOPTANTE
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class UsuarioPrivilegedCreate(UsuarioCreate):
    """Modelo para que un ADMIN cree usuarios con cualquier rol."""
    rol: Role = Field(..., description="Rol del nuevo usuario")


class UsuarioUpdateRequest(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=100)
    correo: Optional[str] = Field(None, min_length=3, max_length=150, pattern=r"^[^@\s]+@[^@\s]+$")
    telefono: Optional[str] = Field(None, max_length=20)
    direccion: Optional[str] = Field(None, max_length=255)
    rol: Optional[Role] = None


class PasswordChangeRequest(BaseModel):
    password: str = Field(..., min_length=1, max_length=72)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password(v)


class Usuario(BaseModel):
    """Proyección pública del usuario: nunca incluye el hash de la contraseña."""
    id_usuario: int
    nombre: str
    correo: str
    telefono: Optional[str] = None
    direccion: Optional[str] = None
    rol: Role
    estado: EstadoUsuario
    fecha_registro: Optional[datetime] = None
