"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y orquestan las operaciones entre repositorios.
"""

from .base_service import BaseService
from .auth_service import AuthService
from .usuario_service import UsuarioService
from .animal_service import AnimalService
from .historial_service import HistorialService
from .tarea_service import TareaService
from .solicitud_service import SolicitudService

__all__ = [
    "BaseService",
    "AuthService",
    "UsuarioService",
    "AnimalService",
    "HistorialService",
    "TareaService",
    "SolicitudService",
]
