"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .usuario_repository import UsuarioRepository
from .animal_repository import AnimalRepository
from .historial_repository import HistorialRepository
from .tarea_repository import TareaRepository
from .solicitud_repository import SolicitudRepository

__all__ = [
    "BaseRepository",
    "UsuarioRepository",
    "AnimalRepository",
    "HistorialRepository",
    "TareaRepository",
    "SolicitudRepository",
]
