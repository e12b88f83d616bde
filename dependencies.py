"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Every service built for one request
shares that request's database session.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from repositories.usuario_repository import UsuarioRepository
from repositories.animal_repository import AnimalRepository
from repositories.historial_repository import HistorialRepository
from repositories.tarea_repository import TareaRepository
from repositories.solicitud_repository import SolicitudRepository
from services.auth_service import AuthService
from services.usuario_service import UsuarioService
from services.animal_service import AnimalService
from services.historial_service import HistorialService
from services.tarea_service import TareaService
from services.solicitud_service import SolicitudService


# ==================== Service Dependencies ====================

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UsuarioRepository(db))


def get_usuario_service(db: Session = Depends(get_db)) -> UsuarioService:
    """
    Get UsuarioService instance.

    Example:
        ```python
        @router.get("/usuarios")
        def get_usuarios(
            service: UsuarioService = Depends(get_usuario_service)
        ):
            return service.get_usuarios(...)
        ```
    """
    return UsuarioService(UsuarioRepository(db))


def get_animal_service(db: Session = Depends(get_db)) -> AnimalService:
    return AnimalService(AnimalRepository(db))


def get_historial_service(db: Session = Depends(get_db)) -> HistorialService:
    """HistorialService with the animal repository used to validate `animal_id`."""
    return HistorialService(HistorialRepository(db), AnimalRepository(db))


def get_tarea_service(db: Session = Depends(get_db)) -> TareaService:
    """TareaService with the usuario repository used to validate `id_voluntario`."""
    return TareaService(TareaRepository(db), UsuarioRepository(db))


def get_solicitud_service(db: Session = Depends(get_db)) -> SolicitudService:
    """SolicitudService with the animal repository used for the availability check."""
    return SolicitudService(SolicitudRepository(db), AnimalRepository(db))
