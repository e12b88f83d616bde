from .auth import router as auth_router
from .usuarios import router as usuarios_router
from .animales import router as animales_router
from .historial import router as historial_router
from .tareas import router as tareas_router
from .solicitudes import router as solicitudes_router

__all__ = [
    "auth_router",
    "usuarios_router",
    "animales_router",
    "historial_router",
    "tareas_router",
    "solicitudes_router",
]
