from .usuarios import (
    Usuario,
    UsuarioCreate,
    UsuarioPrivilegedCreate,
    UsuarioUpdateRequest,
    PasswordChangeRequest,
    Role,
    EstadoUsuario,
    PUBLIC_ROLES,
)
from .animales import Animal, AnimalCreate, AnimalUpdate, EstadoAnimal
from .historial import Historial, HistorialCreate, HistorialUpdate
from .tareas import Tarea, TareaCreate, TareaUpdate
from .solicitudes import (
    Solicitud,
    SolicitudCreate,
    SolicitudUpdate,
    EstadoSolicitud,
    TRANSICIONES_SOLICITUD,
)
from .common import (
    SuccessResponse,
    ListResponse,
    ErrorResponse,
    DeleteResponse,
    HealthCheckResponse,
    create_success_response,
    create_list_response,
    create_error_response,
    create_delete_response,
)

__all__ = [
    # Usuarios
    "Usuario", "UsuarioCreate", "UsuarioPrivilegedCreate", "UsuarioUpdateRequest",
    "PasswordChangeRequest", "Role", "EstadoUsuario", "PUBLIC_ROLES",
    # Animales
    "Animal", "AnimalCreate", "AnimalUpdate", "EstadoAnimal",
    # Historial
    "Historial", "HistorialCreate", "HistorialUpdate",
    # Tareas
    "Tarea", "TareaCreate", "TareaUpdate",
    # Solicitudes
    "Solicitud", "SolicitudCreate", "SolicitudUpdate", "EstadoSolicitud",
    "TRANSICIONES_SOLICITUD",
    # Common responses
    "SuccessResponse", "ListResponse", "ErrorResponse", "DeleteResponse",
    "HealthCheckResponse",
    "create_success_response", "create_list_response", "create_error_response",
    "create_delete_response",
]
