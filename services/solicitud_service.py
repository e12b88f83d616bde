"""
Service for SolicitudAdopcion business logic.

Ciclo de vida de las solicitudes de adopción: creación sujeta a la
disponibilidad del animal, cambios de estado por el staff y baja lógica.
"""

from typing import List, Optional, Dict, Any
import logging

from services.base_service import BaseService
from repositories.solicitud_repository import SolicitudRepository
from repositories.animal_repository import AnimalRepository
from database.models import SolicitudAdopcionORM
from models.solicitudes import (
    SolicitudCreate,
    SolicitudUpdate,
    Solicitud,
    EstadoSolicitud,
    TRANSICIONES_SOLICITUD,
)
from core.exceptions import NotFoundException, ValidationException, BusinessException
from core.utils import enum_to_value
from config import settings

logger = logging.getLogger(__name__)


class SolicitudService(BaseService[SolicitudAdopcionORM, SolicitudRepository]):
    """Service for managing solicitudes de adopción."""

    def __init__(
        self,
        repository: SolicitudRepository,
        animal_repository: AnimalRepository,
        enforce_transitions: Optional[bool] = None
    ):
        """
        Args:
            repository: SolicitudRepository instance
            animal_repository: AnimalRepository para comprobar disponibilidad
            enforce_transitions: Validar el grafo de estados
                (por defecto `settings.enforce_solicitud_transitions`)
        """
        super().__init__(repository)
        self.animal_repository = animal_repository
        self.enforce_transitions = (
            settings.enforce_solicitud_transitions
            if enforce_transitions is None
            else enforce_transitions
        )

    def get_solicitudes(self, estado: Optional[EstadoSolicitud] = None) -> List[Dict[str, Any]]:
        solicitudes = self.repository.find_activas(estado=enum_to_value(estado))
        return [self._to_response_dict(s) for s in solicitudes]

    def get_solicitud(self, solicitud_id: int) -> Solicitud:
        """
        Get solicitud by ID, aunque esté dada de baja.

        Raises:
            NotFoundException: If solicitud not found
        """
        return self._to_response_model(self.repository.get_by_id_or_fail(solicitud_id))

    def get_solicitudes_usuario(self, id_usuario: int) -> List[Dict[str, Any]]:
        """Solicitudes activas del usuario autenticado."""
        return [self._to_response_dict(s) for s in self.repository.find_by_usuario(id_usuario)]

    def create_solicitud(self, id_usuario: int, data: SolicitudCreate) -> Solicitud:
        """
        Crea una solicitud PENDIENTE para `id_usuario`.

        El animal se lee con bloqueo de fila en la misma transacción que el
        insert, así dos solicitudes simultáneas no ven ambas un animal
        disponible que luego cambia de estado. Crear la solicitud no modifica
        el estado del animal.

        Raises:
            NotFoundException: If the animal does not exist
            ValidationException: If the animal is not DISPONIBLE or was deactivated
        """
        try:
            animal = self.animal_repository.get_for_update(data.id_animal)
            if animal is None:
                raise NotFoundException(resource="Animal", identifier=data.id_animal)

            if not self.animal_repository.is_available(animal):
                raise ValidationException(
                    message="El animal no está disponible para adopción",
                    field="id_animal",
                    details={"estado": animal.estado, "activo": bool(animal.activo)}
                )

            solicitud_orm = SolicitudAdopcionORM(
                id_usuario=id_usuario,
                id_animal=data.id_animal,
                observaciones=data.observaciones,
                estado=EstadoSolicitud.PENDIENTE.value,
                activo=True,
            )
            created = self.repository.create(solicitud_orm)
            self.repository.commit()
        except (NotFoundException, ValidationException):
            # libera el bloqueo de la fila
            self.repository.rollback()
            raise

        logger.info(
            f"Solicitud {created.id} creada por usuario {id_usuario} "
            f"para animal {data.id_animal}"
        )

        return self._to_response_model(created)

    def update_solicitud(self, solicitud_id: int, data: SolicitudUpdate) -> Solicitud:
        """
        Cambia el estado (y opcionalmente las observaciones) de una solicitud.

        Raises:
            NotFoundException: If solicitud not found
            BusinessException: If it was deactivated, or the transition is not
                allowed while transitions are enforced
        """
        solicitud = self.repository.get_by_id_or_fail(solicitud_id)
        self.validate_active(solicitud)

        nuevo = data.estado
        if self.enforce_transitions:
            self.validate_transition(EstadoSolicitud(solicitud.estado), nuevo)

        solicitud.estado = nuevo.value
        if data.observaciones is not None:
            solicitud.observaciones = data.observaciones

        updated = self.repository.update(solicitud)
        self.repository.commit()

        logger.info(f"Solicitud {solicitud_id} pasó a {nuevo.value}")

        return self._to_response_model(updated)

    @staticmethod
    def validate_transition(actual: EstadoSolicitud, nuevo: EstadoSolicitud) -> None:
        """
        Raises:
            BusinessException: If `actual -> nuevo` is not in the graph
        """
        if nuevo not in TRANSICIONES_SOLICITUD[actual]:
            raise BusinessException(
                f"Transición de estado no permitida: {actual.value} -> {nuevo.value}",
                details={
                    "estado_actual": actual.value,
                    "estado_solicitado": nuevo.value,
                    "permitidos": sorted(e.value for e in TRANSICIONES_SOLICITUD[actual]),
                }
            )

    def deactivate_solicitud(self, solicitud_id: int) -> None:
        self.delete(solicitud_id, hard=False)

    def _to_response_model(self, solicitud: SolicitudAdopcionORM) -> Solicitud:
        return Solicitud(
            id_solicitud=solicitud.id,
            id_usuario=solicitud.id_usuario,
            id_animal=solicitud.id_animal,
            observaciones=solicitud.observaciones,
            estado=solicitud.estado,
            activo=bool(solicitud.activo),
            fecha_solicitud=solicitud.fecha_solicitud,
            nombre_usuario=solicitud.usuario.nombre if solicitud.usuario else None,
            nombre_animal=solicitud.animal.nombre if solicitud.animal else None,
        )

    def _to_response_dict(self, solicitud: SolicitudAdopcionORM) -> Dict[str, Any]:
        return self._to_response_model(solicitud).model_dump(mode="json")
