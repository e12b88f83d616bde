"""
Servicio de tareas asignadas a voluntarios.
"""

from typing import List, Optional, Dict, Any
import logging

from services.base_service import BaseService
from repositories.tarea_repository import TareaRepository
from repositories.usuario_repository import UsuarioRepository
from database.models import TareaVoluntarioORM
from models.tareas import TareaCreate, TareaUpdate, Tarea
from core.utils import apply_updates

logger = logging.getLogger(__name__)


class TareaService(BaseService[TareaVoluntarioORM, TareaRepository]):
    """Tareas de voluntarios (borrado físico)."""

    def __init__(self, repository: TareaRepository, usuario_repository: UsuarioRepository):
        super().__init__(repository)
        self.usuario_repository = usuario_repository

    def get_tareas(self, estado: Optional[str] = None) -> List[Dict[str, Any]]:
        return [self._to_response_dict(t) for t in self.repository.find_by_estado(estado)]

    def get_tarea(self, tarea_id: int) -> Tarea:
        return self._to_response_model(self.repository.get_by_id_or_fail(tarea_id))

    def get_tareas_voluntario(self, id_voluntario: int) -> List[Dict[str, Any]]:
        """
        Tareas asignadas a un voluntario.

        Raises:
            NotFoundException: If the user does not exist
        """
        self.usuario_repository.get_by_id_or_fail(id_voluntario)
        return [self._to_response_dict(t) for t in self.repository.find_by_voluntario(id_voluntario)]

    def create_tarea(self, data: TareaCreate) -> Tarea:
        """
        Crea una tarea, opcionalmente asignada.

        Raises:
            NotFoundException: If `id_voluntario` does not exist
        """
        if data.id_voluntario is not None:
            self.usuario_repository.get_by_id_or_fail(data.id_voluntario)

        created = self.repository.create(TareaVoluntarioORM(**data.model_dump()))
        self.repository.commit()

        logger.info(f"Tarea {created.id} creada")

        return self._to_response_model(created)

    def update_tarea(self, tarea_id: int, data: TareaUpdate) -> Tarea:
        tarea = self.repository.get_by_id_or_fail(tarea_id)
        update_data = data.model_dump(exclude_unset=True)

        if update_data.get("id_voluntario") is not None:
            self.usuario_repository.get_by_id_or_fail(update_data["id_voluntario"])

        apply_updates(tarea, update_data)

        updated = self.repository.update(tarea)
        self.repository.commit()

        logger.info(f"Tarea {tarea_id} actualizada")

        return self._to_response_model(updated)

    def delete_tarea(self, tarea_id: int) -> None:
        self.delete(tarea_id, hard=True)

    def _to_response_model(self, tarea: TareaVoluntarioORM) -> Tarea:
        return Tarea(
            id_tarea=tarea.id,
            titulo=tarea.titulo,
            descripcion=tarea.descripcion,
            estado=tarea.estado,
            prioridad=tarea.prioridad,
            fecha_limite=tarea.fecha_limite,
            id_voluntario=tarea.id_voluntario,
            nombre_voluntario=tarea.voluntario.nombre if tarea.voluntario else None,
        )

    def _to_response_dict(self, tarea: TareaVoluntarioORM) -> Dict[str, Any]:
        return self._to_response_model(tarea).model_dump(mode="json")
