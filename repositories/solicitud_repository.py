"""
Repositorio para las solicitudes de adopción.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import SolicitudAdopcionORM


class SolicitudRepository(BaseRepository[SolicitudAdopcionORM]):
    """Repositorio de solicitudes de adopción (borrado lógico con `activo`)."""

    resource_name = "Solicitud"

    def __init__(self, db: Session):
        super().__init__(db, SolicitudAdopcionORM)

    def find_activas(self, estado: Optional[str] = None) -> List[SolicitudAdopcionORM]:
        """Solicitudes activas, las más recientes primero."""
        return self.get_all(order_by="fecha_solicitud", order_desc=True, estado=estado)

    def find_by_usuario(self, id_usuario: int) -> List[SolicitudAdopcionORM]:
        """Solicitudes activas hechas por `id_usuario`."""
        return self.get_all(order_by="fecha_solicitud", order_desc=True, id_usuario=id_usuario)
