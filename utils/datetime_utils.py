"""
Utilidades para manejo de fechas y zonas horarias.

Las columnas de fecha se guardan como datetime naive en la hora local
configurada (`TIMEZONE`).
"""
from datetime import datetime, date
from zoneinfo import ZoneInfo
from config import settings


def get_local_timezone() -> ZoneInfo:
    """
    Obtiene la zona horaria configurada.

    Returns:
        ZoneInfo: Zona horaria de la aplicación.
    """
    return ZoneInfo(settings.timezone)


def get_local_now() -> datetime:
    """
    Obtiene la fecha y hora actual en la zona horaria local configurada.

    Returns:
        datetime: Fecha y hora actual con zona horaria.
    """
    return datetime.now(get_local_timezone())


def local_now_naive() -> datetime:
    """Hora local sin tzinfo, lista para columnas DateTime."""
    return get_local_now().replace(tzinfo=None)


def local_today() -> date:
    """Fecha de hoy en la zona horaria configurada."""
    return get_local_now().date()
