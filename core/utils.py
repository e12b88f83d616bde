"""
Funciones de utilidad generales.
"""

from typing import Any, Dict
from enum import Enum as PyEnum


def enum_to_value(value: Any) -> Any:
    """
    Convierte un Enum a su valor, o devuelve el valor sin cambios.

    Args:
        value: Valor a convertir

    Returns:
        Enum.value si value es un Enum, de lo contrario el valor sin cambios
    """
    if isinstance(value, PyEnum):
        return value.value
    return value


def apply_updates(entity: Any, update_data: Dict[str, Any]) -> Any:
    """
    Copia sobre `entity` los campos presentes en `update_data`.

    Los valores None se ignoran: un campo omitido o nulo conserva su valor.
    """
    for field, value in update_data.items():
        if value is not None:
            setattr(entity, field, enum_to_value(value))
    return entity
