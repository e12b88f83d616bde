"""
Utilidades del sistema.
"""
from .datetime_utils import get_local_now, get_local_timezone, local_now_naive, local_today

__all__ = ["get_local_now", "get_local_timezone", "local_now_naive", "local_today"]
