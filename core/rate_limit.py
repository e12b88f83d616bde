"""
Limitador de intentos por IP con ventana deslizante.

Se usa para frenar ataques de fuerza bruta sobre el login: cada intento
(exitoso o no) consume un cupo de la ventana de la IP de origen.
"""

from collections import deque
from threading import Lock
from typing import Callable, Deque, Dict, Optional
import logging
import math
import time

from fastapi import Request

from config import settings
from core.exceptions import TooManyRequestsException

logger = logging.getLogger(__name__)


class SlidingWindowRateLimiter:
    """
    Registra los instantes de cada intento por clave y rechaza los que
    excedan `max_attempts` dentro de los últimos `window_seconds`.

    Las claves cuya ventana quedó vacía se descartan: una vez por ventana se
    barren todas las claves cuyo último intento ya expiró.
    """

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        message: str,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self.message = message
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = Lock()
        self._last_sweep = clock()

    def __len__(self) -> int:
        """Número de claves con intentos registrados."""
        with self._lock:
            return len(self._hits)

    def hit(self, key: str) -> None:
        """
        Registra un intento para `key`.

        Raises:
            TooManyRequestsException: si la ventana de `key` ya está llena
        """
        now = self._clock()
        with self._lock:
            self._sweep(now)
            hits = self._hits.get(key)
            if hits is not None:
                self._prune(hits, now)
                if len(hits) >= self.max_attempts:
                    retry_after = max(1, math.ceil(hits[0] + self.window_seconds - now))
                    logger.warning(f"Límite de intentos alcanzado para {key!r}")
                    raise TooManyRequestsException(self.message, retry_after=retry_after)
            else:
                hits = self._hits[key] = deque()
            hits.append(now)

    def remaining(self, key: str) -> int:
        """Intentos que le quedan a `key` en la ventana actual."""
        now = self._clock()
        with self._lock:
            hits = self._hits.get(key)
            if not hits:
                return self.max_attempts
            active = sum(1 for t in hits if t > now - self.window_seconds)
            return max(0, self.max_attempts - active)

    def reset(self, key: Optional[str] = None) -> None:
        """Olvida los intentos de `key`, o de todas las claves."""
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)

    def _prune(self, hits: Deque[float], now: float) -> None:
        while hits and hits[0] <= now - self.window_seconds:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # se llama con el lock tomado
        if now - self._last_sweep < self.window_seconds:
            return
        expired = [k for k, hits in self._hits.items() if hits[-1] <= now - self.window_seconds]
        for k in expired:
            del self._hits[k]
        self._last_sweep = now
        if expired:
            logger.debug(f"Limitador: {len(expired)} claves expiradas descartadas")


login_rate_limiter = SlidingWindowRateLimiter(
    max_attempts=settings.login_rate_limit_attempts,
    window_seconds=settings.login_rate_limit_window_seconds,
    message=settings.login_rate_limit_message,
)


def client_ip(request: Request) -> str:
    """IP de origen de la petición ('unknown' si el servidor no la expone)."""
    return request.client.host if request.client else "unknown"


def limit_login_attempts(request: Request) -> None:
    """Dependencia FastAPI que aplica `login_rate_limiter` a la IP del cliente."""
    login_rate_limiter.hit(client_ip(request))
