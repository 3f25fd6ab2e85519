from __future__ import annotations
import threading
from typing import Optional

from .models import Bearer

class Session:
    """
    Single bearer-token slot for one APIClient.
    The token is swapped as a whole under a lock; there is no logout.
    """

    def __init__(self, bearer: Optional[Bearer] = None):
        self._lock = threading.Lock()
        self._bearer = dict(bearer) if bearer is not None else None

    @property
    def bearer(self) -> Optional[Bearer]:
        with self._lock:
            return dict(self._bearer) if self._bearer is not None else None

    def store(self, bearer: Bearer) -> None:
        with self._lock:
            self._bearer = dict(bearer)

    def auth_header(self) -> Optional[dict[str, str]]:
        bearer = self.bearer
        if bearer is None:
            return None
        return {"Authorization": f"Bearer {bearer['token']}"}
