"""Readiness gate guarding access to the skill index.

States move ``uninitialized -> building -> (ready | failed)``; a rebuild goes
back to ``building``. Consumers block in :meth:`ReadinessGate.wait_ready`
until the index is ready, and get :class:`RegistryNotReadyError` when the
build failed or the wait timed out.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Optional

from skillful.errors import RegistryNotReadyError


class ReadyState(str, Enum):
    UNINITIALIZED = "uninitialized"
    BUILDING = "building"
    READY = "ready"
    FAILED = "failed"


_SETTLED = (ReadyState.READY, ReadyState.FAILED)


class ReadinessGate:
    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._state = ReadyState.UNINITIALIZED
        self._error: Optional[BaseException] = None

    @property
    def state(self) -> ReadyState:
        with self._condition:
            return self._state

    @property
    def error(self) -> Optional[BaseException]:
        with self._condition:
            return self._error

    def mark_building(self) -> None:
        self._transition(ReadyState.BUILDING)

    def mark_ready(self) -> None:
        self._transition(ReadyState.READY)

    def mark_failed(self, error: BaseException) -> None:
        self._transition(ReadyState.FAILED, error)

    def wait_ready(self, timeout: Optional[float] = None) -> None:
        with self._condition:
            self._condition.wait_for(lambda: self._state in _SETTLED, timeout)
            if self._state == ReadyState.READY:
                return
            raise RegistryNotReadyError(self._state.value, self._error)

    def _transition(
        self, state: ReadyState, error: Optional[BaseException] = None
    ) -> None:
        with self._condition:
            self._state = state
            self._error = error
            self._condition.notify_all()
