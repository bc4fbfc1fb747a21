from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .backends import StateBackend
from .state import AppState

logger = logging.getLogger(__name__)


class StateStore:
    """Single writer for the application state.

    ``transaction()`` hands out a working copy; on normal exit the copy becomes
    the current state and is persisted once, on error it is dropped. Nested
    transactions join the outermost one, so a multi-entity cascade commits or
    rolls back as a whole.
    """

    def __init__(self, backend: StateBackend, *, state: Optional[AppState] = None):
        self._backend = backend
        self._lock = threading.RLock()
        self._state = state if state is not None else AppState.from_payload(backend.load())
        self._working: Optional[AppState] = None

    @property
    def backend(self) -> StateBackend:
        return self._backend

    def view(self) -> AppState:
        """Current state for reads (the working copy when called inside a transaction)."""
        with self._lock:
            return self._working if self._working is not None else self._state

    @contextmanager
    def transaction(self) -> Iterator[AppState]:
        with self._lock:
            if self._working is not None:
                yield self._working
                return

            working = self._state.copy()
            self._working = working
            try:
                yield working
                if working == self._state:
                    logger.debug("transaction changed nothing")
                    return
                self._backend.save(working.to_payload())
            except BaseException:
                logger.debug("transaction rolled back")
                raise
            finally:
                self._working = None
            self._state = working

    def reload(self) -> None:
        with self._lock:
            self._state = AppState.from_payload(self._backend.load())
