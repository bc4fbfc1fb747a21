from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol


class StateBackend(Protocol):
    """Where the persisted layout (one JSON value per key) lives."""

    def load(self) -> Dict[str, Any]:
        raise NotImplementedError

    def save(self, payload: Dict[str, Any]) -> None:
        raise NotImplementedError


class InMemoryBackend:
    def __init__(self, payload: Optional[Dict[str, Any]] = None):
        self._payload: Dict[str, Any] = copy.deepcopy(payload or {})
        self.save_count = 0

    def load(self) -> Dict[str, Any]:
        return copy.deepcopy(self._payload)

    def save(self, payload: Dict[str, Any]) -> None:
        self._payload = copy.deepcopy(payload)
        self.save_count += 1


class JsonFileBackend:
    """One JSON document keyed like the browser's localStorage."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        return json.loads(self._path.read_text(encoding="utf-8") or "{}")

    def save(self, payload: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise
